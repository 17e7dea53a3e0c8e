"""
Rule Models — Data structures for rulesets.

Rulesets are immutable once built. Engines receive one at construction
and never modify it.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Union


class MatchType(str, Enum):
    """How an exception rule tests a word-part.

    - LITERAL: Case-insensitive equality with the whole part
    - REGEX: Case-insensitive pattern that must match the whole part
    """
    LITERAL = "literal"
    REGEX = "regex"


# (match or None for literal rules, original word-part) -> replacement
ComputeFn = Callable[[Optional[re.Match], str], str]


@dataclass(frozen=True)
class FixedOutput:
    """Exception output that is always the same string."""
    text: str

    def render(self, match: Optional[re.Match], word: str) -> str:
        return self.text


@dataclass(frozen=True)
class ComputedOutput:
    """Exception output computed from the match and the original part."""
    fn: ComputeFn
    description: str = ""

    def render(self, match: Optional[re.Match], word: str) -> str:
        return str(self.fn(match, word))

    @classmethod
    def from_template(cls, template: str) -> "ComputedOutput":
        """
        Build an output from a regex expansion template such as r"\\1AH".

        Literal rules have no groups, so only \\g<0> expands to the part.
        """
        def expand(match: Optional[re.Match], word: str) -> str:
            if match is None:
                return template.replace(r"\g<0>", word)
            return match.expand(template)

        return cls(fn=expand, description=f"template:{template}")


ExceptionOutput = Union[FixedOutput, ComputedOutput]


@dataclass(frozen=True)
class ExceptionRule:
    """A whole-word-part override.

    A rule without a pattern or output is malformed and never matches.
    """
    id: str
    type: MatchType
    pattern: Optional[str]
    output: Optional[ExceptionOutput]
    category: str = "uncategorized"
    description: str = ""
    enabled: bool = True

    @property
    def is_valid(self) -> bool:
        return bool(self.pattern) and self.output is not None


@dataclass(frozen=True)
class RulesetSettings:
    """Tunable behaviour shared by all stages."""
    # Vowels the swap stage may rewrite (O and U never swap by default)
    swappable_vowels: frozenset[str] = frozenset("AEI")
    # Starting U before N/S/F/T becomes YAU
    u_yoo_prefix: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "swappable_vowels", frozenset(v.upper() for v in self.swappable_vowels)
        )


def sort_longest_first(suffixes) -> tuple[str, ...]:
    """Upper-case and stable-sort suffixes by descending length."""
    return tuple(sorted((s.upper() for s in suffixes), key=len, reverse=True))


@dataclass(frozen=True)
class Ruleset:
    """A complete, read-only ruleset."""
    name: str
    exceptions: tuple[ExceptionRule, ...] = ()
    protected_suffixes: tuple[str, ...] = ()
    settings: RulesetSettings = field(default_factory=RulesetSettings)
    version: str = "1.0"
    description: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "exceptions", tuple(self.exceptions))
        object.__setattr__(
            self, "protected_suffixes", sort_longest_first(self.protected_suffixes)
        )

    def get_exceptions_by_category(self, category: str) -> list[ExceptionRule]:
        """Get enabled exception rules in a category, in table order."""
        return [r for r in self.exceptions if r.category == category and r.enabled]

    def get_exception(self, rule_id: str) -> Optional[ExceptionRule]:
        for rule in self.exceptions:
            if rule.id == rule_id:
                return rule
        return None
