"""
Exception Matcher — Whole-word-part lookup.

Walks the exception table in order. The first rule that matches the
entire word-part supplies its replacement; nothing partial ever counts.
"""

import re
from dataclasses import dataclass
from typing import Optional

from naamrot.core.logging import get_pass_logger
from naamrot.rules.models import ExceptionRule, MatchType, Ruleset

PASS_NAME = "s10_exceptions"
log = get_pass_logger(PASS_NAME)


@dataclass(frozen=True)
class ExceptionHit:
    """Result of an exception lookup."""
    hit: bool
    output: str
    rule_id: Optional[str] = None


class ExceptionMatcher:
    """
    Compiled view of a ruleset's exception table.

    Disabled and malformed rules are dropped at construction, so
    match() only ever sees usable entries.
    """

    def __init__(self, ruleset: Ruleset) -> None:
        self._rules: list[tuple[ExceptionRule, Optional[re.Pattern]]] = []
        for rule in ruleset.exceptions:
            if not rule.enabled:
                continue
            if not rule.is_valid:
                log.warning("malformed_exception_skipped", rule_id=rule.id)
                continue
            compiled = None
            if rule.type == MatchType.REGEX:
                try:
                    compiled = re.compile(rule.pattern, re.IGNORECASE)
                except re.error as e:
                    log.warning("invalid_pattern_skipped", rule_id=rule.id, error=str(e))
                    continue
            self._rules.append((rule, compiled))

    def __len__(self) -> int:
        return len(self._rules)

    def match(self, word_part: str) -> ExceptionHit:
        """Find the first exception matching the whole word-part."""
        lowered = word_part.lower()

        for rule, compiled in self._rules:
            if compiled is None:
                if lowered != rule.pattern.lower():
                    continue
                m = None
            else:
                m = compiled.fullmatch(word_part)
                if m is None:
                    continue

            try:
                output = rule.output.render(m, word_part)
            except Exception as e:
                log.warning(
                    "exception_output_failed",
                    rule_id=rule.id,
                    word_part=word_part,
                    error=f"{type(e).__name__}: {e}",
                )
                continue

            log.debug("exception_matched", rule_id=rule.id, word_part=word_part, output=output)
            return ExceptionHit(hit=True, output=output, rule_id=rule.id)

        return ExceptionHit(hit=False, output=word_part)
