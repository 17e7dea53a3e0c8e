"""
Ruleset Loader — Load and parse rulesets from YAML files.

A ruleset file holds three sections:

    settings:            swappable vowels, optional prefix rules
    protected_suffixes:  endings that block vowel swaps
    exceptions:          ordered whole-word-part overrides

Malformed exception entries are logged and dropped; the rest of the
ruleset still loads.
"""

import re
from pathlib import Path
from typing import Optional, Union

import yaml

from naamrot.core.logging import LogChannel, get_logger
from naamrot.rules.models import (
    ComputedOutput,
    ExceptionOutput,
    ExceptionRule,
    FixedOutput,
    MatchType,
    Ruleset,
    RulesetSettings,
)

# Default ruleset directory
RULESETS_DIR = Path(__file__).parent / "rulesets"

log = get_logger(LogChannel.RULESET)


def load_ruleset(name: str = "default") -> Ruleset:
    """
    Load a ruleset by name from the bundled rulesets directory.

    Raises:
        FileNotFoundError: If the ruleset file doesn't exist
    """
    path = RULESETS_DIR / f"{name}.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Ruleset not found: {path}")
    return load_ruleset_from_path(path)


def load_ruleset_from_path(path: Union[str, Path]) -> Ruleset:
    """Load a ruleset from an arbitrary path."""
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    data.setdefault("name", path.stem)
    ruleset = parse_ruleset(data)
    log.info(
        "ruleset_loaded",
        name=ruleset.name,
        path=str(path),
        exceptions=len(ruleset.exceptions),
        protected_suffixes=len(ruleset.protected_suffixes),
    )
    return ruleset


def parse_ruleset(data: dict) -> Ruleset:
    """Parse a ruleset from a dictionary."""
    settings_data = data.get("settings") or {}
    settings = RulesetSettings(
        swappable_vowels=frozenset(
            v.upper() for v in settings_data.get("swappable_vowels", ["A", "E", "I"])
        ),
        u_yoo_prefix=bool(settings_data.get("u_yoo_prefix", False)),
    )

    exceptions = []
    for i, rule_data in enumerate(data.get("exceptions") or []):
        rule = parse_exception(rule_data, index=i)
        if rule:
            exceptions.append(rule)

    suffixes = [str(s) for s in data.get("protected_suffixes") or [] if s]

    return Ruleset(
        name=data.get("name", "unnamed"),
        version=str(data.get("version", "1.0")),
        description=data.get("description", ""),
        settings=settings,
        exceptions=tuple(exceptions),
        protected_suffixes=tuple(suffixes),
    )


def parse_exception(data: dict, index: int = 0) -> Optional[ExceptionRule]:
    """
    Parse a single exception entry.

    Accepted shapes:

        {id, match: {type: literal|regex, pattern}, output: "TEXT"}
        {id, match: {type: regex, pattern}, template: "\\1AH"}

    Returns None for entries that cannot be used.
    """
    try:
        match_data = data["match"]
        match_type = MatchType(match_data.get("type", "literal"))
        pattern = str(match_data["pattern"])

        output: ExceptionOutput
        if "output" in data and data["output"] is not None:
            output = FixedOutput(str(data["output"]))
        elif data.get("template"):
            output = ComputedOutput.from_template(str(data["template"]))
        else:
            raise KeyError("output")

        if match_type == MatchType.REGEX:
            re.compile(pattern)

        return ExceptionRule(
            id=data.get("id", f"exception_{index:03d}"),
            type=match_type,
            pattern=pattern,
            output=output,
            category=data.get("category", "uncategorized"),
            description=data.get("description", ""),
            enabled=data.get("enabled", True),
        )
    except (KeyError, TypeError, ValueError, AttributeError, re.error) as e:
        log.warning(
            "invalid_exception_skipped",
            index=index,
            rule_id=data.get("id") if isinstance(data, dict) else None,
            error=f"{type(e).__name__}: {e}",
        )
        return None


def list_rulesets() -> list[str]:
    """List available bundled ruleset names."""
    return sorted(p.stem for p in RULESETS_DIR.glob("*.yaml"))


# Cache for loaded rulesets
_cache: dict[str, Ruleset] = {}


def get_ruleset(name: str = "default", use_cache: bool = True) -> Ruleset:
    """Get a ruleset, using cache by default."""
    if use_cache and name in _cache:
        return _cache[name]

    ruleset = load_ruleset(name)
    _cache[name] = ruleset
    return ruleset


def clear_cache() -> None:
    """Clear the ruleset cache."""
    _cache.clear()
