"""
Stage 30 — Prefix Rules

1. SN -> SAN
2. SW -> SAW
3. U + N/S/F/T -> YAU  (only with settings.u_yoo_prefix)
4. RE -> RO when the third letter is a vowel; a bare "re" is left alone
"""

from naamrot.core.context import PartState
from naamrot.core.logging import get_pass_logger
from naamrot.core.segments import is_vowel
from naamrot.rules.models import Ruleset

PASS_NAME = "s30_prefix"
log = get_pass_logger(PASS_NAME)

U_YOO_FOLLOWERS = frozenset("NSFT")


def replace_starting_sn(state: PartState) -> PartState:
    if state.upper.startswith("SN"):
        return state.replace_start(2, "SAN", "prefix.sn_to_san")
    return state


def replace_starting_sw(state: PartState) -> PartState:
    if state.upper.startswith("SW"):
        return state.replace_start(2, "SAW", "prefix.sw_to_saw")
    return state


def replace_starting_u_yoo(state: PartState) -> PartState:
    s = state.upper
    if len(s) >= 2 and s[0] == "U" and s[1] in U_YOO_FOLLOWERS:
        return state.replace_start(1, "YAU", "prefix.u_to_yau")
    return state


def replace_starting_re(state: PartState) -> PartState:
    """
    Conservative RE -> RO.

    Only the third letter is checked, so "reason" becomes "roason"
    even though the intent was to leave it alone.
    """
    s = state.text
    lower = s.lower()
    if lower == "re":
        return state
    if lower.startswith("re") and len(s) >= 3 and is_vowel(s[2]):
        return state.replace_start(2, "ro", "prefix.re_to_ro")
    return state


def apply_prefix_rules(state: PartState, ruleset: Ruleset) -> PartState:
    """Run all prefix rules in order."""
    before = state.text
    fired = len(state.rules_applied)

    state = replace_starting_sn(state)
    state = replace_starting_sw(state)
    if ruleset.settings.u_yoo_prefix:
        state = replace_starting_u_yoo(state)
    state = replace_starting_re(state)

    if len(state.rules_applied) > fired:
        log.debug(
            "prefix_rules_applied",
            before=before,
            after=state.text,
            rules=list(state.rules_applied[fired:]),
        )
    return state
