"""
Stage 20 — Suffix Rules

Rewrites word endings. Steps run in a fixed order and each one sees the
result of the steps before it:

1. ER -> AH   (every occurrence, left to right)
2. IR -> AR   (every occurrence, left to right)
3. TION -> SHAN
4. TY -> TEH
5. LEY / LY -> LEH
6. ER / UR / A -> AH  (sets ending_changed_to_ah)
7. AY -> AEH
8. Y -> EH  (unless the part ends in LY, LEY or TY)
"""

from dataclasses import replace

from naamrot.core.context import PartState
from naamrot.core.logging import get_pass_logger
from naamrot.rules.models import Ruleset

PASS_NAME = "s20_suffix"
log = get_pass_logger(PASS_NAME)


def replace_all_pairs(state: PartState, pair: str, text: str, rule_id: str) -> PartState:
    """Replace every non-overlapping two-letter `pair` with `text`."""
    i = 0
    while i < len(state) - 1:
        if (state.segments[i].upper + state.segments[i + 1].upper) == pair:
            state = state.replace(i, i + 2, text, rule_id)
            i += len(text)
        else:
            i += 1
    return state


def replace_er_with_ah(state: PartState) -> PartState:
    return replace_all_pairs(state, "ER", "AH", "suffix.er_to_ah")


def replace_ir_with_ar(state: PartState) -> PartState:
    return replace_all_pairs(state, "IR", "AR", "suffix.ir_to_ar")


def _ending_rule(ending: str, text: str, rule_id: str):
    def rule(state: PartState) -> PartState:
        if len(state) >= len(ending) and state.upper.endswith(ending):
            return state.replace_ending(len(ending), text, rule_id)
        return state

    rule.__name__ = rule_id.split(".")[-1]
    return rule


replace_ending_tion = _ending_rule("TION", "SHAN", "suffix.tion_to_shan")
replace_ending_ty = _ending_rule("TY", "TEH", "suffix.ty_to_teh")
replace_ending_ay = _ending_rule("AY", "AEH", "suffix.ay_to_aeh")


def replace_ending_ly(state: PartState) -> PartState:
    """LEY -> LEH, otherwise LY -> LEH."""
    s = state.upper
    if s.endswith("LEY") and len(state) >= 3:
        return state.replace_ending(3, "LEH", "suffix.ley_to_leh")
    if s.endswith("LY") and len(state) >= 2:
        return state.replace_ending(2, "LEH", "suffix.ly_to_leh")
    return state


def apply_ending_ah(state: PartState) -> PartState:
    """ER / UR -> AH, otherwise A -> AH. Records whether either fired."""
    s = state.upper
    if s.endswith("ER") or s.endswith("UR"):
        state = state.replace_ending(2, "AH", "suffix.ending_ah")
        return replace(state, ending_changed_to_ah=True)
    if s.endswith("A"):
        state = state.replace_ending(1, "AH", "suffix.ending_ah")
        return replace(state, ending_changed_to_ah=True)
    return replace(state, ending_changed_to_ah=False)


def replace_ending_y(state: PartState) -> PartState:
    """Final Y -> EH, but not after LY / LEY / TY."""
    s = state.upper
    if s.endswith(("LY", "LEY", "TY")):
        return state
    if s.endswith("Y"):
        return state.replace_ending(1, "EH", "suffix.y_to_eh")
    return state


SUFFIX_RULES = (
    replace_er_with_ah,
    replace_ir_with_ar,
    replace_ending_tion,
    replace_ending_ty,
    replace_ending_ly,
    apply_ending_ah,
    replace_ending_ay,
    replace_ending_y,
)


def apply_suffix_rules(state: PartState, ruleset: Ruleset) -> PartState:
    """Run all suffix rules in order."""
    before = state.text
    fired = len(state.rules_applied)

    for rule in SUFFIX_RULES:
        state = rule(state)

    if len(state.rules_applied) > fired:
        log.debug(
            "suffix_rules_applied",
            before=before,
            after=state.text,
            rules=list(state.rules_applied[fired:]),
            ending_changed_to_ah=state.ending_changed_to_ah,
        )
    return state
