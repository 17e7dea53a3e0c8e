"""
Stage 40 — Consonant Cluster Insertion

Softens an opening cluster with one synthesized "A":

1. consonant, consonant, R  -> insert A after the first two letters
2. consonant, R or L        -> insert A after the first letter

Y counts as a consonant. At most one insertion per word-part.
"""

from naamrot.core.context import PartState
from naamrot.core.logging import get_pass_logger
from naamrot.core.segments import is_consonant
from naamrot.rules.models import Ruleset

PASS_NAME = "s40_cluster"
log = get_pass_logger(PASS_NAME)


def apply_cluster_insertion(state: PartState, ruleset: Ruleset) -> PartState:
    segs = state.segments

    if (
        len(segs) >= 3
        and is_consonant(segs[0].ch)
        and is_consonant(segs[1].ch)
        and segs[2].upper == "R"
    ):
        new_state = state.insert(2, "A", "cluster.ccr")
    elif len(segs) >= 2 and is_consonant(segs[0].ch) and segs[1].upper in ("R", "L"):
        new_state = state.insert(1, "A", "cluster.cr_cl")
    else:
        return state

    log.debug("cluster_softened", before=state.text, after=new_state.text)
    return new_state
