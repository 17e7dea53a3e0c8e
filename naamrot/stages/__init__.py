"""Stages — Per-word-part rule stages, in priority order."""

from naamrot.stages.runner import WORD_STAGES, WordPartTransformer
from naamrot.stages.s20_suffix import apply_suffix_rules
from naamrot.stages.s30_prefix import apply_prefix_rules
from naamrot.stages.s40_cluster import apply_cluster_insertion
from naamrot.stages.s50_vowel_swap import apply_vowel_swaps

__all__ = [
    "WORD_STAGES",
    "WordPartTransformer",
    "apply_suffix_rules",
    "apply_prefix_rules",
    "apply_cluster_insertion",
    "apply_vowel_swaps",
]
