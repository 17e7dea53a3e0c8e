"""
Word-Part Transformer — Exception lookup, then the rule stages.

Priority per word-part:
  1) Exceptions (first match wins, nothing else runs)
  2) Suffix rules
  3) Prefix rules
  4) Consonant cluster insertion
  5) Vowel swaps
"""

from typing import Sequence

from naamrot.core.context import PartState
from naamrot.core.contracts import Stage
from naamrot.core.segments import from_string
from naamrot.rules.matcher import ExceptionMatcher
from naamrot.rules.models import Ruleset
from naamrot.stages.s20_suffix import apply_suffix_rules
from naamrot.stages.s30_prefix import apply_prefix_rules
from naamrot.stages.s40_cluster import apply_cluster_insertion
from naamrot.stages.s50_vowel_swap import apply_vowel_swaps

WORD_STAGES: tuple[Stage, ...] = (
    apply_suffix_rules,
    apply_prefix_rules,
    apply_cluster_insertion,
    apply_vowel_swaps,
)


class WordPartTransformer:
    """Converts single word-parts with a fixed ruleset."""

    def __init__(self, ruleset: Ruleset, stages: Sequence[Stage] = WORD_STAGES) -> None:
        self.ruleset = ruleset
        self.matcher = ExceptionMatcher(ruleset)
        self.stages = tuple(stages)

    def run(self, word_part: str) -> PartState:
        """Return the final state for a word-part."""
        hit = self.matcher.match(word_part)
        if hit.hit:
            return PartState(
                original=word_part,
                segments=from_string(hit.output, origin=False),
                exception_id=hit.rule_id,
            )

        state = PartState.start(word_part)
        for stage in self.stages:
            state = stage(state, self.ruleset)
        return state

    def transform(self, word_part: str) -> str:
        """Convert a word-part to its upper-case Naamrot spelling."""
        return self.run(word_part).upper
