"""
Stage 50 — Vowel Swaps

Lowest-priority stage. Original A/E/I become "o", subject to three
protections computed once from the pre-swap spelling:

- Suffix boundary: nothing inside the longest protected suffix swaps.
- Tail protection: unless the ending became AH, the last original vowel
  is kept; with exactly four original vowels the one before it is kept
  too (GRAMMATICAL -> GROMMOTICAL, not GROMMOTOCAL).
- Digraph protection: a vowel followed by another vowel letter is kept
  (the EA in CLEAN).

Synthesized segments never swap.
"""

from dataclasses import dataclass

from naamrot.core.context import PartState
from naamrot.core.logging import get_pass_logger
from naamrot.core.segments import Segments, VOWELS, is_vowel
from naamrot.rules.models import Ruleset

PASS_NAME = "s50_vowel_swap"
log = get_pass_logger(PASS_NAME)

SWAP_TARGET = "o"


@dataclass(frozen=True)
class SwapProtections:
    boundary: int
    tail: frozenset[int]
    digraph: frozenset[int]

    def protects(self, index: int) -> bool:
        return index >= self.boundary or index in self.tail or index in self.digraph


def protected_suffix_start(segments: Segments, suffixes: tuple[str, ...]) -> int:
    """Index where the longest matching protected suffix starts (len if none)."""
    upper = "".join(s.upper for s in segments)
    for suffix in suffixes:
        if upper.endswith(suffix):
            return len(upper) - len(suffix)
    return len(upper)


def original_vowel_indices(segments: Segments) -> list[int]:
    return [i for i, s in enumerate(segments) if s.origin and s.upper in VOWELS]


def tail_protected(segments: Segments, ending_changed_to_ah: bool) -> frozenset[int]:
    if ending_changed_to_ah:
        return frozenset()
    vowels = original_vowel_indices(segments)
    if not vowels:
        return frozenset()
    protected = {vowels[-1]}
    if len(vowels) == 4:
        protected.add(vowels[-2])
    return frozenset(protected)


def digraph_protected(segments: Segments) -> frozenset[int]:
    return frozenset(
        i for i in range(len(segments) - 1)
        if is_vowel(segments[i].ch) and is_vowel(segments[i + 1].ch)
    )


def compute_protections(state: PartState, ruleset: Ruleset) -> SwapProtections:
    return SwapProtections(
        boundary=protected_suffix_start(state.segments, ruleset.protected_suffixes),
        tail=tail_protected(state.segments, state.ending_changed_to_ah),
        digraph=digraph_protected(state.segments),
    )


def apply_vowel_swaps(state: PartState, ruleset: Ruleset) -> PartState:
    protections = compute_protections(state, ruleset)
    swappable = ruleset.settings.swappable_vowels

    swapped: list[int] = []
    new_state = state
    for i, seg in enumerate(state.segments):
        if seg.origin and seg.upper in swappable and not protections.protects(i):
            # one-for-one, so indices stay aligned with the pre-swap state
            new_state = new_state.replace(i, i + 1, SWAP_TARGET, "vowel.swap")
            swapped.append(i)

    if not swapped:
        return state

    log.debug(
        "vowels_swapped",
        before=state.text,
        after=new_state.text,
        indices=swapped,
        boundary=protections.boundary,
        tail=sorted(protections.tail),
    )
    return new_state
