"""
Segments — Character sequence with per-character origin tags.

origin=True  => typed by the user, eligible for vowel swaps
origin=False => synthesized by a rule, never vowel-swapped

Sequences are immutable tuples. Every spelling change goes through
replace_range(), which always produces origin=False segments, so
synthesized text can never regain origin=True.
"""

from dataclasses import dataclass

VOWELS = frozenset("AEIOU")


@dataclass(frozen=True)
class Segment:
    """One character of a word-part."""

    ch: str
    origin: bool = True

    @property
    def upper(self) -> str:
        return self.ch.upper()


Segments = tuple[Segment, ...]


def from_string(text: str, origin: bool = True) -> Segments:
    """Build a segment sequence from a string."""
    return tuple(Segment(ch, origin) for ch in text)


def render(segments: Segments) -> str:
    """Render a segment sequence back to its working string."""
    return "".join(s.ch for s in segments)


def replace_range(segments: Segments, start: int, end: int, text: str) -> Segments:
    """
    Replace segments[start:end] with synthesized segments for `text`.

    An empty range (start == end) is an insertion.
    """
    return segments[:start] + from_string(text, origin=False) + segments[end:]


def is_letter(ch: str) -> bool:
    """ASCII letter check (tokens are ASCII-only)."""
    return ("A" <= ch <= "Z") or ("a" <= ch <= "z")


def is_vowel(ch: str) -> bool:
    return ch.upper() in VOWELS


def is_consonant(ch: str) -> bool:
    """Letter that is not A/E/I/O/U. Y counts as a consonant."""
    return is_letter(ch) and not is_vowel(ch)
