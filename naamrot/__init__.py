"""
Naamrot — phonetic respelling of English text.

A deterministic rule pipeline that rewrites every word of a text into
the stylized "Naamrot" spelling, leaving whitespace and punctuation
exactly where they were.
"""

__version__ = "0.1.0"
__ruleset_version__ = "1.0"


def convert(text: str, ruleset=None) -> str:
    """Convert text to Naamrot. See naamrot.core.engine.convert."""
    from naamrot.core.engine import convert as _convert

    return _convert(text, ruleset)
