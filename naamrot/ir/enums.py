"""
IR Enums — Status codes and labels used across passes.
"""

from enum import Enum


class TokenKind(str, Enum):
    """What a scanned span of input is."""

    WORD = "word"              # Letters joined by single - or '
    PASSTHROUGH = "passthrough"  # Whitespace, punctuation, digits


class ConvertStatus(str, Enum):
    """Overall outcome of a conversion."""

    SUCCESS = "success"
    ERROR = "error"


class DiagnosticLevel(str, Enum):
    """Severity of a diagnostic."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
