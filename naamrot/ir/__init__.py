"""IR — Result models and serialization for conversions."""

from naamrot.ir.enums import ConvertStatus, DiagnosticLevel, TokenKind
from naamrot.ir.schema import (
    ConvertResult,
    Diagnostic,
    PartRecord,
    Token,
    TraceEntry,
)

__all__ = [
    "ConvertStatus",
    "DiagnosticLevel",
    "TokenKind",
    "ConvertResult",
    "Diagnostic",
    "PartRecord",
    "Token",
    "TraceEntry",
]
