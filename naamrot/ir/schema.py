"""
IR Schema — Pydantic models for conversion results.

A ConvertResult records what the token scan found, what every
word-part became and why, plus the pipeline trace.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from naamrot.ir.enums import ConvertStatus, DiagnosticLevel, TokenKind


class Token(BaseModel):
    """A scanned span of the input text."""

    text: str = Field(..., description="Exact input text of the span")
    start: int = Field(..., description="Character offset in input")
    end: int = Field(..., description="Character offset end (exclusive)")
    kind: TokenKind = Field(..., description="Word token or pass-through span")
    parts: list[str] = Field(
        default_factory=list,
        description="Word-parts and separators, in order (word tokens only)",
    )


class PartRecord(BaseModel):
    """How a single word-part was converted."""

    token_index: int = Field(..., description="Index into ConvertResult.tokens")
    part_index: int = Field(..., description="Index into Token.parts")
    text: str = Field(..., description="Original word-part")
    output: str = Field(..., description="Converted word-part (upper-case)")
    exception_id: Optional[str] = Field(
        None, description="Exception rule that replaced the part, if any"
    )
    rules_applied: list[str] = Field(
        default_factory=list, description="Rule ids that changed the spelling, in order"
    )
    ending_changed_to_ah: bool = Field(
        False, description="Whether the ending-AH suffix rule fired"
    )


class TraceEntry(BaseModel):
    """One pipeline pass action."""

    id: str
    timestamp: datetime
    pass_name: str
    action: str
    before: Optional[str] = None
    after: Optional[str] = None


class Diagnostic(BaseModel):
    """A warning or error raised during conversion."""

    id: str
    level: DiagnosticLevel
    code: str
    message: str
    source: str


class ConvertResult(BaseModel):
    """Complete output of a conversion."""

    request_id: str
    timestamp: datetime
    processing_duration_ms: float = 0.0
    ruleset: str = Field(..., description="Name of the ruleset used")

    input_text: str
    tokens: list[Token] = Field(default_factory=list)
    parts: list[PartRecord] = Field(default_factory=list)
    rendered_text: Optional[str] = None

    trace: list[TraceEntry] = Field(default_factory=list)
    diagnostics: list[Diagnostic] = Field(default_factory=list)
    status: ConvertStatus = ConvertStatus.SUCCESS

    @property
    def word_count(self) -> int:
        return sum(1 for t in self.tokens if t.kind == TokenKind.WORD)

    @property
    def exception_hits(self) -> list[PartRecord]:
        return [p for p in self.parts if p.exception_id is not None]
