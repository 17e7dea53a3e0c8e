"""
Contexts — State carried through the pipelines.

ConvertContext is the text-level state passed between passes. Each pass
reads prior artifacts and fills in only its own fields.

PartState is the per-word-part state passed between rule stages. It is
immutable: every stage returns a new PartState.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Optional
from uuid import uuid4

from naamrot.core.segments import Segments, from_string, render, replace_range
from naamrot.ir.enums import ConvertStatus, DiagnosticLevel
from naamrot.ir.schema import (
    ConvertResult,
    Diagnostic,
    PartRecord,
    Token,
    TraceEntry,
)
from naamrot.rules.models import Ruleset


# =============================================================================
# Word-part state
# =============================================================================

@dataclass(frozen=True)
class PartState:
    """Working spelling of one word-part plus what happened to it."""

    original: str
    segments: Segments
    ending_changed_to_ah: bool = False
    exception_id: Optional[str] = None
    rules_applied: tuple[str, ...] = ()

    @classmethod
    def start(cls, word_part: str) -> "PartState":
        return cls(original=word_part, segments=from_string(word_part))

    @property
    def text(self) -> str:
        return render(self.segments)

    @property
    def upper(self) -> str:
        return self.text.upper()

    def __len__(self) -> int:
        return len(self.segments)

    def replace(self, start: int, end: int, text: str, rule_id: str) -> "PartState":
        """Swap segments[start:end] for synthesized `text`, noting the rule."""
        return replace(
            self,
            segments=replace_range(self.segments, start, end, text),
            rules_applied=self.rules_applied + (rule_id,),
        )

    def replace_ending(self, length: int, text: str, rule_id: str) -> "PartState":
        n = len(self.segments)
        return self.replace(n - length, n, text, rule_id)

    def replace_start(self, length: int, text: str, rule_id: str) -> "PartState":
        return self.replace(0, length, text, rule_id)

    def insert(self, index: int, text: str, rule_id: str) -> "PartState":
        return self.replace(index, index, text, rule_id)


# =============================================================================
# Text-level context
# =============================================================================

@dataclass
class ConvertRequest:
    """Input to the conversion pipeline."""

    text: str
    request_id: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.request_id is None:
            self.request_id = str(uuid4())


@dataclass
class WordPart:
    """A word-part located inside a token, with its conversion."""

    token_index: int
    part_index: int
    text: str
    state: Optional[PartState] = None

    @property
    def output(self) -> str:
        return self.state.upper if self.state is not None else self.text.upper()


@dataclass
class ConvertContext:
    """
    Mutable context passed through pipeline passes.

    Each pass may read all fields but should only mutate
    the fields it is responsible for.
    """

    request: ConvertRequest
    raw_text: str
    ruleset: Ruleset

    # Populated by passes
    tokens: list[Token] = field(default_factory=list)
    parts: list[WordPart] = field(default_factory=list)
    rendered_text: Optional[str] = None

    # Trace and diagnostics
    trace: list[TraceEntry] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    status: ConvertStatus = ConvertStatus.SUCCESS

    start_time: datetime = field(default_factory=datetime.now)

    @classmethod
    def from_request(cls, request: ConvertRequest, ruleset: Ruleset) -> "ConvertContext":
        """Create a context from a convert request."""
        return cls(request=request, raw_text=request.text, ruleset=ruleset)

    def add_trace(self, pass_name: str, action: str, **kwargs: Any) -> None:
        """Add a trace entry."""
        self.trace.append(
            TraceEntry(
                id=str(uuid4()),
                timestamp=datetime.now(),
                pass_name=pass_name,
                action=action,
                before=kwargs.get("before"),
                after=kwargs.get("after"),
            )
        )

    def add_diagnostic(self, level: str, code: str, message: str, source: str) -> None:
        """Add a diagnostic message."""
        self.diagnostics.append(
            Diagnostic(
                id=str(uuid4()),
                level=DiagnosticLevel(level),
                code=code,
                message=message,
                source=source,
            )
        )

    def to_result(self) -> ConvertResult:
        """Convert context to final ConvertResult."""
        duration_ms = (datetime.now() - self.start_time).total_seconds() * 1000
        return ConvertResult(
            request_id=self.request.request_id or str(uuid4()),
            timestamp=self.start_time,
            processing_duration_ms=duration_ms,
            ruleset=self.ruleset.name,
            input_text=self.raw_text,
            tokens=self.tokens,
            parts=[_part_record(p) for p in self.parts],
            rendered_text=self.rendered_text,
            trace=self.trace,
            diagnostics=self.diagnostics,
            status=self.status,
        )


def _part_record(part: WordPart) -> PartRecord:
    state = part.state
    return PartRecord(
        token_index=part.token_index,
        part_index=part.part_index,
        text=part.text,
        output=part.output,
        exception_id=state.exception_id if state else None,
        rules_applied=list(state.rules_applied) if state else [],
        ending_changed_to_ah=state.ending_changed_to_ah if state else False,
    )
