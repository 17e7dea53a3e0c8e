"""
Engine — Pipeline orchestration.

The engine selects a pipeline, runs passes in order and packages the
result. Spelling rules live in naamrot.stages, not here.
"""

from dataclasses import dataclass
from typing import Optional, Union

from naamrot.core.context import ConvertContext, ConvertRequest
from naamrot.core.contracts import Pass
from naamrot.core.logging import ConvertLogger
from naamrot.ir.enums import ConvertStatus
from naamrot.ir.schema import ConvertResult
from naamrot.rules.loader import get_ruleset
from naamrot.rules.models import Ruleset


@dataclass
class Pipeline:
    """A named sequence of passes."""

    id: str
    name: str
    passes: list[Pass]


def default_pipeline() -> Pipeline:
    """scan -> split -> transform -> assemble."""
    from naamrot.passes import assemble, scan_tokens, split_parts, transform_parts

    return Pipeline(
        id="default",
        name="Default Naamrot Pipeline",
        passes=[
            scan_tokens,
            split_parts,
            transform_parts,
            assemble,
        ],
    )


class Engine:
    """
    Pipeline orchestrator.

    Holds one read-only ruleset for its lifetime and runs passes in
    order, recording failures instead of raising them.
    """

    def __init__(self, ruleset: Optional[Ruleset] = None) -> None:
        self.ruleset = ruleset or get_ruleset("default")
        self._pipelines: dict[str, Pipeline] = {}
        self.register_pipeline(default_pipeline())

    def register_pipeline(self, pipeline: Pipeline) -> None:
        """Register a pipeline by ID."""
        self._pipelines[pipeline.id] = pipeline

    def list_pipelines(self) -> list[str]:
        """List registered pipeline IDs."""
        return list(self._pipelines.keys())

    def transform(
        self,
        request: ConvertRequest,
        pipeline_id: Optional[str] = None,
    ) -> ConvertResult:
        """
        Run a conversion.

        Args:
            request: The conversion request
            pipeline_id: Which pipeline to use (default: 'default')

        Returns:
            ConvertResult with tokens, parts, trace, and diagnostics
        """
        pipeline_id = pipeline_id or "default"
        ctx = ConvertContext.from_request(request, self.ruleset)

        if pipeline_id not in self._pipelines:
            ctx.status = ConvertStatus.ERROR
            ctx.add_diagnostic(
                level="error",
                code="PIPELINE_NOT_FOUND",
                message=f"Pipeline '{pipeline_id}' not registered",
                source="engine",
            )
            return ctx.to_result()

        pipeline = self._pipelines[pipeline_id]
        clog = ConvertLogger(request.request_id)

        for pass_fn in pipeline.passes:
            pass_name = getattr(pass_fn, "__name__", repr(pass_fn))
            try:
                clog.pass_start(pass_name)
                ctx = pass_fn(ctx)
                clog.pass_end(pass_name)
            except Exception as e:
                clog.pass_error(pass_name, e)
                ctx.status = ConvertStatus.ERROR
                ctx.add_diagnostic(
                    level="error",
                    code="PASS_ERROR",
                    message=f"Pass '{pass_name}' failed: {e}",
                    source="engine",
                )
                ctx.add_trace(pass_name=pass_name, action="error")
                break

        clog.convert_complete(
            status=ctx.status.value,
            tokens=len(ctx.tokens),
            parts=len(ctx.parts),
            diagnostics=len(ctx.diagnostics),
        )

        return ctx.to_result()


# Global engine instance
_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Get or create the global engine instance (default ruleset)."""
    global _engine
    if _engine is None:
        _engine = Engine()
    return _engine


def reset_engine() -> None:
    """Drop the global engine so the next call reloads its ruleset."""
    global _engine
    _engine = None


def convert(text: str, ruleset: Union[Ruleset, str, None] = None) -> str:
    """
    Convert text to Naamrot.

    Non-letter spans come back unchanged, every word is respelled and
    the whole result is upper-case. Never raises for any input string;
    if a pass fails, the upper-cased input is returned.

    Args:
        text: Any text
        ruleset: A Ruleset, the name of a bundled ruleset, or None
            for the default

    Raises:
        FileNotFoundError: If `ruleset` names a ruleset that doesn't exist
    """
    if ruleset is None:
        engine = get_engine()
    elif isinstance(ruleset, str):
        engine = Engine(get_ruleset(ruleset))
    else:
        engine = Engine(ruleset)

    result = engine.transform(ConvertRequest(text=text))
    if result.status != ConvertStatus.SUCCESS or result.rendered_text is None:
        return text.upper()
    return result.rendered_text
