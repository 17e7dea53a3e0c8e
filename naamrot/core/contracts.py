"""
Contracts — Type definitions for pipeline components.
"""

from typing import Protocol

from naamrot.core.context import ConvertContext, PartState
from naamrot.rules.models import Ruleset


class Pass(Protocol):
    """Protocol for text-level pipeline passes."""

    def __call__(self, ctx: ConvertContext) -> ConvertContext:
        """Apply the pass to the context."""
        ...


class Stage(Protocol):
    """Protocol for word-part rule stages. Stages never mutate their input."""

    def __call__(self, state: PartState, ruleset: Ruleset) -> PartState:
        """Return the state after this stage's rules."""
        ...
