"""
Pass 20 — Part Transformation

Runs every word-part through the word-part transformer: exception
lookup first, then the suffix, prefix, cluster and vowel-swap stages.
"""

from functools import lru_cache

from naamrot.core.context import ConvertContext
from naamrot.core.logging import get_pass_logger
from naamrot.rules.models import Ruleset
from naamrot.stages.runner import WordPartTransformer

PASS_NAME = "p20_transform_parts"
log = get_pass_logger(PASS_NAME)


@lru_cache(maxsize=8)
def get_transformer(ruleset: Ruleset) -> WordPartTransformer:
    """Transformer for a ruleset (compiled exception table is reused)."""
    return WordPartTransformer(ruleset)


def transform_parts(ctx: ConvertContext) -> ConvertContext:
    transformer = get_transformer(ctx.ruleset)
    exception_hits = 0

    for part in ctx.parts:
        part.state = transformer.run(part.text)
        if part.state.exception_id is not None:
            exception_hits += 1

    log.verbose(
        "parts_transformed",
        parts=len(ctx.parts),
        exception_hits=exception_hits,
        ruleset=ctx.ruleset.name,
    )

    ctx.add_trace(
        pass_name=PASS_NAME,
        action="transformed_parts",
        after=f"{len(ctx.parts)} parts, {exception_hits} exception hits",
    )
    return ctx
