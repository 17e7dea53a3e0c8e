"""
Pass 30 — Assembly

Rebuilds the output: converted parts go back between their separators,
word tokens go back between the untouched pass-through spans, and the
whole result is upper-cased once.
"""

from naamrot.core.context import ConvertContext
from naamrot.core.logging import get_pass_logger
from naamrot.ir.enums import TokenKind

PASS_NAME = "p30_assemble"
log = get_pass_logger(PASS_NAME)


def assemble(ctx: ConvertContext) -> ConvertContext:
    outputs: dict[tuple[int, int], str] = {
        (p.token_index, p.part_index): p.output for p in ctx.parts
    }

    pieces: list[str] = []
    for t_index, token in enumerate(ctx.tokens):
        if token.kind != TokenKind.WORD:
            pieces.append(token.text)
            continue
        pieces.extend(
            outputs.get((t_index, p_index), piece)
            for p_index, piece in enumerate(token.parts or [token.text])
        )

    ctx.rendered_text = "".join(pieces).upper()

    log.verbose("assembled", output_chars=len(ctx.rendered_text))
    ctx.add_trace(
        pass_name=PASS_NAME,
        action="assembled_output",
        before=f"{len(ctx.raw_text)} chars",
        after=f"{len(ctx.rendered_text)} chars",
    )
    return ctx
