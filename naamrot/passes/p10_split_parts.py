"""
Pass 10 — Part Split

Breaks every word token into word-parts at hyphens and apostrophes,
keeping the separators in place so the token can be rebuilt verbatim.
"""

import re

from naamrot.core.context import ConvertContext, WordPart
from naamrot.core.logging import get_pass_logger
from naamrot.ir.enums import TokenKind

PASS_NAME = "p10_split_parts"
log = get_pass_logger(PASS_NAME)

SEPARATORS = ("-", "'")
SEPARATOR_RE = re.compile(r"([-'])")


def split_token(token_text: str) -> list[str]:
    """Split a token into parts and separators, in order."""
    return SEPARATOR_RE.split(token_text)


def split_parts(ctx: ConvertContext) -> ConvertContext:
    parts: list[WordPart] = []

    for t_index, token in enumerate(ctx.tokens):
        if token.kind != TokenKind.WORD:
            continue
        pieces = split_token(token.text)
        token.parts = pieces
        for p_index, piece in enumerate(pieces):
            if piece in SEPARATORS:
                continue
            parts.append(WordPart(token_index=t_index, part_index=p_index, text=piece))

    log.verbose("parts_split", parts=len(parts))

    ctx.parts = parts
    ctx.add_trace(
        pass_name=PASS_NAME,
        action="split_parts",
        after=f"{len(parts)} word-parts",
    )
    return ctx
