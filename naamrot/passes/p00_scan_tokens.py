"""
Pass 00 — Token Scan

Splits the raw text into word tokens and pass-through spans.

A word token is a run of ASCII letters, optionally joined by single
hyphens or apostrophes ("don't", "well-known"). Everything else
(whitespace, punctuation, digits, other scripts) passes through as-is.
The spans tile the input exactly: joining their text gives it back.
"""

import re

from naamrot.core.context import ConvertContext
from naamrot.core.logging import get_pass_logger
from naamrot.ir.enums import TokenKind
from naamrot.ir.schema import Token

PASS_NAME = "p00_scan_tokens"
log = get_pass_logger(PASS_NAME)

WORD_TOKEN_RE = re.compile(r"[A-Za-z]+(?:[-'][A-Za-z]+)*")


def scan_tokens(ctx: ConvertContext) -> ConvertContext:
    text = ctx.raw_text
    tokens: list[Token] = []
    last = 0

    for m in WORD_TOKEN_RE.finditer(text):
        if m.start() > last:
            tokens.append(_passthrough(text, last, m.start()))
        tokens.append(
            Token(text=m.group(), start=m.start(), end=m.end(), kind=TokenKind.WORD)
        )
        last = m.end()

    if last < len(text):
        tokens.append(_passthrough(text, last, len(text)))

    words = sum(1 for t in tokens if t.kind == TokenKind.WORD)
    log.verbose("tokens_scanned", input_chars=len(text), tokens=len(tokens), words=words)

    ctx.tokens = tokens
    ctx.add_trace(
        pass_name=PASS_NAME,
        action="scanned_tokens",
        before=f"{len(text)} chars",
        after=f"{words} words, {len(tokens) - words} pass-through spans",
    )
    return ctx


def _passthrough(text: str, start: int, end: int) -> Token:
    return Token(text=text[start:end], start=start, end=end, kind=TokenKind.PASSTHROUGH)
