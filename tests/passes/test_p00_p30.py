"""
Unit tests for the text-level passes (p00, p10, p20, p30).
"""

import pytest

from naamrot.core.context import ConvertContext, ConvertRequest
from naamrot.ir.enums import TokenKind
from naamrot.passes.p00_scan_tokens import scan_tokens
from naamrot.passes.p10_split_parts import split_parts, split_token
from naamrot.passes.p20_transform_parts import transform_parts
from naamrot.passes.p30_assemble import assemble


def make_ctx(text, ruleset):
    return ConvertContext.from_request(ConvertRequest(text=text), ruleset)


class TestP00ScanTokens:
    """Tests for p00_scan_tokens pass."""

    def test_words_and_passthrough(self, default_ruleset):
        ctx = scan_tokens(make_ctx("Hi, you!", default_ruleset))

        assert [(t.text, t.kind) for t in ctx.tokens] == [
            ("Hi", TokenKind.WORD),
            (", ", TokenKind.PASSTHROUGH),
            ("you", TokenKind.WORD),
            ("!", TokenKind.PASSTHROUGH),
        ]

    def test_tokens_tile_input(self, default_ruleset):
        text = "  well-known 42 don't--stop\n"
        ctx = scan_tokens(make_ctx(text, default_ruleset))

        assert "".join(t.text for t in ctx.tokens) == text
        for t in ctx.tokens:
            assert text[t.start:t.end] == t.text

    def test_internal_separators_kept_in_token(self, default_ruleset):
        ctx = scan_tokens(make_ctx("a well-known o'clock", default_ruleset))
        words = [t.text for t in ctx.tokens if t.kind == TokenKind.WORD]
        assert words == ["a", "well-known", "o'clock"]

    def test_adjacent_separators_split_token(self, default_ruleset):
        ctx = scan_tokens(make_ctx("rock-'n'-roll", default_ruleset))
        assert [t.text for t in ctx.tokens] == ["rock", "-'", "n", "'-", "roll"]

    def test_double_separator_breaks_token(self, default_ruleset):
        ctx = scan_tokens(make_ctx("a--b", default_ruleset))
        assert [t.text for t in ctx.tokens] == ["a", "--", "b"]

    def test_trailing_apostrophe_not_in_token(self, default_ruleset):
        ctx = scan_tokens(make_ctx("dogs'", default_ruleset))
        assert [t.text for t in ctx.tokens] == ["dogs", "'"]

    def test_digits_pass_through(self, default_ruleset):
        ctx = scan_tokens(make_ctx("abc123def", default_ruleset))
        assert [t.kind for t in ctx.tokens] == [
            TokenKind.WORD,
            TokenKind.PASSTHROUGH,
            TokenKind.WORD,
        ]

    @pytest.mark.parametrize("text", ["", "   ", "123 !?", "--'"])
    def test_letter_free_input(self, default_ruleset, text):
        ctx = scan_tokens(make_ctx(text, default_ruleset))
        assert all(t.kind == TokenKind.PASSTHROUGH for t in ctx.tokens)

    def test_adds_trace(self, default_ruleset):
        ctx = scan_tokens(make_ctx("hello", default_ruleset))
        assert ctx.trace[0].pass_name == "p00_scan_tokens"


class TestP10SplitParts:
    """Tests for p10_split_parts pass."""

    def test_split_token_keeps_separators(self):
        assert split_token("don't") == ["don", "'", "t"]
        assert split_token("mother-in-law") == ["mother", "-", "in", "-", "law"]

    def test_parts_indexed(self, default_ruleset):
        ctx = split_parts(scan_tokens(make_ctx("x well-known", default_ruleset)))

        assert [(p.token_index, p.part_index, p.text) for p in ctx.parts] == [
            (0, 0, "x"),
            (2, 0, "well"),
            (2, 2, "known"),
        ]
        assert ctx.tokens[2].parts == ["well", "-", "known"]


class TestP20TransformParts:
    """Tests for p20_transform_parts pass."""

    def test_parts_get_states(self, default_ruleset):
        ctx = make_ctx("the clean", default_ruleset)
        ctx = transform_parts(split_parts(scan_tokens(ctx)))

        assert [p.output for p in ctx.parts] == ["THA", "CALEAN"]
        assert ctx.parts[0].state.exception_id == "the"
        assert ctx.parts[1].state.exception_id is None


class TestP30Assemble:
    """Tests for p30_assemble pass."""

    def test_rebuilds_text(self, default_ruleset):
        ctx = make_ctx("Hello, world! 123 -- it's well-known.", default_ruleset)
        for pass_fn in (scan_tokens, split_parts, transform_parts, assemble):
            ctx = pass_fn(ctx)

        assert ctx.rendered_text == "HOLLO, WORLD! 123 -- IT'S WELL-KNOWN."

    def test_empty_input(self, default_ruleset):
        ctx = make_ctx("", default_ruleset)
        for pass_fn in (scan_tokens, split_parts, transform_parts, assemble):
            ctx = pass_fn(ctx)

        assert ctx.rendered_text == ""
