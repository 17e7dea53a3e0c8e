"""
Unit tests for the exception matcher.
"""

import re

from naamrot.rules.matcher import ExceptionMatcher
from naamrot.rules.models import (
    ComputedOutput,
    ExceptionRule,
    FixedOutput,
    MatchType,
    Ruleset,
)


def literal(rule_id, pattern, output):
    return ExceptionRule(rule_id, MatchType.LITERAL, pattern, FixedOutput(output))


def regex(rule_id, pattern, output):
    return ExceptionRule(rule_id, MatchType.REGEX, pattern, output)


def matcher_for(*rules):
    return ExceptionMatcher(Ruleset(name="test", exceptions=rules))


class TestExceptionMatching:
    """Tests for literal and pattern matching."""

    def test_literal_case_insensitive(self):
        m = matcher_for(literal("the", "the", "THA"))
        hit = m.match("The")
        assert hit.hit
        assert hit.output == "THA"
        assert hit.rule_id == "the"

    def test_regex_must_match_whole_part(self):
        m = matcher_for(regex("the", "the", FixedOutput("THA")))
        assert not m.match("theory").hit
        assert not m.match("bathe").hit
        assert m.match("THE").hit

    def test_regex_alternation(self):
        m = matcher_for(regex("you", "you|your", FixedOutput("YA")))
        assert m.match("your").output == "YA"
        assert m.match("You").output == "YA"
        assert not m.match("yours").hit

    def test_first_match_wins(self):
        m = matcher_for(
            regex("any_s", "s.*", FixedOutput("FIRST")),
            literal("snake", "snake", "SECOND"),
        )
        hit = m.match("snake")
        assert hit.rule_id == "any_s"
        assert hit.output == "FIRST"

    def test_no_match(self):
        hit = matcher_for(literal("the", "the", "THA")).match("cat")
        assert not hit.hit
        assert hit.output == "cat"
        assert hit.rule_id is None


class TestComputedOutputs:
    """Tests for outputs computed from the match."""

    def test_template_uses_groups(self):
        rule = regex("er_word", r"(\w+)er", ComputedOutput.from_template(r"\1AH"))
        assert matcher_for(rule).match("Butter").output == "ButtAH"

    def test_function_receives_match_and_word(self):
        seen = []

        def fn(match, word):
            seen.append((match, word))
            return word[::-1]

        rule = regex("rev", "ab+", ComputedOutput(fn))
        hit = matcher_for(rule).match("abb")

        assert hit.output == "bba"
        assert isinstance(seen[0][0], re.Match)
        assert seen[0][1] == "abb"

    def test_literal_function_gets_no_match(self):
        rule = ExceptionRule(
            "lit", MatchType.LITERAL, "cat", ComputedOutput(lambda m, w: "NONE" if m is None else "X")
        )
        assert matcher_for(rule).match("cat").output == "NONE"


class TestMalformedRules:
    """Malformed entries never match and never stop other rules."""

    def test_missing_output_skipped(self):
        m = matcher_for(
            ExceptionRule("broken", MatchType.LITERAL, "cat", None),
            literal("cat", "cat", "KAT"),
        )
        assert len(m) == 1
        assert m.match("cat").rule_id == "cat"

    def test_missing_pattern_skipped(self):
        m = matcher_for(ExceptionRule("broken", MatchType.REGEX, None, FixedOutput("X")))
        assert len(m) == 0
        assert not m.match("anything").hit

    def test_invalid_regex_skipped(self):
        m = matcher_for(
            regex("bad", "(unclosed", FixedOutput("X")),
            literal("ok", "unclosed", "FINE"),
        )
        assert m.match("unclosed").output == "FINE"

    def test_failing_output_skipped(self):
        def boom(match, word):
            raise RuntimeError("nope")

        m = matcher_for(
            regex("boom", "cat", ComputedOutput(boom)),
            literal("cat", "cat", "KAT"),
        )
        assert m.match("cat").output == "KAT"

    def test_disabled_rule_skipped(self):
        rule = ExceptionRule(
            "off", MatchType.LITERAL, "cat", FixedOutput("X"), enabled=False
        )
        assert not matcher_for(rule).match("cat").hit
