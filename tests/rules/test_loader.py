"""
Unit tests for ruleset loading.
"""

import pytest

from naamrot.rules.loader import (
    clear_cache,
    get_ruleset,
    list_rulesets,
    load_ruleset,
    load_ruleset_from_path,
    parse_exception,
    parse_ruleset,
)
from naamrot.rules.models import ComputedOutput, FixedOutput, MatchType


class TestBundledRulesets:
    """Tests for the rulesets shipped with the package."""

    def test_default_loads(self, default_ruleset):
        assert default_ruleset.name == "default"
        assert len(default_ruleset.exceptions) > 0
        assert "SHAN" in default_ruleset.protected_suffixes

    def test_suffixes_longest_first(self, default_ruleset):
        lengths = [len(s) for s in default_ruleset.protected_suffixes]
        assert lengths == sorted(lengths, reverse=True)

    def test_default_settings(self, default_ruleset):
        assert default_ruleset.settings.swappable_vowels == frozenset("AEI")
        assert not default_ruleset.settings.u_yoo_prefix

    def test_bare_has_no_exceptions(self, bare_ruleset):
        assert bare_ruleset.exceptions == ()

    def test_list_rulesets(self):
        names = list_rulesets()
        assert "default" in names
        assert "bare" in names

    def test_missing_ruleset(self):
        with pytest.raises(FileNotFoundError):
            load_ruleset("does_not_exist")

    def test_cache_returns_same_object(self):
        clear_cache()
        first = get_ruleset("default")
        assert get_ruleset("default") is first
        assert get_ruleset("default", use_cache=False) is not first

    def test_exception_lookup(self, default_ruleset):
        assert default_ruleset.get_exception("the").output.text == "THA"
        assert default_ruleset.get_exception("missing") is None

    def test_exceptions_by_category(self, default_ruleset):
        ids = [r.id for r in default_ruleset.get_exceptions_by_category("keep")]
        assert ids == ["date_keep", "name_keep", "set"]


class TestParseException:
    """Tests for single exception entries."""

    def test_fixed_output(self):
        rule = parse_exception(
            {"id": "the", "match": {"type": "regex", "pattern": "the"}, "output": "THA"}
        )
        assert rule.type == MatchType.REGEX
        assert rule.output == FixedOutput("THA")

    def test_template_output(self):
        rule = parse_exception(
            {"id": "t", "match": {"type": "regex", "pattern": "(a)b"}, "template": r"\1H"}
        )
        assert isinstance(rule.output, ComputedOutput)

    def test_literal_is_default_type(self):
        rule = parse_exception({"match": {"pattern": "cat"}, "output": "KAT"}, index=7)
        assert rule.type == MatchType.LITERAL
        assert rule.id == "exception_007"

    @pytest.mark.parametrize(
        "data",
        [
            {"id": "no_match", "output": "X"},
            {"id": "no_output", "match": {"type": "literal", "pattern": "cat"}},
            {"id": "bad_type", "match": {"type": "glob", "pattern": "c*"}, "output": "X"},
            {"id": "bad_regex", "match": {"type": "regex", "pattern": "(x"}, "output": "X"},
            {"id": "no_pattern", "match": {"type": "literal"}, "output": "X"},
            "not a mapping",
        ],
    )
    def test_malformed_returns_none(self, data):
        assert parse_exception(data) is None


class TestParseRuleset:
    """Tests for whole-ruleset parsing."""

    def test_malformed_entries_dropped(self):
        ruleset = parse_ruleset(
            {
                "name": "mixed",
                "exceptions": [
                    {"id": "good", "match": {"pattern": "cat"}, "output": "KAT"},
                    {"id": "bad"},
                ],
            }
        )
        assert [r.id for r in ruleset.exceptions] == ["good"]

    def test_empty_document(self):
        ruleset = parse_ruleset({})
        assert ruleset.exceptions == ()
        assert ruleset.protected_suffixes == ()

    def test_suffixes_upper_cased(self):
        ruleset = parse_ruleset({"protected_suffixes": ["ing", "ness"]})
        assert ruleset.protected_suffixes == ("NESS", "ING")

    def test_load_from_path(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text(
            "settings:\n"
            "  swappable_vowels: [a]\n"
            "protected_suffixes: [ING]\n"
            "exceptions:\n"
            "  - id: cat\n"
            "    match: {type: literal, pattern: cat}\n"
            "    output: KAT\n"
        )
        ruleset = load_ruleset_from_path(path)

        assert ruleset.name == "custom"
        assert ruleset.settings.swappable_vowels == frozenset("A")
        assert ruleset.exceptions[0].id == "cat"
