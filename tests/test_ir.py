"""
Tests for result models and serialization.
"""

import json

from naamrot.core.context import ConvertRequest
from naamrot.core.engine import Engine
from naamrot.ir.enums import ConvertStatus, TokenKind
from naamrot.ir.serialization import from_json, load, save, to_json


def run(text, ruleset):
    return Engine(ruleset).transform(ConvertRequest(text=text, request_id="req-1"))


class TestSerialization:
    """Tests for JSON export/import."""

    def test_to_json_fields(self, default_ruleset):
        data = json.loads(to_json(run("don't stop", default_ruleset)))

        assert data["request_id"] == "req-1"
        assert data["rendered_text"] == "DAN'T STAP"
        assert data["status"] == "success"
        assert data["tokens"][0]["parts"] == ["don", "'", "t"]
        assert data["parts"][0]["exception_id"] == "don"

    def test_from_json(self, default_ruleset):
        result = run("snake-bite", default_ruleset)
        restored = from_json(to_json(result))

        assert restored.rendered_text == result.rendered_text
        assert restored.status == ConvertStatus.SUCCESS
        assert restored.tokens[0].kind == TokenKind.WORD

    def test_save_and_load(self, default_ruleset, tmp_path):
        result = run("clean", default_ruleset)
        path = tmp_path / "result.json"

        save(result, path)

        assert load(path).rendered_text == "CALEAN"
