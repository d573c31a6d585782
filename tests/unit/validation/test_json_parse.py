"""
Unit tests for the JSON parse stage.
"""

from triage_gateway.models.enums import FailureKind
from triage_gateway.models.llm_models import ProviderFailure
from triage_gateway.validation.json_parse import JSONParseStage


class TestJSONParseStage:
    """Test suite for extraction + decoding."""

    def setup_method(self):
        """Setup test fixtures."""
        self.stage = JSONParseStage()

    def test_plain_json_object(self):
        result = self.stage.parse('{"priority": "low", "label": "marketing"}')
        assert result == {"priority": "low", "label": "marketing"}

    def test_json_wrapped_in_prose(self):
        result = self.stage.parse('Sure! Here is the JSON:\n{"summary": "s", "reply": "r"}\nThanks.')
        assert result == {"summary": "s", "reply": "r"}

    def test_no_json_block_is_extraction_failure(self):
        result = self.stage.parse("Sorry, I can't help with that.")

        assert isinstance(result, ProviderFailure)
        assert result.kind is FailureKind.EXTRACTION
        assert "No JSON block found" in result.reason

    def test_invalid_json_is_parse_failure(self):
        result = self.stage.parse('{"priority": high, "label": "work"}')

        assert isinstance(result, ProviderFailure)
        assert result.kind is FailureKind.PARSE
        assert "Failed to parse JSON block" in result.reason

    def test_trailing_comma_is_parse_failure(self):
        result = self.stage.parse('{"summary": "s",}')
        assert isinstance(result, ProviderFailure)
        assert result.kind is FailureKind.PARSE

    def test_unicode_content(self):
        result = self.stage.parse('{"summary": "Réunion à 10h 🎉"}')
        assert result == {"summary": "Réunion à 10h 🎉"}

    def test_failure_str_includes_kind(self):
        result = self.stage.parse("nothing")
        assert str(result).startswith("extraction: ")

    def test_excessive_nesting_is_parse_failure(self):
        content = '{"priority": ' + "[" * 100000 + "]" * 100000 + "}"

        result = self.stage.parse(content)

        assert isinstance(result, ProviderFailure)
        assert result.kind is FailureKind.PARSE
        assert "nesting too deep" in result.reason
