"""Tests for the response interpreter."""

import json

import pytest

from core.errors import ResponseParseError
from core.interpreter import (
    interpret_response,
    parse_braced_region,
    parse_response,
    parse_whole_text,
)

CODE = "for(int i=0;i<n;i++){}"

FULL = {
    "timeComplexity": "O(n)",
    "spaceComplexity": "O(1)",
    "suggestions": "fine",
    "correctedCode": CODE,
}


class TestParseStrategies:
    """Tests for the individual parse strategies."""

    def test_whole_text_parses_object(self):
        outcome = parse_whole_text(json.dumps(FULL))
        assert outcome.ok
        assert outcome.data == FULL

    def test_whole_text_fails_on_prose(self):
        outcome = parse_whole_text('Here you go: {"timeComplexity": "O(n)"}')
        assert not outcome.ok
        assert "invalid JSON" in outcome.reason

    def test_whole_text_rejects_non_object(self):
        outcome = parse_whole_text("[1, 2, 3]")
        assert not outcome.ok
        assert "list" in outcome.reason

    def test_braced_region_recovers_embedded_object(self):
        outcome = parse_braced_region('Sure! {"timeComplexity": "O(n)"} Hope that helps.')
        assert outcome.ok
        assert outcome.data == {"timeComplexity": "O(n)"}

    def test_braced_region_spans_first_to_last_brace(self):
        text = 'x {"a": {"b": 1}} y'
        outcome = parse_braced_region(text)
        assert outcome.ok
        assert outcome.data == {"a": {"b": 1}}

    def test_braced_region_missing(self):
        outcome = parse_braced_region("no json here")
        assert not outcome.ok
        assert outcome.reason == "no braced region"


class TestParseResponse:
    """Tests for the ordered parse chain."""

    def test_no_braces_is_not_json(self):
        with pytest.raises(ResponseParseError, match="Response was not in JSON format"):
            parse_response("I could not analyze that.")

    def test_broken_braces_are_unparseable(self):
        with pytest.raises(ResponseParseError, match="Could not parse analysis response"):
            parse_response("Result: {timeComplexity: O(n)}")

    def test_deeply_nested_json_is_a_parse_error(self):
        with pytest.raises(ResponseParseError):
            parse_response("[" * 100000 + "]" * 100000)

    def test_deeply_nested_braced_region_is_a_parse_error(self):
        text = "Result: " + '{"a": ' * 100000 + "1" + "}" * 100000
        with pytest.raises(ResponseParseError, match="Could not parse analysis response"):
            interpret_response(text, CODE)

    def test_whole_text_wins_before_fallback(self):
        assert parse_response(json.dumps(FULL)) == FULL


class TestInterpretResponse:
    """Tests for field-level defaulting."""

    def test_complete_response_is_verbatim(self):
        result = interpret_response(json.dumps(FULL), CODE)
        assert result.model_dump(exclude={"error"}) == FULL
        assert result.error is None

    def test_embedded_object_matches_whole_text(self):
        embedded = f"Here is the analysis:\n{json.dumps(FULL)}\nLet me know!"
        assert interpret_response(embedded, CODE) == interpret_response(json.dumps(FULL), CODE)

    def test_prose_with_partial_object(self):
        text = 'Sure! Here is the analysis: {"timeComplexity":"O(n)"} Hope that helps.'
        result = interpret_response(text, CODE)
        assert result.timeComplexity == "O(n)"
        assert result.spaceComplexity == "Could not determine"
        assert result.suggestions == "No suggestions provided"
        assert result.correctedCode == CODE
        assert result.error is None

    @pytest.mark.parametrize(
        "missing, default",
        [
            ("timeComplexity", "Could not determine"),
            ("spaceComplexity", "Could not determine"),
            ("suggestions", "No suggestions provided"),
            ("correctedCode", CODE),
        ],
    )
    def test_single_missing_field_is_defaulted(self, missing, default):
        data = {k: v for k, v in FULL.items() if k != missing}
        result = interpret_response(json.dumps(data), CODE)
        assert getattr(result, missing) == default
        for key, value in data.items():
            assert getattr(result, key) == value

    def test_falsy_values_count_as_missing(self):
        data = {"timeComplexity": "", "spaceComplexity": None, "suggestions": 0, "correctedCode": ""}
        result = interpret_response(json.dumps(data), CODE)
        assert result.timeComplexity == "Could not determine"
        assert result.spaceComplexity == "Could not determine"
        assert result.suggestions == "No suggestions provided"
        assert result.correctedCode == CODE

    def test_list_suggestions_are_joined(self):
        data = dict(FULL, suggestions=["Use a set", "Avoid nested loops"])
        result = interpret_response(json.dumps(data), CODE)
        assert result.suggestions == "Use a set\nAvoid nested loops"

    def test_empty_object_defaults_everything(self):
        result = interpret_response("{}", CODE)
        assert result.timeComplexity == "Could not determine"
        assert result.correctedCode == CODE

    def test_dict_value_rendered_as_json(self):
        data = dict(FULL, suggestions={"loop": "use a set"})
        result = interpret_response(json.dumps(data), CODE)
        assert result.suggestions == '{"loop": "use a set"}'

    def test_unparseable_raises(self):
        with pytest.raises(ResponseParseError):
            interpret_response("plain text", CODE)
