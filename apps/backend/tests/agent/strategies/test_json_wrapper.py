"""
Tests for JSON extraction from raw LLM replies.

These tests verify:
1. The first balanced top-level object is found despite surrounding prose
2. Nested objects and braces inside strings do not truncate the span
3. Replies without a usable object raise ResponseFormatError
"""

import json

import pytest

from ats_analyzer.agent.exceptions import ResponseFormatError
from ats_analyzer.agent.providers import StaticProvider
from ats_analyzer.agent.strategies import JSONWrapper, find_json_object


class TestFindJsonObject:
    """Tests for the balanced-brace scanner."""

    def test_whole_reply_is_object(self):
        assert find_json_object('{"a": 1}') == '{"a": 1}'

    def test_object_wrapped_in_prose(self):
        text = 'Here is the result: {"ats_score": 70} Thanks'
        assert find_json_object(text) == '{"ats_score": 70}'

    def test_nested_object_is_not_truncated(self):
        span = '{"ats_score": 70, "categories": {"education": 90, "keywords": 60}}'
        text = f"Sure!\n{span}\nLet me know if you need more."
        assert find_json_object(text) == span

    def test_braces_inside_strings_are_ignored(self):
        span = '{"recommendations": ["Use {placeholders} sparingly", "Close } braces"]}'
        assert find_json_object(span + " trailing }") == span

    def test_escaped_quotes_inside_strings(self):
        span = r'{"note": "say \"hi\" {", "x": 1}'
        assert find_json_object(span + "}") == span

    def test_takes_first_object_only(self):
        text = '{"first": 1} and then {"second": 2}'
        assert find_json_object(text) == '{"first": 1}'

    def test_markdown_fenced_reply(self):
        text = '```json\n{"ats_score": 55}\n```'
        assert find_json_object(text) == '{"ats_score": 55}'

    def test_no_brace_returns_none(self):
        assert find_json_object("I could not analyze this resume.") is None

    def test_unbalanced_returns_none(self):
        assert find_json_object('{"ats_score": 70, "categories": {') is None

    def test_empty_text_returns_none(self):
        assert find_json_object("") is None


class TestJSONWrapper:
    """Tests for JSONWrapper parsing and provider delegation."""

    def test_parse_returns_dict(self, wire_reply):
        text = f"Here is the result: {json.dumps(wire_reply)} Thanks"
        assert JSONWrapper.parse(text) == wire_reply

    def test_parse_without_object_raises(self):
        with pytest.raises(ResponseFormatError):
            JSONWrapper.parse("no json here")

    def test_parse_malformed_object_raises(self):
        with pytest.raises(ResponseFormatError) as exc_info:
            JSONWrapper.parse("{ats_score: 70, matched_skills: [React]}")
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    def test_parse_none_reply_raises(self):
        with pytest.raises(ResponseFormatError):
            JSONWrapper.parse(None)

    @pytest.mark.asyncio
    async def test_call_sends_prompt_to_provider(self):
        provider = StaticProvider(reply='prefix {"ats_score": 10, "matched_skills": []}')
        result = await JSONWrapper()("the prompt", provider)

        assert result == {"ats_score": 10, "matched_skills": []}
        assert provider.prompts == ["the prompt"]
