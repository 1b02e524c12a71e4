"""Unit tests for the tag suggestion client."""

import json

import httpx
import pytest

from memora.adapter.error import TagSuggestionError
from memora.adapter.tagging.client import (
    HttpTagSuggester,
    MockTagSuggester,
    parse_suggestions,
    strip_code_fences,
)


def _client(handler) -> HttpTagSuggester:
    return HttpTagSuggester(
        base_url="http://tagger.test/", transport=httpx.MockTransport(handler)
    )


class TestParseSuggestions:
    """Tests for parse_suggestions."""

    def test_plain_json_list(self):
        body = json.dumps([{"tag": "cars", "weight": 1}, {"tag": "trucks", "weight": 0.9}])

        result = parse_suggestions(body)

        assert [(s.tag, s.weight) for s in result] == [("cars", 1.0), ("trucks", 0.9)]

    def test_fenced_json_string(self):
        fenced = '```json\n[{"tag": "classic", "weight": 0.6}]\n```'

        result = parse_suggestions(json.dumps(fenced))

        assert [(s.tag, s.weight) for s in result] == [("classic", 0.6)]

    def test_fenced_body(self):
        result = parse_suggestions('```\n[{"tag": "american", "weight": 0.7}]\n```')

        assert result[0].tag == "american"

    def test_weights_are_clamped(self):
        body = json.dumps([{"tag": "a", "weight": 1.7}, {"tag": "b", "weight": -2}])

        result = parse_suggestions(body)

        assert [s.weight for s in result] == [1.0, 0.0]

    @pytest.mark.parametrize(
        "body",
        [
            "not json",
            json.dumps({"tag": "cars", "weight": 1}),
            json.dumps([{"tag": "cars"}]),
            json.dumps([{"tag": 3, "weight": 1}]),
            json.dumps([{"tag": "cars", "weight": True}]),
            json.dumps(["cars"]),
        ],
    )
    def test_malformed_payloads(self, body):
        with pytest.raises(TagSuggestionError):
            parse_suggestions(body)

    def test_strip_code_fences_without_fence(self):
        assert strip_code_fences('  [1, 2] ') == "[1, 2]"


class TestHttpTagSuggester:
    """Tests for HttpTagSuggester."""

    @pytest.mark.asyncio
    async def test_text_request(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=[{"tag": "cars", "weight": 0.8}])

        result = await _client(handler).suggest_for_text("old cars", ["cars"], 1973)

        assert seen["url"] == "http://tagger.test/search-tags"
        assert seen["body"] == {"text": "old cars", "tags": ["cars"], "year": 1973}
        assert result[0].tag == "cars"

    @pytest.mark.asyncio
    async def test_image_request(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json="[]")

        result = await _client(handler).suggest_for_image(
            "http://media/x.jpg", [], None
        )

        assert seen["url"] == "http://tagger.test/image-tags"
        assert seen["body"]["image_url"] == "http://media/x.jpg"
        assert result == []

    @pytest.mark.asyncio
    async def test_server_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="boom")

        with pytest.raises(TagSuggestionError, match="500"):
            await _client(handler).suggest_for_text("q", [], None)

    @pytest.mark.asyncio
    async def test_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(TagSuggestionError, match="HTTP error"):
            await _client(handler).suggest_for_text("q", [], None)


class TestMockTagSuggester:
    """Tests for MockTagSuggester."""

    @pytest.mark.asyncio
    async def test_demo_weights(self):
        result = await MockTagSuggester().suggest_for_text("anything", [], None)

        assert [s.tag for s in result] == [
            "cars",
            "trucks",
            "1970s",
            "american",
            "classic",
            "muscle-car",
        ]
        assert result[0].weight == 1.0
