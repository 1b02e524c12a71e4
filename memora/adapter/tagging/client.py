"""Tag suggestion service client.

The suggestion service looks at a text query or an image and answers with the
tags it thinks are relevant, each with a weight in [0, 1]. It is a language
model behind HTTP, so the answer is sometimes a JSON document and sometimes a
JSON string wrapped in Markdown code fences.
"""

import json
import re
from typing import Any, Optional

import httpx
import logfire

from memora.adapter.error import TagSuggestionError
from memora.domain.service.search_service import TagSuggester
from memora.domain.value import WeightedTag

_FENCE_RE = re.compile(r"^\s*```(?:json)?\s*(.*?)\s*```\s*$", re.DOTALL)

# Weights returned by the mock client, in descending order
MOCK_WEIGHTS: dict[str, float] = {
    "cars": 1.0,
    "trucks": 0.9,
    "1970s": 0.8,
    "american": 0.7,
    "classic": 0.6,
    "muscle-car": 0.5,
}


def strip_code_fences(text: str) -> str:
    """Remove a surrounding ```json ... ``` block, if any.

    Args:
        text: Raw model output

    Returns:
        The fenced content, or the stripped input when there is no fence
    """
    match = _FENCE_RE.match(text)
    return match.group(1) if match else text.strip()


def parse_suggestions(body: str) -> list[WeightedTag]:
    """Parse a suggestion service answer into weighted tags.

    Accepts a JSON list, a fenced JSON list, or a JSON string holding either.
    Weights outside [0, 1] are clamped.

    Args:
        body: Response body

    Returns:
        Weighted tags in the order given

    Raises:
        TagSuggestionError: If the body is not a list of ``{tag, weight}`` objects
    """
    payload: Any = body
    # A JSON string may wrap the real document, unwrap at most twice
    for _ in range(2):
        if not isinstance(payload, str):
            break
        try:
            payload = json.loads(strip_code_fences(payload))
        except json.JSONDecodeError as e:
            raise TagSuggestionError(f"Suggestion payload is not JSON: {e}") from e

    if not isinstance(payload, list):
        raise TagSuggestionError("Suggestion payload is not a list")

    suggestions: list[WeightedTag] = []
    for item in payload:
        if not isinstance(item, dict):
            raise TagSuggestionError(f"Malformed suggestion: {item!r}")
        tag = item.get("tag")
        weight = item.get("weight")
        if (
            not isinstance(tag, str)
            or isinstance(weight, bool)
            or not isinstance(weight, (int, float))
        ):
            raise TagSuggestionError(f"Malformed suggestion: {item!r}")
        suggestions.append(
            WeightedTag(tag=tag, weight=min(1.0, max(0.0, float(weight))))
        )
    return suggestions


class HttpTagSuggester(TagSuggester):
    """Tag suggester backed by the HTTP suggestion service."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Root URL of the suggestion service
            timeout_seconds: Per-request timeout
            transport: Custom httpx transport (tests pass a MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.transport = transport

    async def suggest_for_text(
        self, text: str, known_tags: list[str], year: Optional[int] = None
    ) -> list[WeightedTag]:
        """Suggest weighted tags for a text query."""
        return await self._request(
            "/search-tags", {"text": text, "tags": known_tags, "year": year}
        )

    async def suggest_for_image(
        self, image_url: str, known_tags: list[str], year: Optional[int] = None
    ) -> list[WeightedTag]:
        """Suggest weighted tags for an image."""
        return await self._request(
            "/image-tags", {"image_url": image_url, "tags": known_tags, "year": year}
        )

    async def _request(self, path: str, body: dict[str, Any]) -> list[WeightedTag]:
        url = f"{self.base_url}{path}"
        with logfire.span("tag_suggester.request", url=url, known_tags=len(body["tags"])):
            try:
                async with httpx.AsyncClient(transport=self.transport) as client:
                    response = await client.post(
                        url, json=body, timeout=self.timeout_seconds
                    )
            except httpx.HTTPError as e:
                logfire.error("Tag suggestion HTTP error", url=url, error=str(e))
                raise TagSuggestionError(f"HTTP error calling {url}: {e}") from e

            if not response.is_success:
                logfire.error(
                    "Tag suggestion request failed",
                    status_code=response.status_code,
                    error=response.text,
                )
                raise TagSuggestionError(
                    f"Tag suggestion failed: {response.status_code}"
                )

            try:
                suggestions = parse_suggestions(response.text)
            except TagSuggestionError:
                logfire.error("Malformed tag suggestions", body=response.text[:500])
                raise

            logfire.info("Tags suggested", count=len(suggestions))
            return suggestions


class MockTagSuggester(TagSuggester):
    """Mock tag suggester for testing and local development.

    Always answers with the same demo weights, ignoring its input.
    """

    async def suggest_for_text(
        self, text: str, known_tags: list[str], year: Optional[int] = None
    ) -> list[WeightedTag]:
        return self._demo()

    async def suggest_for_image(
        self, image_url: str, known_tags: list[str], year: Optional[int] = None
    ) -> list[WeightedTag]:
        return self._demo()

    @staticmethod
    def _demo() -> list[WeightedTag]:
        return [WeightedTag(tag=tag, weight=w) for tag, w in MOCK_WEIGHTS.items()]
