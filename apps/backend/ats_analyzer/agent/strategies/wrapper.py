import json
import logging
from typing import Any, Dict, Optional

from ..exceptions import ResponseFormatError
from ..providers.base import Provider

logger = logging.getLogger(__name__)


def find_json_object(text: str) -> Optional[str]:
    """
    Return the first top-level JSON object embedded in `text`, or None.

    Scans from the first `{` to its matching `}`. Braces inside JSON string
    literals (including escaped quotes) do not count towards the nesting depth,
    so nested objects such as `categories` never truncate the span.
    """
    start = text.find("{")
    if start < 0:
        return None

    depth = 0
    in_string = False
    escaped = False
    for pos in range(start, len(text)):
        char = text[pos]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return text[start:pos + 1]
    # unbalanced: the object never closes
    return None


class Strategy:
    async def __call__(
        self, prompt: str, provider: Provider, **generation_args: Any
    ) -> Dict[str, Any]:
        raise NotImplementedError


class JSONWrapper(Strategy):
    """Turns the raw text reply of a provider into a JSON object."""

    async def __call__(
        self, prompt: str, provider: Provider, **generation_args: Any
    ) -> Dict[str, Any]:
        response = await provider(prompt, **generation_args)
        return self.parse(response)

    @staticmethod
    def parse(response: str) -> Dict[str, Any]:
        span = find_json_object(response or "")
        if span is None:
            logger.error(f"No JSON object found in LLM reply: {response!r:.200}")
            raise ResponseFormatError("Invalid response format from the analysis backend")
        try:
            return json.loads(span)
        except json.JSONDecodeError as e:
            logger.error(f"LLM reply contains malformed JSON: {e}")
            raise ResponseFormatError(
                f"Invalid response format from the analysis backend: {e}"
            ) from e
