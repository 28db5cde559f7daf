import logging
from typing import Any, Dict, Optional

from fastapi.concurrency import run_in_threadpool
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from ..exceptions import ProviderError
from .base import Provider
from ...core import settings

logger = logging.getLogger(__name__)


class GeminiProvider(Provider):
    """Google Gemini text generation through the google-genai SDK."""

    name = "gemini"

    def __init__(
        self,
        api_key: Optional[str] = settings.LLM_API_KEY,
        model_name: str = settings.LL_MODEL,
        opts: Optional[Dict[str, Any]] = None,
    ):
        if not api_key:
            raise ValueError("An API key is required for the Gemini provider")
        self.opts = opts or {}
        self.model = model_name
        self._client = genai.Client(api_key=api_key)

    def _config(self) -> types.GenerateContentConfig:
        kwargs: Dict[str, Any] = {}
        if self.opts.get("temperature") is not None:
            kwargs["temperature"] = self.opts["temperature"]
        if self.opts.get("max_tokens") is not None:
            kwargs["max_output_tokens"] = self.opts["max_tokens"]
        return types.GenerateContentConfig(**kwargs)

    def _generate_sync(self, prompt: str) -> str:
        """Generate a response from the model synchronously."""
        try:
            response = self._client.models.generate_content(
                model=self.model,
                contents=prompt,
                config=self._config(),
            )
        except genai_errors.APIError as e:
            logger.error(f"Gemini generation error: status={e.code}, message={e}")
            raise ProviderError(f"Gemini - Error generating response: {e}") from e
        except Exception as e:
            logger.error(f"Gemini sync error: {e}")
            raise ProviderError(f"Gemini - Error generating response: {e}") from e
        return (response.text or "").strip()

    async def __call__(self, prompt: str, **generation_args: Any) -> str:
        if generation_args:
            logger.warning(f"GeminiProvider ignoring generation_args {generation_args}")
        return await run_in_threadpool(self._generate_sync, prompt)
