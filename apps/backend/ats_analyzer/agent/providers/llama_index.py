"""
LlamaIndex Provider Integration

Lets the analysis run on any LlamaIndex LLM integration, named by its dotted
class path, e.g. LLM_PROVIDER="llama_index.llms.anthropic.Anthropic". The
matching `llama-index-llms-*` package must be installed.

The integration is constructed with `model`, `api_key` and, when configured,
`base_url`, `temperature` and `max_tokens`. Integrations that predate the
`model` keyword receive `model_name` instead.
"""

import logging
from importlib import import_module
from typing import Any, Dict, Optional, Tuple

from fastapi.concurrency import run_in_threadpool
from llama_index.core.base.llms.base import BaseLLM

from ..exceptions import ProviderError
from .base import Provider
from ...core import settings

logger = logging.getLogger(__name__)


def _get_real_provider(provider_name) -> Tuple[type, str, str]:
    """Import `package.module.ClassName` and return (class, module, class name)."""
    if not isinstance(provider_name, str):
        raise ValueError("provider_name must be a dotted class path such as 'llama_index.llms.openai.OpenAI'")
    modname, _, classname = provider_name.rpartition(".")
    if not modname or not classname:
        raise ValueError(f"'{provider_name}' is not a dotted class path")
    module = import_module(modname)
    return getattr(module, classname), modname, classname


def _client_kwargs(model_name: str, api_key: Optional[str],
                   api_base_url: Optional[str], opts: Dict[str, Any]) -> Dict[str, Any]:
    kwargs: Dict[str, Any] = {"model": model_name, "api_key": api_key}
    if api_base_url:
        kwargs["base_url"] = api_base_url
    for key in ("temperature", "max_tokens"):
        if opts.get(key) is not None:
            kwargs[key] = opts[key]
    return kwargs


class LlamaIndexProvider(Provider):
    """Sends analysis prompts through a LlamaIndex `BaseLLM.complete` call."""

    name = "llama_index"

    def __init__(self,
                 api_key: Optional[str] = settings.LLM_API_KEY,
                 api_base_url: Optional[str] = settings.LLM_BASE_URL,
                 model_name: str = settings.LL_MODEL,
                 provider: str = settings.LLM_PROVIDER,
                 opts: Optional[Dict[str, Any]] = None):
        if not provider:
            raise ValueError("A LlamaIndex LLM class path is required")
        self.opts = opts or {}
        self._model = model_name
        llm_cls, self._modname, self._classname = _get_real_provider(provider)
        if not isinstance(llm_cls, type) or not issubclass(llm_cls, BaseLLM):
            raise TypeError(f"{provider} is not a LlamaIndex LLM (subclass of BaseLLM)")
        self.name = self._classname
        self._client = self._build_client(
            llm_cls, _client_kwargs(model_name, api_key, api_base_url, self.opts)
        )

    @staticmethod
    def _build_client(llm_cls: type, kwargs: Dict[str, Any]) -> BaseLLM:
        model_name = kwargs["model"]
        try:
            return llm_cls(**kwargs)
        except TypeError as e:
            if "model" not in str(e) and "unexpected keyword argument" not in str(e):
                raise
            # older integrations
            kwargs = {k: v for k, v in kwargs.items() if k != "model"}
            kwargs["model_name"] = model_name
            logger.debug(f"{llm_cls.__name__} rejected 'model', retrying with 'model_name'")
            return llm_cls(**kwargs)

    def _complete_sync(self, prompt: str) -> str:
        try:
            return self._client.complete(prompt).text
        except Exception as e:
            logger.error(f"{self.name} completion error: {e}")
            raise ProviderError(f"llama_index - Error generating response: {e}") from e

    async def __call__(self, prompt: str, **generation_args: Any) -> str:
        if generation_args:
            logger.warning(f"LlamaIndexProvider ignoring generation_args: {generation_args}")
        return await run_in_threadpool(self._complete_sync, prompt)
