import asyncio
import logging
from typing import Any, Dict, Optional

from ..core import settings
from .exceptions import BackendCallError, ConfigurationError, ProviderError
from .providers.base import Provider
from .strategies.wrapper import JSONWrapper

logger = logging.getLogger(__name__)

PROVIDERS_REQUIRING_KEY = ("gemini",)


class AgentManager:
    """
    Owns the configured LLM provider and the JSON strategy.

    Build one instance at process start and hand it to whatever runs analyses.
    Construction fails with ConfigurationError when the backend is unusable,
    so a missing credential is reported once rather than on every request.
    """

    def __init__(self,
                 model: str = settings.LL_MODEL,
                 model_provider: str = settings.LLM_PROVIDER,
                 api_key: Optional[str] = settings.LLM_API_KEY,
                 base_url: Optional[str] = settings.LLM_BASE_URL,
                 timeout: float = settings.LLM_TIMEOUT_SECONDS,
                 provider: Optional[Provider] = None,
                 **opts: Any,
                 ) -> None:
        self.strategy = JSONWrapper()
        self.model = model
        self.model_provider = model_provider
        self.timeout = timeout
        # Default options for any LLM. Not all can handle them
        # but each provider can make best effort.
        self.opts: Dict[str, Any] = {
            "temperature": settings.LLM_TEMPERATURE,
            "max_tokens": settings.LLM_MAX_TOKENS,
        }
        self.opts.update(opts)
        if provider is not None:
            self.provider = provider
        else:
            self.provider = self._get_provider(api_key, base_url)
        logger.info(
            f"AgentManager ready: provider={self.provider_name}, model={self.model}"
        )

    @property
    def provider_name(self) -> str:
        return getattr(self.provider, "name", type(self.provider).__name__)

    def _get_provider(self, api_key: Optional[str], base_url: Optional[str]) -> Provider:
        name = (self.model_provider or "").strip()
        if not name:
            raise ConfigurationError("LLM_PROVIDER is not configured")
        if name in PROVIDERS_REQUIRING_KEY and not api_key:
            raise ConfigurationError(
                f"LLM_API_KEY is not configured; the '{name}' provider cannot be used"
            )
        try:
            match name:
                case 'gemini':
                    from .providers.gemini import GeminiProvider
                    return GeminiProvider(api_key=api_key,
                                          model_name=self.model,
                                          opts=self.opts)
                case 'ollama':
                    from .providers.ollama import OllamaProvider
                    return OllamaProvider(model_name=self.model,
                                          api_base_url=base_url,
                                          opts=self.opts)
                case 'demo':
                    from .providers.static import StaticProvider
                    logger.warning("Using the demo provider: every analysis returns the canned result")
                    return StaticProvider()
                case _:
                    if not api_key:
                        raise ConfigurationError(
                            f"LLM_API_KEY is not configured; the '{name}' provider cannot be used"
                        )
                    from .providers.llama_index import LlamaIndexProvider
                    return LlamaIndexProvider(api_key=api_key,
                                              model_name=self.model,
                                              api_base_url=base_url,
                                              provider=name,
                                              opts=self.opts)
        except ConfigurationError:
            raise
        except (ImportError, AttributeError, ValueError, TypeError, ProviderError) as e:
            logger.error(f"Could not build LLM provider '{name}': {e}")
            raise ConfigurationError(f"Could not build LLM provider '{name}': {e}") from e

    async def run(self, prompt: str, timeout: Optional[float] = None, **kwargs: Any) -> Dict[str, Any]:
        """
        Send the prompt to the provider once and return the JSON object in its reply.

        Raises BackendCallError when the call fails or exceeds `timeout`
        (default: the configured LLM timeout) and ResponseFormatError when the
        reply holds no parseable JSON object.
        """
        limit = self.timeout if timeout is None else timeout
        try:
            return await asyncio.wait_for(
                self.strategy(prompt, self.provider, **kwargs), timeout=limit
            )
        except asyncio.TimeoutError as e:
            logger.error(f"{self.provider_name} did not answer within {limit}s")
            raise BackendCallError(
                provider=self.provider_name,
                original_error=f"timed out after {limit}s",
            ) from e
        except ProviderError as e:
            logger.error(f"{self.provider_name} call failed: {e}")
            raise BackendCallError(
                provider=self.provider_name,
                original_error=str(e),
            ) from e
