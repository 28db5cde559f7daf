from abc import ABC, abstractmethod
from typing import Any


class Provider(ABC):
    """
    Abstract base class for text-generation providers.

    A provider sends one prompt to its backend and returns the raw text reply.
    Failures are reported as `ProviderError`.
    """

    name: str = "provider"

    @abstractmethod
    async def __call__(self, prompt: str, **generation_args: Any) -> str: ...
