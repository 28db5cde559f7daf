from .manager import AgentManager
from .exceptions import (
    AnalysisError,
    BackendCallError,
    ConfigurationError,
    ProviderError,
    ResponseFormatError,
    ResponseShapeError,
    StrategyError,
)

__all__ = [
    "AgentManager",
    "AnalysisError",
    "BackendCallError",
    "ConfigurationError",
    "ProviderError",
    "ResponseFormatError",
    "ResponseShapeError",
    "StrategyError",
]
