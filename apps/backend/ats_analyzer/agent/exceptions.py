from typing import Optional


class ProviderError(RuntimeError):
    """Raised when the underlying LLM provider fails"""


class AnalysisError(RuntimeError):
    """Base class for every failure surfaced to the caller of an analysis."""


class ConfigurationError(AnalysisError):
    """Raised at startup when the LLM backend is not configured or cannot be built.

    This is fatal for the analysis feature: nothing is retried per call.
    """


class BackendCallError(AnalysisError):
    """Raised when the call to the LLM backend itself fails or times out."""

    default_message = "Failed to analyze resume. Please check your connection and try again."

    def __init__(
        self,
        message: Optional[str] = None,
        provider: Optional[str] = None,
        original_error: Optional[str] = None,
    ):
        self.provider = provider
        self.original_error = original_error
        super().__init__(message or self.default_message)


class StrategyError(AnalysisError):
    """Raised when a Strategy cannot parse/return expected output"""


class ResponseFormatError(StrategyError):
    """Raised when the backend reply contains no parseable JSON object."""


class ResponseShapeError(StrategyError):
    """Raised when the parsed reply lacks the fields an analysis requires."""
