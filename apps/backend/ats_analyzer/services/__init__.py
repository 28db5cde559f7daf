from .analysis_requester import AnalysisRequester
from .analysis_session import AnalysisSession, AnalysisStatus
from .exceptions import (
    AnalysisInProgressError,
    AnalysisInputError,
)

__all__ = [
    "AnalysisRequester",
    "AnalysisSession",
    "AnalysisStatus",
    "AnalysisInProgressError",
    "AnalysisInputError",
]
