import enum
import logging
from typing import Optional

from ..agent.exceptions import AnalysisError
from ..schemas.pydantic import AnalysisResult
from .analysis_requester import AnalysisRequester
from .exceptions import AnalysisInProgressError, AnalysisInputError

logger = logging.getLogger(__name__)


class AnalysisStatus(str, enum.Enum):
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    DONE = "done"
    ERROR = "error"


class AnalysisSession:
    """
    Front-end state around an AnalysisRequester.

    Holds a single "current" result (no history), refuses blank inputs before
    any backend call, and refuses a new submission while one is in flight.
    A failed analysis records `last_error` and keeps the previous result.
    """

    def __init__(self, requester: AnalysisRequester):
        self.requester = requester
        self.current: Optional[AnalysisResult] = None
        self.last_error: Optional[AnalysisError] = None
        self._in_flight = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    @property
    def status(self) -> AnalysisStatus:
        if self._in_flight:
            return AnalysisStatus.IN_FLIGHT
        if self.last_error is not None:
            return AnalysisStatus.ERROR
        if self.current is not None:
            return AnalysisStatus.DONE
        return AnalysisStatus.IDLE

    async def submit(self, job_description: str, resume_text: str) -> AnalysisResult:
        missing_job = not (job_description or "").strip()
        missing_resume = not (resume_text or "").strip()
        if missing_job or missing_resume:
            raise AnalysisInputError(
                missing_job_description=missing_job, missing_resume=missing_resume
            )
        if self._in_flight:
            raise AnalysisInProgressError()

        self._in_flight = True
        try:
            result = await self.requester.analyze(job_description, resume_text)
        except AnalysisError as e:
            self.last_error = e
            logger.warning(f"Analysis failed: {e}")
            raise
        finally:
            self._in_flight = False

        self.current = result
        self.last_error = None
        return result

    def reset(self) -> None:
        self.current = None
        self.last_error = None
