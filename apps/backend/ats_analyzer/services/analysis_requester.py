import logging
from typing import Optional

from ..agent import AgentManager
from ..agent.exceptions import ResponseShapeError
from ..prompt import build_prompt
from ..schemas.pydantic import AnalysisRequest, AnalysisResult, validate_analysis

logger = logging.getLogger(__name__)


class AnalysisRequester:
    """
    Turns a job description and resume text into a validated AnalysisResult.

    Stateless apart from the AgentManager it is given; every call sends exactly
    one prompt to the backend. Replies come from a generative model, so two
    calls with the same inputs may score differently.
    """

    def __init__(self, agent_manager: AgentManager):
        self.agent_manager = agent_manager

    async def analyze(
        self,
        job_description: str,
        resume_text: str,
        timeout: Optional[float] = None,
    ) -> AnalysisResult:
        """
        Run one analysis.

        The caller is responsible for making sure both inputs are non-empty.

        Raises:
            BackendCallError: the backend call failed or timed out.
            ResponseFormatError: the reply holds no parseable JSON object.
            ResponseShapeError: the JSON lacks a truthy `ats_score` or a
                `matched_skills` list, or does not fit the result model.
        """
        request = AnalysisRequest(job_description=job_description, resume_text=resume_text)
        prompt = build_prompt(request.job_description, request.resume_text)
        logger.info(
            f"Requesting ATS analysis via {self.agent_manager.provider_name} "
            f"(job description: {len(job_description)} chars, resume: {len(resume_text)} chars)"
        )

        data = await self.agent_manager.run(prompt, timeout=timeout)

        outcome = validate_analysis(data)
        if not outcome.ok:
            logger.error(f"Invalid analysis data structure: {outcome.error}")
            raise ResponseShapeError(f"Invalid analysis data structure: {outcome.error}")

        logger.info(f"ATS analysis complete: score={outcome.result.ats_score}")
        return outcome.result
