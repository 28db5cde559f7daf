from typing import Optional


class AnalysisInputError(ValueError):
    """
    Raised when an analysis is requested without a job description or resume.

    Attributes:
        missing_job_description: The job description was empty after trimming.
        missing_resume: The resume text was empty after trimming.
    """

    def __init__(
        self,
        missing_job_description: bool = False,
        missing_resume: bool = False,
        message: Optional[str] = None,
    ):
        self.missing_job_description = missing_job_description
        self.missing_resume = missing_resume
        if message is None:
            if missing_job_description and missing_resume:
                message = "Please provide both a job description and your resume before analyzing."
            elif missing_job_description:
                message = "Please add a job description to analyze your resume."
            else:
                message = "Please upload your resume to begin analysis."
        super().__init__(message)


class AnalysisInProgressError(RuntimeError):
    """Raised when an analysis is submitted while another one is still running."""

    def __init__(self, message: str = "An analysis is already in progress."):
        super().__init__(message)
