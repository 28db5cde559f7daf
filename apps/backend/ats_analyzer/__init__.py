"""ATS compatibility analysis of a resume against a job description."""

__version__ = "0.1.0"
