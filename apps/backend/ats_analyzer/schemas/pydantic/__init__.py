from .ats_analysis import (
    AnalysisRequest,
    AnalysisResult,
    AnalysisValidation,
    CategoryScores,
    validate_analysis,
)

__all__ = [
    "AnalysisRequest",
    "AnalysisResult",
    "AnalysisValidation",
    "CategoryScores",
    "validate_analysis",
]
