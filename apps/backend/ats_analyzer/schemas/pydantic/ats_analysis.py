import math
from dataclasses import dataclass
from typing import Annotated, Any, Optional, Tuple

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationError, field_validator


def _coerce_score(value: Any) -> Any:
    # JSON booleans would otherwise pass as 0/1
    if isinstance(value, bool):
        raise ValueError("score must be a number, not a boolean")
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError("score must be a finite number")
        return round(value)
    return value


Score = Annotated[int, BeforeValidator(_coerce_score), Field(ge=0, le=100)]


class AnalysisRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    job_description: str
    resume_text: str


class CategoryScores(BaseModel):
    model_config = ConfigDict(frozen=True)

    technical_skills: Score
    experience: Score
    education: Score
    keywords: Score
    formatting: Score


class AnalysisResult(BaseModel):
    """
    Validated outcome of one analysis.

    Immutable: skill lists are stored as tuples and the model is frozen.
    """

    model_config = ConfigDict(frozen=True)

    ats_score: Score
    matched_skills: Tuple[str, ...]
    missing_skills: Tuple[str, ...] = ()
    recommendations: Tuple[str, ...] = ()
    categories: Optional[CategoryScores] = None

    @field_validator("missing_skills", "recommendations", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return () if value is None else value


@dataclass(frozen=True)
class AnalysisValidation:
    """Tagged outcome of `validate_analysis`: either a result or a reason."""

    result: Optional[AnalysisResult] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.result is not None


def _describe(e: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
    )


def validate_analysis(data: Any) -> AnalysisValidation:
    """
    Check a parsed backend reply against the analysis wire shape.

    `ats_score` must be present and truthy, so a score of exactly 0 is treated
    the same as a missing score. The check is repeated after rounding, so a
    fractional score below 0.5 is rejected too. `matched_skills` must be a
    JSON array.
    """
    if not isinstance(data, dict):
        return AnalysisValidation(error="expected a JSON object")
    if not data.get("ats_score"):
        return AnalysisValidation(error="ats_score is missing or zero")
    if not isinstance(data.get("matched_skills"), list):
        return AnalysisValidation(error="matched_skills must be a list")
    try:
        result = AnalysisResult.model_validate(data)
    except ValidationError as e:
        return AnalysisValidation(error=_describe(e))
    if not result.ats_score:
        return AnalysisValidation(error="ats_score is missing or zero")
    return AnalysisValidation(result=result)
