"""
Display helpers for analysis results and the input form.
"""

import re
from typing import List, Optional, Tuple

from ..schemas.pydantic import AnalysisResult

MIN_RECOMMENDED_WORDS = 50

CATEGORY_LABELS = (
    ("technical_skills", "Technical Skills"),
    ("experience", "Experience"),
    ("education", "Education"),
    ("keywords", "Keywords"),
    ("formatting", "Formatting"),
)

SAMPLE_JOB_DESCRIPTION = """We are looking for a Senior Software Engineer to join our dynamic team. The ideal candidate will have:

• 5+ years of experience in full-stack development
• Proficiency in React, Node.js, and TypeScript
• Experience with cloud platforms (AWS, Azure, or GCP)
• Strong knowledge of databases (SQL and NoSQL)
• Experience with containerization (Docker, Kubernetes)
• Excellent problem-solving and communication skills
• Bachelor's degree in Computer Science or related field

Responsibilities include developing scalable web applications, collaborating with cross-functional teams, and mentoring junior developers."""


def score_band(score: int) -> str:
    if score >= 80:
        return "excellent"
    if score >= 60:
        return "good"
    if score >= 40:
        return "fair"
    return "poor"


def score_label(score: int) -> str:
    return {
        "excellent": "Excellent",
        "good": "Good",
        "fair": "Fair",
        "poor": "Needs Improvement",
    }[score_band(score)]


def category_breakdown(result: AnalysisResult) -> List[Tuple[str, int]]:
    """Rows for the category chart, in a fixed order; empty without categories."""
    if result.categories is None:
        return []
    return [(label, getattr(result.categories, field)) for field, label in CATEGORY_LABELS]


def completion_message(result: AnalysisResult) -> str:
    return f"Your resume scored {result.ats_score}/100 for ATS compatibility."


def readiness_message(has_job_description: bool, has_resume: bool) -> Optional[str]:
    if has_job_description and has_resume:
        return None
    if not has_job_description and not has_resume:
        return "Please add a job description and upload your resume to begin analysis"
    if not has_job_description:
        return "Please add a job description to analyze your resume"
    return "Please upload your resume to begin analysis"


def word_count(text: str) -> int:
    return len(re.findall(r"\S+", text or ""))


def needs_more_detail(job_description: str) -> bool:
    """True for a non-empty job description shorter than the recommended length."""
    count = word_count(job_description)
    return 0 < count < MIN_RECOMMENDED_WORDS


def format_report(result: AnalysisResult) -> str:
    lines = [
        f"ATS Compatibility Score: {result.ats_score}/100 ({score_label(result.ats_score)})",
        "",
        f"Matched Skills ({len(result.matched_skills)}):",
    ]
    lines += [f"  + {skill}" for skill in result.matched_skills] or ["  No matching skills found"]
    lines += ["", f"Missing Skills ({len(result.missing_skills)}):"]
    lines += [f"  - {skill}" for skill in result.missing_skills] or ["  All required skills are present!"]

    breakdown = category_breakdown(result)
    if breakdown:
        lines += ["", "Category Breakdown:"]
        lines += [f"  {label:<17}{score:>4}" for label, score in breakdown]

    lines += ["", "Recommendations:"]
    lines += [f"  * {rec}" for rec in result.recommendations] or [
        "  No specific recommendations at this time."
    ]
    return "\n".join(lines)
