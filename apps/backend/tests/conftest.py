import json

import pytest

from ats_analyzer.agent import AgentManager
from ats_analyzer.agent.providers import StaticProvider
from ats_analyzer.services import AnalysisRequester


JOB_DESCRIPTION = (
    "Senior Engineer. We need 5 years React, Docker, AWS experience "
    "building scalable web applications."
)
RESUME_TEXT = "Jane Doe. Frontend engineer. Skills: React, AWS, TypeScript."


@pytest.fixture
def job_description() -> str:
    return JOB_DESCRIPTION


@pytest.fixture
def resume_text() -> str:
    return RESUME_TEXT


@pytest.fixture
def wire_reply() -> dict:
    """A well-formed backend reply for the React/AWS/Docker scenario."""
    return {
        "ats_score": 70,
        "matched_skills": ["React", "AWS"],
        "missing_skills": ["Docker"],
        "recommendations": ["Add Docker experience"],
        "categories": {
            "technical_skills": 80,
            "experience": 70,
            "education": 90,
            "keywords": 60,
            "formatting": 75,
        },
    }


@pytest.fixture
def make_requester():
    """Build an AnalysisRequester whose backend always answers with `reply`."""

    def _make(reply=None, error=None):
        if isinstance(reply, dict):
            reply = json.dumps(reply)
        provider = StaticProvider(reply=reply, error=error)
        manager = AgentManager(model_provider="static", provider=provider, timeout=5)
        return AnalysisRequester(manager), provider

    return _make
