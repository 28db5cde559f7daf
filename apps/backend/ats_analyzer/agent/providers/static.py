"""
Static Provider

Returns a fixed reply instead of calling a model. Selected with
LLM_PROVIDER="demo" it serves the canned demo analysis below, and tests use it
as a fixed-response double for the backend.
"""

import json
import logging
from typing import Any, List, Optional

from ..exceptions import ProviderError
from .base import Provider

logger = logging.getLogger(__name__)

DEMO_RESPONSE = {
    "ats_score": 78,
    "matched_skills": [
        "React", "Node.js", "TypeScript", "JavaScript", "Git",
        "Problem-solving", "Team collaboration", "AWS",
    ],
    "missing_skills": [
        "Docker", "Kubernetes", "NoSQL databases",
        "Microservices architecture", "GraphQL",
    ],
    "recommendations": [
        "Add experience with containerization technologies like Docker and Kubernetes "
        "to match modern deployment practices.",
        "Include specific examples of NoSQL database usage (MongoDB, DynamoDB) "
        "to strengthen your backend profile.",
        "Highlight any microservices architecture experience or distributed systems knowledge.",
        "Consider adding GraphQL to your skill set as it's mentioned in the job requirements.",
        'Quantify your achievements with metrics (e.g., "Improved performance by 40%" '
        'instead of "Improved performance").',
        "Include more industry-specific keywords from the job description in your experience section.",
    ],
    "categories": {
        "technical_skills": 85,
        "experience": 75,
        "education": 90,
        "keywords": 65,
        "formatting": 80,
    },
}


class StaticProvider(Provider):
    """Provider that answers every prompt with the same text, or the same error."""

    name = "static"

    def __init__(self, reply: Optional[str] = None, error: Optional[Exception] = None):
        if reply is None and error is None:
            reply = json.dumps(DEMO_RESPONSE)
        self.reply = reply
        self.error = error
        self.prompts: List[str] = []

    async def __call__(self, prompt: str, **generation_args: Any) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            if isinstance(self.error, ProviderError):
                raise self.error
            raise ProviderError(f"static - Error generating response: {self.error}") from self.error
        logger.debug(f"StaticProvider answering prompt of {len(prompt)} chars")
        return self.reply
