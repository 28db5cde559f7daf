SCHEMA = """{
  "ats_score": <number between 0-100>,
  "matched_skills": [<array of skills/keywords found in both resume and job description>],
  "missing_skills": [<array of important skills/keywords from job description that are missing in resume>],
  "recommendations": [<array of specific actionable recommendations to improve ATS score>],
  "categories": {
    "technical_skills": <score 0-100 for technical skills match>,
    "experience": <score 0-100 for experience relevance>,
    "education": <score 0-100 for education alignment>,
    "keywords": <score 0-100 for keyword optimization>,
    "formatting": <score 0-100 for ATS-friendly formatting>
  }
}"""

PROMPT = """
You are an expert ATS (Applicant Tracking System) analyzer and resume optimization specialist. Analyze the following resume against the provided job description and return a detailed analysis.

JOB DESCRIPTION:
{1}

RESUME CONTENT:
{2}

Please analyze the resume and provide a comprehensive ATS compatibility assessment. Return your response in the following JSON format only (no additional text, no markdown):

{0}

Important guidelines:
- Be precise and specific in skill matching
- Focus on hard skills, soft skills, and industry keywords
- Consider experience level, education requirements, and certifications
- Provide actionable recommendations for improvement
- Score should reflect realistic ATS compatibility
- Include both technical and non-technical skills in analysis
- Return ONLY the JSON object. Do not add keys.
"""


def build_prompt(job_description: str, resume_text: str) -> str:
    """Embed both inputs verbatim in the analysis instructions."""
    return PROMPT.format(SCHEMA, job_description, resume_text)
