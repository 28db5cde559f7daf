from .ats_analysis import PROMPT, SCHEMA, build_prompt

__all__ = ["PROMPT", "SCHEMA", "build_prompt"]
