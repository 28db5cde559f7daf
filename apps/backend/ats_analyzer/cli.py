"""
Command-line entry point: analyze one resume text file against one job description.

Usage:
    ats-analyze job.txt resume.txt
    cat resume.txt | ats-analyze job.txt - --json
    ats-analyze --sample-job resume.txt --provider demo
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

from .agent import AgentManager, AnalysisError
from .core import settings, setup_logging
from .services import AnalysisRequester, AnalysisSession
from .services.exceptions import AnalysisInputError
from .services.presentation import (
    SAMPLE_JOB_DESCRIPTION,
    completion_message,
    format_report,
    needs_more_detail,
)

logger = logging.getLogger(__name__)


def _read(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as fh:
        return fh.read()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ats-analyze",
        description="Score a resume's ATS compatibility against a job description.",
    )
    parser.add_argument("job", nargs="?", help="job description text file, or - for stdin")
    parser.add_argument("resume", help="resume text file, or - for stdin")
    parser.add_argument("--sample-job", action="store_true",
                        help="use the built-in sample job description")
    parser.add_argument("--json", action="store_true", dest="as_json",
                        help="print the result as JSON")
    parser.add_argument("--provider", default=settings.LLM_PROVIDER,
                        help="LLM provider (gemini, ollama, demo or a llama_index class path)")
    parser.add_argument("--model", default=settings.LL_MODEL)
    parser.add_argument("--timeout", type=float, default=settings.LLM_TIMEOUT_SECONDS,
                        help="seconds to wait for the backend")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging()

    if args.sample_job == bool(args.job):
        parser.error("give either a job description file or --sample-job")
    if args.job == "-" and args.resume == "-":
        parser.error("only one input can be read from stdin")

    try:
        job_description = SAMPLE_JOB_DESCRIPTION if args.sample_job else _read(args.job)
        resume_text = _read(args.resume)
    except (OSError, UnicodeDecodeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if needs_more_detail(job_description):
        logger.warning("Job description is short; at least 50 words are recommended for accurate analysis")

    try:
        manager = AgentManager(model=args.model, model_provider=args.provider, timeout=args.timeout)
    except AnalysisError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    session = AnalysisSession(AnalysisRequester(manager))
    try:
        result = asyncio.run(session.submit(job_description, resume_text))
    except AnalysisInputError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except AnalysisError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.as_json:
        print(json.dumps(result.model_dump(mode="json"), indent=2))
    else:
        print(format_report(result))
        print()
        print(completion_message(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
