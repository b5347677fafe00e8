"""
Question Generation Smoke Test

Posts a sample request to a running instance of the service and prints the
questions it returns.

Usage:
    # Start the service first:
    uvicorn interview_prep.main:app --port 8000

    # In another terminal:
    python -m interview_prep.scripts.smoke_test_generation
    python -m interview_prep.scripts.smoke_test_generation --url http://localhost:8000 --type technical --count 5

Author: @kcaparas1630
"""

import argparse
import sys
from typing import Dict, List, Optional
import httpx
from loguru import logger

EXIT_SUCCESS = 0
EXIT_API_ERROR = 1
EXIT_CONNECTION_ERROR = 2

DEFAULT_URL = "http://127.0.0.1:8000"
ENDPOINT = "/api/generate-questions"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Smoke test the question generation endpoint")
    parser.add_argument("--url", default=DEFAULT_URL, help="Base URL of the running service")
    parser.add_argument("--role", default="Frontend Developer", help="Job role")
    parser.add_argument("--company", default="Test Company", help="Company name")
    parser.add_argument("--type", dest="interview_type", default="mixed",
                        choices=["technical", "behavioral", "mixed"], help="Interview type")
    parser.add_argument("--difficulty", default="medium", choices=["easy", "medium", "hard"])
    parser.add_argument("--count", type=int, default=3, help="Number of questions (3-10)")
    parser.add_argument("--timeout", type=float, default=60.0, help="Request timeout in seconds")
    return parser


def format_questions(questions: List[Dict[str, str]]) -> str:
    lines = []
    for index, question in enumerate(questions, start=1):
        lines.append(f"{index}. [{question.get('category')}]")
        lines.append(f"   {question.get('question')}")
    return "\n".join(lines)


def run(args: argparse.Namespace, client: Optional[httpx.Client] = None) -> int:
    payload = {
        "jobRole": args.role,
        "company": args.company,
        "interviewType": args.interview_type,
        "difficulty": args.difficulty,
        "numberOfQuestions": args.count,
    }
    logger.info(f"Testing question generation with {payload}")

    owns_client = client is None
    client = client or httpx.Client(base_url=args.url, timeout=args.timeout)
    try:
        response = client.post(ENDPOINT, json=payload)
    except httpx.HTTPError as e:
        logger.error(f"Could not reach {args.url}: {e}")
        logger.info("Make sure the service is running and QUESTION_PROVIDER_API_KEY is set")
        return EXIT_CONNECTION_ERROR
    finally:
        if owns_client:
            client.close()

    logger.info(f"Response status: {response.status_code}")
    if response.status_code != 200:
        logger.error(f"API error: {response.text}")
        return EXIT_API_ERROR

    data = response.json()
    questions = data.get("questions") or []
    if data.get("usedFallback"):
        logger.warning(f"Service used curated fallback questions: {data.get('message')}")
    print(format_questions(questions))
    logger.info(f"Total questions: {len(questions)}")

    if len(questions) != args.count:
        logger.error(f"Expected {args.count} questions, got {len(questions)}")
        return EXIT_API_ERROR
    return EXIT_SUCCESS


def main(argv: Optional[List[str]] = None) -> int:
    return run(build_parser().parse_args(argv))


if __name__ == "__main__":
    sys.exit(main())
