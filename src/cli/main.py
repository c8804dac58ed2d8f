"""Command line entry point: prints a pbinfo problem and its test cases."""

import argparse
import asyncio
import sys

from dotenv import load_dotenv
from loguru import logger

from cli.schemas import ProblemSchema
from domain.exceptions import PbInfoError
from domain.models import TestCase
from infrastructure.config import Settings
from infrastructure.parsers import URLParser, URLParsingError
from services import create_problem_service

TRUNCATED_MARKER = "... [truncated]"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pbinfo-client",
        description="Retrieve a pbinfo problem and, optionally, its test cases.",
    )
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--id", type=int, help="The ID of the pbinfo problem to retrieve")
    target.add_argument("--url", help="The URL of the pbinfo problem to retrieve")
    parser.add_argument(
        "--show-test-cases",
        action="store_true",
        help="Whether to output the test cases or not",
    )
    parser.add_argument(
        "--size-limit",
        type=int,
        default=1000,
        help="The maximum test case content size to show",
    )
    parser.add_argument("--debug", action="store_true", help="Log every request made")
    return parser


def truncate_content(content: bytes, size_limit: int) -> str:
    """Cut content longer than ``size_limit`` at the last space before the limit."""
    if len(content) <= size_limit:
        return content.decode(errors="replace")

    cut = content.rfind(b" ", 0, size_limit)
    if cut == -1:
        cut = size_limit
    return content[:cut].decode(errors="replace") + TRUNCATED_MARKER


def format_test_case(number: int, test_case: TestCase, size_limit: int) -> str:
    header = f"Test case {number}"
    if test_case.is_example:
        header += " (example)"

    lines = [f"\n{header}:"]
    if test_case.score:
        lines.append(f"Score: {test_case.score}")
    lines.append(f"Input: {truncate_content(test_case.input, size_limit)}")
    lines.append(f"Output: {truncate_content(test_case.expected, size_limit)}")
    return "\n".join(lines)


async def main(args: argparse.Namespace, settings: Settings) -> int:
    problem_id = args.id if args.id is not None else URLParser.parse(args.url)

    async with create_problem_service(settings) as service:
        try:
            problem, test_cases = await service.get_problem_with_test_cases(
                problem_id, include_test_cases=args.show_test_cases
            )
        except PbInfoError as e:
            logger.error(str(e))
            return 1

    print(ProblemSchema.from_domain(problem).model_dump_json(indent=2))

    for number, test_case in enumerate(test_cases, start=1):
        print(format_test_case(number, test_case, args.size_limit))

    return 0


def run() -> None:
    """Entry point for the ``pbinfo-client`` script."""
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args()
    if args.size_limit <= 0:
        parser.error("--size-limit must be positive")

    settings = Settings.from_env()

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.debug else settings.log_level)

    try:
        exit_code = asyncio.run(main(args, settings))
    except URLParsingError as e:
        parser.error(str(e))
    except KeyboardInterrupt:
        exit_code = 0

    sys.exit(exit_code)


if __name__ == "__main__":
    run()
