"""Service for retrieving pbinfo problems and their test cases."""

import asyncio
from typing import TYPE_CHECKING, Optional

from loguru import logger

from domain.exceptions import RetrievalError
from domain.models import Problem, TestCase
from infrastructure.parsers import ProblemPageParserProtocol, TestCasesParserProtocol

if TYPE_CHECKING:
    from infrastructure.http_client import AsyncHTTPClient


class ProblemService:
    """Service for managing pbinfo problems."""

    def __init__(
        self,
        *,
        page_parser: ProblemPageParserProtocol,
        test_cases_parser: TestCasesParserProtocol,
        http_client: Optional["AsyncHTTPClient"] = None,
    ):
        """Initialize service with dependencies."""
        self.page_parser = page_parser
        self.test_cases_parser = test_cases_parser
        self.http_client = http_client

    async def find_problem_by_id(self, problem_id: int) -> Problem:
        """Get the metadata of a problem from its statement page."""
        logger.debug(f"Getting problem via service: {problem_id}")

        try:
            problem = await self.page_parser.parse_problem_page(problem_id)
        except RetrievalError as e:
            logger.error(f"Failed to find problem {problem_id}: {e}")
            raise

        logger.info(f"Successfully fetched problem {problem_id} ({problem.name})")
        return problem

    async def get_test_cases(self, problem_id: int) -> list[TestCase]:
        """
        Get the test cases of a problem.

        The full test cases are tried first. When they are unavailable or
        incomplete, the examples from the statement are returned instead.
        Errors are never answered with the fallback.
        """
        logger.debug(f"Getting test cases via service: {problem_id}")

        try:
            test_cases = await self.test_cases_parser.parse_test_cases(problem_id)
            if not test_cases:
                logger.info(f"No full test cases for problem {problem_id}, using examples")
                test_cases = await self.page_parser.parse_examples(problem_id)
        except RetrievalError as e:
            logger.error(f"Failed to get test cases for problem {problem_id}: {e}")
            raise

        logger.info(f"Successfully fetched {len(test_cases)} test case(s) for problem {problem_id}")
        return test_cases

    async def get_problem_with_test_cases(
        self, problem_id: int, include_test_cases: bool = True
    ) -> tuple[Problem, list[TestCase]]:
        """Get a problem and, optionally, its test cases, fetched concurrently."""
        problem_task = asyncio.create_task(self.find_problem_by_id(problem_id))
        tasks: list[asyncio.Task] = [problem_task]
        if include_test_cases:
            tasks.append(asyncio.create_task(self.get_test_cases(problem_id)))

        try:
            results = await asyncio.gather(*tasks)
        except Exception:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        test_cases = results[1] if include_test_cases else []
        return results[0], test_cases

    async def aclose(self) -> None:
        """Release the HTTP client owned by the service."""
        if self.http_client is not None:
            await self.http_client.aclose()

    async def __aenter__(self) -> "ProblemService":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
