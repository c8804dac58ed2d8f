"""Protocol interfaces for parsers."""

from typing import Protocol

from domain.models import Problem, TestCase


class HTTPClientProtocol(Protocol):
    """Protocol for HTTP client."""

    async def get_text(self, url: str) -> str:
        """Get text content from URL."""
        ...

    async def get_bytes(self, url: str) -> bytes:
        """Get raw content from URL."""
        ...


class ProblemPageParserProtocol(Protocol):
    """Protocol for parsing problem pages."""

    async def parse_problem_page(self, problem_id: int) -> Problem:
        """Parse problem page and extract data."""
        ...

    async def parse_examples(self, problem_id: int) -> list[TestCase]:
        """Parse the example test cases shown on the problem page."""
        ...


class TestCasesParserProtocol(Protocol):
    """Protocol for retrieving the full test cases of a problem."""

    async def parse_test_cases(self, problem_id: int) -> list[TestCase]:
        """Retrieve all test cases, or an empty list when they are unavailable."""
        ...
