"""Parser for extracting problem data from pbinfo problem pages."""

from typing import Optional, TYPE_CHECKING

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from loguru import logger

from domain.exceptions import FetchError, RetrievalError, StructuralMismatchError
from domain.models import Problem, TestCase
from domain.normalize import normalize_text

from .interfaces import ProblemPageParserProtocol
from .problem_fields import MAX_COLUMNS, MIN_COLUMNS, apply_columns, check_headers
from .traverse import element_text
from .url_parser import URLParser

if TYPE_CHECKING:
    from infrastructure.http_client import AsyncHTTPClient

RESTRICTIONS_TABLE_SELECTOR = 'a[name="section-restrictii"] + table'
RESTRICTIONS_CELLS_SELECTOR = "tbody > tr > td"
RESTRICTIONS_HEADERS_SELECTOR = "thead > tr > th"
TITLE_SELECTOR = "h1.text-primary > a"
EXAMPLE_SELECTOR = "p + pre"


class ProblemPageParser(ProblemPageParserProtocol):
    """Parser for extracting data from pbinfo problem HTML pages."""

    def __init__(
        self,
        http_client: Optional["AsyncHTTPClient"] = None,
        url_parser: Optional[URLParser] = None,
    ):
        """
        Initialize parser.

        Args:
            http_client: Async HTTP client instance
            url_parser: Builder for the problem page URL
        """
        self.http_client = http_client
        self.url_parser = url_parser or URLParser()

    async def parse_problem_page(self, problem_id: int) -> Problem:
        """
        Fetch a problem page and extract the problem's name and restrictions.

        Raises:
            RetrievalError: If the page cannot be fetched or parsed
            StructuralMismatchError: If the title or restrictions table is missing
        """
        operation = "find_problem_by_id"
        soup = await self._fetch_page(problem_id, operation)

        problem = Problem(id=problem_id)
        self._extract_restrictions(soup, problem)
        problem.name = self._extract_title(soup, problem_id)

        logger.debug(f"Successfully parsed problem: {problem_id}")
        return problem

    async def parse_examples(self, problem_id: int) -> list[TestCase]:
        """
        Extract the example tests shown in a problem's statement.

        Every ``pre`` that directly follows a paragraph holds either an example
        input or its output, alternating in document order.
        """
        operation = "get_example_test_cases"
        soup = await self._fetch_page(problem_id, operation)

        contents = [element_text(block) for block in soup.select(EXAMPLE_SELECTOR)]
        if len(contents) % 2 != 0:
            raise StructuralMismatchError(
                f"failed to retrieve examples for problem with ID {problem_id}: "
                f"incomplete data ({len(contents)} content chunks instead of an even number)",
                problem_id,
                operation,
            )

        examples = [
            TestCase(
                input=contents[i].encode(),
                expected=contents[i + 1].encode(),
                is_example=True,
            )
            for i in range(0, len(contents), 2)
        ]

        logger.debug(f"Found {len(examples)} example test case(s) for problem {problem_id}")
        return examples

    async def _fetch_page(self, problem_id: int, operation: str) -> BeautifulSoup:
        url = self.url_parser.build_problem_url(problem_id)
        logger.debug(f"Parsing problem page: {url}")

        if not self.http_client:
            raise RetrievalError(f"HTTP client not initialized for {url}", problem_id, operation)

        try:
            html = await self.http_client.get_text(url)
        except FetchError as e:
            raise RetrievalError(
                f"failed to retrieve problem with ID {problem_id}: {e}", problem_id, operation
            ) from e

        try:
            return BeautifulSoup(html, "html5lib")
        except ParserRejectedMarkup as e:
            raise RetrievalError(
                f"failed to parse page of problem with ID {problem_id}: {e}", problem_id, operation
            ) from e

    def _extract_restrictions(self, soup: BeautifulSoup, problem: Problem) -> None:
        """Fill the problem's fields from the restrictions table."""
        operation = "find_problem_by_id"

        table = soup.select_one(RESTRICTIONS_TABLE_SELECTOR)
        if table is None:
            raise StructuralMismatchError(
                f"failed to find problem with ID {problem.id}: restrictions table not found",
                problem.id,
                operation,
            )

        cells = table.select(RESTRICTIONS_CELLS_SELECTOR)
        if not MIN_COLUMNS <= len(cells) <= MAX_COLUMNS:
            raise StructuralMismatchError(
                f"failed to find problem with ID {problem.id}: restrictions table has "
                f"{len(cells)} columns, expected {MIN_COLUMNS} to {MAX_COLUMNS}",
                problem.id,
                operation,
            )

        headers = [element_text(header) for header in table.select(RESTRICTIONS_HEADERS_SELECTOR)]
        if len(headers) == len(cells):
            check_headers(headers, problem.id)

        apply_columns(cells, problem)

    def _extract_title(self, soup: BeautifulSoup, problem_id: int) -> str:
        title = soup.select_one(TITLE_SELECTOR)
        if title is None:
            raise StructuralMismatchError(
                f"failed to find problem with ID {problem_id}: title not found",
                problem_id,
                "find_problem_by_id",
            )
        return normalize_text(element_text(title))
