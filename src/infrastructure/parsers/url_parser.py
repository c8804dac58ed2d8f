"""URL building and parsing for pbinfo pages."""

import re
from urllib.parse import parse_qs, urlparse

from loguru import logger

from infrastructure.config import Settings


class URLParsingError(ValueError):
    """Invalid URL format or unable to parse URL."""

    pass


class URLParser:
    """Builds the URLs of pbinfo endpoints and parses problem URLs."""

    # Matches pbinfo.ro/probleme/100 and pbinfo.ro/probleme/100/nrapprime
    PATTERN = r"pbinfo\.ro/probleme/(\d+)(?:/[^/?#]*)?/?(?:[?#].*)?$"

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings()

    @classmethod
    def parse(cls, url: str) -> int:
        """
        Parse a pbinfo problem URL and extract the problem ID.
        """
        logger.debug(f"Parsing URL: {url}")

        parsed = urlparse(url)
        if not parsed.scheme or not parsed.netloc:
            raise URLParsingError(f"Invalid URL format: {url}")

        match = re.search(cls.PATTERN, url)
        if match:
            problem_id = int(match.group(1))
            logger.debug(f"Parsed URL to problem: {problem_id}")
            return problem_id

        raise URLParsingError(
            f"Unrecognized pbinfo URL format: {url}. "
            "Expected format: https://www.pbinfo.ro/probleme/<id>"
        )

    def build_problem_url(self, problem_id: int) -> str:
        """Build the URL of a problem's statement page."""
        return f"{self.settings.base_url}/probleme/{problem_id}"

    def build_test_cases_url(self, problem_id: int) -> str:
        """Build the URL of the endpoint listing a problem's test cases."""
        return f"{self.settings.ajax_url}/ajx-problema-afisare-teste.php?id={problem_id}"

    @staticmethod
    def chunk_name(href: str) -> str:
        """
        Name a test file download link by its query, e.g. "12345.in".

        Falls back to the link itself when the query has no id/tip pair.
        """
        query = parse_qs(urlparse(href).query)
        chunk_id = query.get("id", [""])[0]
        chunk_type = query.get("tip", [""])[0]
        if not chunk_id or not chunk_type:
            return href
        return f"{chunk_id}.{chunk_type}"
