"""Parsers for extracting data from pbinfo pages."""

from .interfaces import (
    HTTPClientProtocol,
    ProblemPageParserProtocol,
    TestCasesParserProtocol,
)
from .problem_page_parser import ProblemPageParser
from .test_cases_parser import TestCasesParser
from .url_parser import URLParser, URLParsingError

__all__ = [
    "HTTPClientProtocol",
    "ProblemPageParser",
    "ProblemPageParserProtocol",
    "TestCasesParser",
    "TestCasesParserProtocol",
    "URLParser",
    "URLParsingError",
]
