"""Exceptions raised while retrieving data from pbinfo."""

from http import HTTPStatus


class PbInfoError(Exception):
    """Base exception for all pbinfo client errors."""

    pass


class FetchError(PbInfoError):
    """A request could not be completed (network failure, time-out)."""

    def __init__(self, message: str, url: str):
        super().__init__(message)
        self.url = url


class HTTPStatusError(FetchError):
    """The server answered with a non-success status code."""

    def __init__(self, url: str, status_code: int):
        try:
            reason = HTTPStatus(status_code).phrase
        except ValueError:
            reason = "Unknown Status"
        super().__init__(f"GET {url}: {status_code} {reason}", url)
        self.status_code = status_code
        self.reason = reason


class RetrievalError(PbInfoError):
    """A problem or its test cases could not be retrieved."""

    def __init__(self, message: str, problem_id: int, operation: str):
        super().__init__(message)
        self.problem_id = problem_id
        self.operation = operation


class StructuralMismatchError(RetrievalError):
    """The page markup no longer has the shape the scraper expects."""

    pass
