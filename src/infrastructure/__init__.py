"""Infrastructure: HTTP transport, settings and page parsers."""

from .config import Settings
from .http_client import AsyncHTTPClient

__all__ = [
    "AsyncHTTPClient",
    "Settings",
]
