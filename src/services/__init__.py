from typing import TYPE_CHECKING, Optional

from services.problem import ProblemService

if TYPE_CHECKING:
    import httpx

    from infrastructure.config import Settings


def create_problem_service(
    settings: Optional["Settings"] = None,
    transport: Optional["httpx.AsyncBaseTransport"] = None,
) -> ProblemService:
    """Factory function to create problem service with all dependencies."""
    from infrastructure.config import Settings
    from infrastructure.http_client import AsyncHTTPClient
    from infrastructure.parsers import ProblemPageParser, TestCasesParser, URLParser

    settings = settings or Settings.from_env()

    # Create infrastructure dependencies
    http_client = AsyncHTTPClient(
        timeout=settings.timeout,
        user_agent=settings.user_agent,
        transport=transport,
    )
    url_parser = URLParser(settings)

    return ProblemService(
        page_parser=ProblemPageParser(http_client, url_parser),
        test_cases_parser=TestCasesParser(http_client, url_parser),
        http_client=http_client,
    )


__all__ = ["ProblemService", "create_problem_service"]
