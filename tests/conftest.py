"""Shared fixtures: a fake pbinfo server served through ``httpx.MockTransport``."""

from pathlib import Path

import httpx
import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


class FakePbInfo:
    """Routes requests the way pbinfo does, serving HTML from tests/fixtures."""

    def __init__(self):
        self.pages: dict[int, str] = {}
        self.listings: dict[int, str] = {}
        self.chunks: dict[str, bytes] = {}
        self.failing_chunks: set[str] = set()
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path.startswith("/probleme/"):
            problem_id = int(path.split("/")[2])
            if problem_id in self.pages:
                return httpx.Response(200, text=self.pages[problem_id])

        elif path == "/ajx-module/ajx-problema-afisare-teste.php":
            problem_id = int(request.url.params["id"])
            if problem_id in self.listings:
                return httpx.Response(200, text=self.listings[problem_id])

        elif path == "/php/descarca-test.php":
            name = f"{request.url.params['id']}.{request.url.params['tip']}"
            if name in self.failing_chunks:
                return httpx.Response(500, text="server error")
            if name in self.chunks:
                return httpx.Response(200, content=self.chunks[name])

        return httpx.Response(404, text="not found")

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]


@pytest.fixture
def fake_pbinfo() -> FakePbInfo:
    server = FakePbInfo()
    server.pages[100] = load_fixture("problem_100.html")
    server.pages[3860] = load_fixture("problem_3860.html")
    server.pages[5] = load_fixture("problem_no_table.html")
    server.listings[100] = load_fixture("test_cases_empty.html")
    server.listings[3860] = load_fixture("test_cases_incomplete.html")
    server.listings[1629] = load_fixture("test_cases_1629.html")
    server.chunks["5002.in"] = b"5\n1 2 3 4 6\n"
    server.chunks["5003.in"] = b"2\n30 40\n"
    server.chunks["5003.ok"] = b"70\n"
    return server

