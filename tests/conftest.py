import sys
from pathlib import Path

import pytest


# Ensure the package is importable without installation when running tests locally
pkg_src = Path(__file__).resolve().parents[1] / "src"
if str(pkg_src) not in sys.path:
    sys.path.insert(0, str(pkg_src))

from wallet_tokens.sources import HttpRequest, HttpResponse  # noqa: E402

FIXTURES = Path(__file__).resolve().parent / "fixtures"


class FakeTransport:
    """Serve canned responses keyed by URL and record every request."""

    def __init__(self, responses: dict[str, HttpResponse] | None = None) -> None:
        self.responses = dict(responses or {})
        self.requests: list[HttpRequest] = []

    def send(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        return self.responses.get(request.url, HttpResponse(code=404))


@pytest.fixture()
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture()
def currencies_body() -> str:
    return (FIXTURES / "currencies.json").read_text()
