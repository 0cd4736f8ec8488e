"""Minimal HTTP transport built on :mod:`urllib.request`."""

from __future__ import annotations

import logging
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from typing import Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpRequest:
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    method: str = "GET"


@dataclass(frozen=True)
class HttpResponse:
    """Status code and decoded body; ``code == 0`` means no response arrived."""

    code: int
    body_text: str = ""

    @property
    def is_successful(self) -> bool:
        return 200 <= self.code < 300


class Transport(Protocol):
    def send(self, request: HttpRequest) -> HttpResponse: ...


class UrllibTransport:
    """Blocking transport; failures are returned as responses, never raised."""

    def __init__(self, timeout: float = 30.0) -> None:
        self.timeout = timeout

    def send(self, request: HttpRequest) -> HttpResponse:
        req = urllib.request.Request(request.url, headers=request.headers, method=request.method)
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as resp:  # pragma: no cover - network path
                charset = resp.headers.get_content_charset() or "utf-8"
                return HttpResponse(code=resp.status, body_text=resp.read().decode(charset))
        except urllib.error.HTTPError as exc:
            body = exc.read().decode("utf-8", errors="replace") if exc.fp else ""
            return HttpResponse(code=exc.code, body_text=body)
        except Exception as exc:  # pragma: no cover - network errors
            logger.warning("Request to %s failed: %s", request.url, exc)
            return HttpResponse(code=0)


__all__ = ["HttpRequest", "HttpResponse", "Transport", "UrllibTransport"]
