"""Token list sources used by :mod:`wallet_tokens`."""

from __future__ import annotations

from .bundled import BundledTokenSource
from .http import HttpRequest, HttpResponse, Transport, UrllibTransport
from .local import LocalTokenStore
from .remote import RemoteTokenSource

__all__ = [
    "BundledTokenSource",
    "HttpRequest",
    "HttpResponse",
    "LocalTokenStore",
    "RemoteTokenSource",
    "Transport",
    "UrllibTransport",
]
