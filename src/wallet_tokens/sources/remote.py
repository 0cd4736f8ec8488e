"""Client for the wallet backend ``/currencies`` endpoint."""

from __future__ import annotations

import urllib.parse

from ..core.constants import (
    CONTENT_TYPE_JSON,
    CONTENT_TYPE_JSON_CHARSET_UTF8,
    ENDPOINT_CURRENCIES,
    HEADER_ACCEPT,
    HEADER_CONTENT_TYPE,
    SALE_ADDRESS_PARAM,
)
from .http import HttpRequest, HttpResponse, Transport, UrllibTransport


class RemoteTokenSource:
    """Build and send token list requests against ``base_url``."""

    def __init__(self, base_url: str, transport: Transport | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.transport = transport or UrllibTransport()

    def _request(self, url: str) -> HttpRequest:
        return HttpRequest(
            url=url,
            headers={
                HEADER_CONTENT_TYPE: CONTENT_TYPE_JSON_CHARSET_UTF8,
                HEADER_ACCEPT: CONTENT_TYPE_JSON,
            },
        )

    @property
    def currencies_url(self) -> str:
        return self.base_url + ENDPOINT_CURRENCIES

    def sale_address_url(self, sale_address: str) -> str:
        query = urllib.parse.urlencode({SALE_ADDRESS_PARAM: sale_address})
        return f"{self.currencies_url}?{query}"

    def fetch_all(self) -> HttpResponse:
        return self.transport.send(self._request(self.currencies_url))

    def fetch_by_sale_address(self, sale_address: str) -> HttpResponse:
        return self.transport.send(self._request(self.sale_address_url(sale_address)))


__all__ = ["RemoteTokenSource"]
