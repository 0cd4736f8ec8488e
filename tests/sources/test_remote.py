from __future__ import annotations

from wallet_tokens.sources import HttpResponse, RemoteTokenSource


def test_fetch_all_targets_currencies_with_json_headers(fake_transport) -> None:
    fake_transport.responses["https://api.example.com/currencies"] = HttpResponse(200, "[]")
    source = RemoteTokenSource("https://api.example.com/", fake_transport)

    response = source.fetch_all()

    assert response.is_successful
    request = fake_transport.requests[0]
    assert request.url == "https://api.example.com/currencies"
    assert request.method == "GET"
    assert request.headers["Content-Type"] == "application/json; charset=utf-8"
    assert request.headers["Accept"] == "application/json"


def test_fetch_by_sale_address_adds_query(fake_transport) -> None:
    source = RemoteTokenSource("https://api.example.com", fake_transport)

    response = source.fetch_by_sale_address("0xabc")

    assert fake_transport.requests[0].url == "https://api.example.com/currencies?saleAddress=0xabc"
    assert response.code == 404
    assert not response.is_successful


def test_response_success_range() -> None:
    assert HttpResponse(200).is_successful
    assert HttpResponse(204).is_successful
    assert not HttpResponse(301).is_successful
    assert not HttpResponse(0).is_successful
