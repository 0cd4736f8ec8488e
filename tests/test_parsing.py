from __future__ import annotations

import json

import pytest

from wallet_tokens.diagnostics import RecordingReporter
from wallet_tokens.parsing import (
    TokenParseError,
    is_token_list_json,
    is_valid_json,
    parse_token_list,
    rewrite_currency_id,
    token_from_json,
)


def _token(**overrides: object) -> dict[str, object]:
    obj: dict[str, object] = {
        "code": "BRD",
        "name": "BRD Token",
        "type": "erc20",
        "currency_id": "ethereum-mainnet:0x558ec3152e2eb2174905cd19aea4e34a23de9ad6",
    }
    obj.update(overrides)
    return obj


def test_is_supported_defaults_to_true() -> None:
    item = token_from_json(_token())
    assert item.is_supported is True


def test_is_supported_false_is_kept() -> None:
    assert token_from_json(_token(is_supported=False)).is_supported is False


def test_single_color_leaves_end_color_empty() -> None:
    item = token_from_json(_token(colors=["#111111"]))
    assert item.start_color == "#111111"
    assert item.end_color is None


def test_missing_colors_and_alias() -> None:
    item = token_from_json(_token())
    assert item.start_color is None
    assert item.end_color is None
    assert item.cryptocompare_alias is None
    assert item.address is None


def test_full_token_fields() -> None:
    item = token_from_json(
        _token(
            contract_address="0x558ec3152e2eb2174905cd19aea4e34a23de9ad6",
            sale_address="0xsale",
            contract_initial_value=0,
            scale=18,
            colors=["#ff5193", "#f9a43a"],
            alternate_names={"cryptocompare": "BRDX"},
        )
    )
    assert item.symbol == "BRD"
    assert item.address == "0x558ec3152e2eb2174905cd19aea4e34a23de9ad6"
    assert item.sale_address == "0xsale"
    assert item.contract_initial_value == "0"
    assert item.scale == 18
    assert (item.start_color, item.end_color) == ("#ff5193", "#f9a43a")
    assert item.cryptocompare_alias == "BRDX"


@pytest.mark.parametrize("missing", ["code", "name", "type", "currency_id"])
def test_missing_required_field_raises(missing: str) -> None:
    obj = _token()
    del obj[missing]
    with pytest.raises(TokenParseError, match=missing):
        token_from_json(obj)


@pytest.mark.parametrize(
    ("currency_id", "expected"),
    [
        ("ethereum-mainnet:0xabc", "ethereum-ropsten:0xabc"),
        ("ethereum-mainnet:__native__", "ethereum-ropsten:__native__"),
        ("bitcoin-mainnet:__native__", "bitcoin-testnet:__native__"),
    ],
)
def test_testnet_rewrites_currency_id(currency_id: str, expected: str) -> None:
    assert rewrite_currency_id(currency_id, testnet=True) == expected
    assert token_from_json(_token(currency_id=currency_id), testnet=True).currency_id == expected


def test_mainnet_keeps_currency_id() -> None:
    assert rewrite_currency_id("bitcoin-mainnet:__native__", testnet=False) == "bitcoin-mainnet:__native__"


def test_parse_skips_bad_entries_and_reports_each() -> None:
    reporter = RecordingReporter()
    body = json.dumps([_token(code="AAA"), {"code": "BBB"}, "nonsense", _token(code="CCC")])

    items = parse_token_list(body, reporter=reporter)

    assert [item.symbol for item in items] == ["AAA", "CCC"]
    assert len(reporter.entries) == 2
    assert all(isinstance(entry.exc, TokenParseError) for entry in reporter.entries)


@pytest.mark.parametrize("body", ["not json", "{\"code\": \"BTC\"}", ""])
def test_parse_whole_document_failure_returns_empty(body: str) -> None:
    reporter = RecordingReporter()
    assert parse_token_list(body, reporter=reporter) == []
    assert len(reporter.entries) == 1


def test_parse_empty_array() -> None:
    reporter = RecordingReporter()
    assert parse_token_list("[]", reporter=reporter) == []
    assert reporter.entries == []


def test_is_valid_json() -> None:
    assert is_valid_json("[]")
    assert is_valid_json("{\"a\": 1}")
    assert not is_valid_json("[")
    assert not is_valid_json("")


@pytest.mark.parametrize("scale", ["18.0", "abc", float("inf"), float("nan"), [18], {"value": 18}])
def test_unusable_scale_keeps_token(scale: object) -> None:
    item = token_from_json(_token(scale=scale, colors=["#ff5193", "#f9a43a"], is_supported=False))
    assert item.scale is None
    assert item.start_color == "#ff5193"
    assert item.is_supported is False


def test_infinite_scale_in_document_is_not_fatal() -> None:
    reporter = RecordingReporter()
    body = '[{"code": "AAA", "name": "A", "type": "erc20", "currency_id": "x", "scale": Infinity}]'

    items = parse_token_list(body, reporter=reporter)

    assert [item.symbol for item in items] == ["AAA"]
    assert items[0].scale is None
    assert reporter.entries == []


def test_numeric_string_scale_is_accepted() -> None:
    assert token_from_json(_token(scale="6")).scale == 6


def test_is_token_list_json() -> None:
    assert is_token_list_json("[]")
    assert not is_token_list_json("{\"error\": \"maintenance\"}")
    assert not is_token_list_json("[")
