"""Convert ``/currencies`` JSON payloads into :class:`TokenItem` lists."""

from __future__ import annotations

import json
import logging
from typing import Any

from .core import TokenItem
from .core.constants import (
    END_COLOR_INDEX,
    ETHEREUM,
    ETHEREUM_TESTNET,
    FIELD_ALTERNATE_NAMES,
    FIELD_CODE,
    FIELD_COLORS,
    FIELD_CONTRACT_ADDRESS,
    FIELD_CONTRACT_INITIAL_VALUE,
    FIELD_CRYPTOCOMPARE,
    FIELD_CURRENCY_ID,
    FIELD_IS_SUPPORTED,
    FIELD_NAME,
    FIELD_SALE_ADDRESS,
    FIELD_SCALE,
    FIELD_TYPE,
    MAINNET,
    START_COLOR_INDEX,
    TESTNET,
)
from .diagnostics import LoggingReporter, Reporter

logger = logging.getLogger(__name__)


class TokenParseError(ValueError):
    pass


def is_valid_json(text: str) -> bool:
    try:
        json.loads(text)
    except ValueError:
        return False
    return True


def is_token_list_json(text: str) -> bool:
    """True when ``text`` is a JSON array, the only shape worth persisting."""

    try:
        return isinstance(json.loads(text), list)
    except ValueError:
        return False


def rewrite_currency_id(currency_id: str, testnet: bool) -> str:
    """Point a mainnet currency id at the matching test network."""

    if not testnet:
        return currency_id
    marker = ETHEREUM_TESTNET if ETHEREUM in currency_id else TESTNET
    return currency_id.replace(MAINNET, marker)


def _required_str(obj: dict[str, Any], field: str) -> str:
    value = obj.get(field)
    if not isinstance(value, str):
        raise TokenParseError(f"field {field!r} missing or not a string")
    return value


def _optional_str(obj: Any, key: Any) -> str | None:
    try:
        value = obj[key]
    except (KeyError, IndexError, TypeError):
        return None
    return value if isinstance(value, str) else None


def _colors(raw: Any) -> tuple[str | None, str | None]:
    if not isinstance(raw, list):
        return None, None
    return _optional_str(raw, START_COLOR_INDEX), _optional_str(raw, END_COLOR_INDEX)


def _scale(raw: Any) -> int | None:
    # optional display field; an unusable value never drops the token
    if raw is None or isinstance(raw, bool):
        return None
    try:
        return int(raw)
    except (TypeError, ValueError, OverflowError):
        logger.debug("Ignoring unusable %s value %r", FIELD_SCALE, raw)
        return None


def token_from_json(obj: Any, *, testnet: bool = False) -> TokenItem:
    """Build a :class:`TokenItem` from one decoded token object.

    Raises
    ------
    TokenParseError
        If ``obj`` is not an object or a required field is missing.
    """

    if not isinstance(obj, dict):
        raise TokenParseError(f"token entry is not an object: {obj!r}")
    start_color, end_color = _colors(obj.get(FIELD_COLORS))
    is_supported = obj.get(FIELD_IS_SUPPORTED, True)
    if not isinstance(is_supported, bool):
        is_supported = True
    contract_initial_value = obj.get(FIELD_CONTRACT_INITIAL_VALUE)
    return TokenItem(
        symbol=_required_str(obj, FIELD_CODE),
        name=_required_str(obj, FIELD_NAME),
        currency_id=rewrite_currency_id(_required_str(obj, FIELD_CURRENCY_ID), testnet),
        type=_required_str(obj, FIELD_TYPE),
        address=_optional_str(obj, FIELD_CONTRACT_ADDRESS),
        is_supported=is_supported,
        start_color=start_color,
        end_color=end_color,
        cryptocompare_alias=_optional_str(obj.get(FIELD_ALTERNATE_NAMES), FIELD_CRYPTOCOMPARE),
        scale=_scale(obj.get(FIELD_SCALE)),
        sale_address=_optional_str(obj, FIELD_SALE_ADDRESS),
        contract_initial_value=(
            None if contract_initial_value is None else str(contract_initial_value)
        ),
    )


def parse_token_list(
    text: str,
    *,
    testnet: bool = False,
    reporter: Reporter | None = None,
) -> list[TokenItem]:
    """Parse a JSON array of token objects.

    A malformed document yields an empty list; a malformed entry is reported
    and skipped while the remaining entries are still parsed.
    """

    reporter = reporter or LoggingReporter()
    try:
        raw = json.loads(text)
    except ValueError as exc:
        reporter.error("Failed to parse Token list JSON.", exc)
        return []
    if not isinstance(raw, list):
        reporter.error(f"Token list JSON is not an array: {type(raw).__name__}")
        return []

    tokens: list[TokenItem] = []
    for idx, entry in enumerate(raw):
        try:
            tokens.append(token_from_json(entry, testnet=testnet))
        except TokenParseError as exc:
            reporter.error(f"Failed to create TokenItem from JSON at index {idx}.", exc)
    logger.debug("Parsed %d of %d token entries", len(tokens), len(raw))
    return tokens


__all__ = [
    "TokenParseError",
    "is_token_list_json",
    "is_valid_json",
    "parse_token_list",
    "rewrite_currency_id",
    "token_from_json",
]
