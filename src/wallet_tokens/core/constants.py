"""Core constants shared across WalletTokens modules."""

from __future__ import annotations

# Field names of the ``/currencies`` payload.
FIELD_CODE = "code"
FIELD_NAME = "name"
FIELD_SCALE = "scale"
FIELD_CONTRACT_ADDRESS = "contract_address"
FIELD_IS_SUPPORTED = "is_supported"
FIELD_SALE_ADDRESS = "sale_address"
FIELD_CONTRACT_INITIAL_VALUE = "contract_initial_value"
FIELD_COLORS = "colors"
FIELD_CURRENCY_ID = "currency_id"
FIELD_TYPE = "type"
FIELD_ALTERNATE_NAMES = "alternate_names"
FIELD_CRYPTOCOMPARE = "cryptocompare"

START_COLOR_INDEX = 0
END_COLOR_INDEX = 1

ENDPOINT_CURRENCIES = "/currencies"
SALE_ADDRESS_PARAM = "saleAddress"

TOKENS_FILENAME = "tokens.json"

ICON_DIRECTORY_WHITE_NO_BACKGROUND = "white-no-bg"
ICON_DIRECTORY_WHITE_SQUARE_BACKGROUND = "white-square-bg"
ICON_FILE_NAME_FORMAT = "{}.png"

# Network markers used when rewriting currency ids for testnet builds.
MAINNET = "mainnet"
TESTNET = "testnet"
ETHEREUM = "ethereum"
ETHEREUM_TESTNET = "ropsten"

# Gradient colour used for unknown or delisted tokens.
DELISTED_TOKEN_COLOR = "#828282"

HEADER_CONTENT_TYPE = "Content-Type"
HEADER_ACCEPT = "Accept"
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_JSON_CHARSET_UTF8 = "application/json; charset=utf-8"

__all__ = [
    "CONTENT_TYPE_JSON",
    "CONTENT_TYPE_JSON_CHARSET_UTF8",
    "DELISTED_TOKEN_COLOR",
    "END_COLOR_INDEX",
    "ENDPOINT_CURRENCIES",
    "ETHEREUM",
    "ETHEREUM_TESTNET",
    "FIELD_ALTERNATE_NAMES",
    "FIELD_CODE",
    "FIELD_COLORS",
    "FIELD_CONTRACT_ADDRESS",
    "FIELD_CONTRACT_INITIAL_VALUE",
    "FIELD_CRYPTOCOMPARE",
    "FIELD_CURRENCY_ID",
    "FIELD_IS_SUPPORTED",
    "FIELD_NAME",
    "FIELD_SALE_ADDRESS",
    "FIELD_SCALE",
    "FIELD_TYPE",
    "HEADER_ACCEPT",
    "HEADER_CONTENT_TYPE",
    "ICON_DIRECTORY_WHITE_NO_BACKGROUND",
    "ICON_DIRECTORY_WHITE_SQUARE_BACKGROUND",
    "ICON_FILE_NAME_FORMAT",
    "MAINNET",
    "SALE_ADDRESS_PARAM",
    "START_COLOR_INDEX",
    "TESTNET",
    "TOKENS_FILENAME",
]
