"""Immutable data models used throughout WalletTokens."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class TokenItem:
    """Metadata record for one supported (or formerly supported) currency."""

    symbol: str
    name: str
    currency_id: str  # network-qualified, e.g. "ethereum-mainnet:0x..."
    type: str  # "native", "erc20", ...
    address: str | None = None  # contract address; None for native assets
    is_supported: bool = True
    start_color: str | None = None
    end_color: str | None = None
    cryptocompare_alias: str | None = None
    scale: int | None = None
    sale_address: str | None = None
    contract_initial_value: str | None = None

    @property
    def lookup_key(self) -> str:
        return self.symbol.lower()

    @property
    def exchange_rate_code(self) -> str:
        """Code used when requesting exchange rates for this token."""

        return self.cryptocompare_alias or self.symbol

    def to_dict(self) -> dict[str, Any]:
        """Serialise the token to a dictionary suitable for DataFrame creation."""

        return asdict(self)


__all__ = ["TokenItem"]
