"""Immutable token snapshots with pandas export."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

import pandas as pd

from .models import TokenItem


class TokenSnapshot:
    """Token list paired with its lower-cased symbol index.

    A snapshot never changes after construction; the cache swaps whole
    snapshots so readers always see a list and index built together.
    """

    __slots__ = ("_items", "_by_symbol")

    def __init__(self, items: Iterable[TokenItem] | None = None) -> None:
        self._items: tuple[TokenItem, ...] = tuple(items) if items else ()
        index: dict[str, TokenItem] = {}
        for item in self._items:
            # later entries win on case-insensitive collisions
            index[item.lookup_key] = item
        self._by_symbol: Mapping[str, TokenItem] = MappingProxyType(index)

    @property
    def items(self) -> list[TokenItem]:
        return list(self._items)

    @property
    def symbols(self) -> Mapping[str, TokenItem]:
        return self._by_symbol

    def by_symbol(self, code: str) -> TokenItem | None:
        return self._by_symbol.get(code.lower())

    def by_currency_id(self, currency_id: str) -> TokenItem | None:
        wanted = currency_id.casefold()
        for item in self._items:
            if item.currency_id.casefold() == wanted:
                return item
        return None

    def filter(
        self,
        *,
        supported_only: bool = False,
        types: list[str] | None = None,
    ) -> "TokenSnapshot":
        res: list[TokenItem] = []
        for item in self._items:
            if supported_only and not item.is_supported:
                continue
            if types and item.type not in types:
                continue
            res.append(item)
        return TokenSnapshot(res)

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame([item.to_dict() for item in self._items])

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[TokenItem]:
        return iter(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)


EMPTY_SNAPSHOT = TokenSnapshot()


__all__ = ["EMPTY_SNAPSHOT", "TokenSnapshot"]
