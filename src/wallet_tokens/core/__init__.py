"""Core data structures for :mod:`wallet_tokens`.

This subpackage groups the token model and the immutable snapshot used by the
cache so parsers and sources can share them without importing the whole
public interface exposed in :mod:`wallet_tokens.__init__`.
"""

from __future__ import annotations

from .constants import DELISTED_TOKEN_COLOR, TOKENS_FILENAME
from .models import TokenItem
from .repositories import EMPTY_SNAPSHOT, TokenSnapshot

__all__ = [
    "DELISTED_TOKEN_COLOR",
    "EMPTY_SNAPSHOT",
    "TOKENS_FILENAME",
    "TokenItem",
    "TokenSnapshot",
]
