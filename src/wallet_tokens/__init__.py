"""
WalletTokens: token metadata cache for a cryptocurrency wallet.

Design goals:
- Immutable data model (TokenItem) + immutable snapshot swapped as a whole
- Bundled default list, local JSON copy, remote ``/currencies`` refresh
- Synchronous lookups that never raise; every miss has a fallback value
- pandas reports and matplotlib colour previews for the current token list
"""

from __future__ import annotations

import logging

from .cache import TokenCache
from .core import DELISTED_TOKEN_COLOR, EMPTY_SNAPSHOT, TokenItem, TokenSnapshot
from .diagnostics import LoggingReporter, RecordingReporter, Reporter
from .icons import DirectoryIconBundle, IconBundle, find_icon_path
from .parsing import TokenParseError, is_valid_json, parse_token_list, rewrite_currency_id
from .reporting import export_token_report, token_summary
from .sources import (
    BundledTokenSource,
    HttpRequest,
    HttpResponse,
    LocalTokenStore,
    RemoteTokenSource,
    Transport,
    UrllibTransport,
)
from .visualization import Visualizer

logger = logging.getLogger(__name__)

__all__ = [
    "BundledTokenSource",
    "DELISTED_TOKEN_COLOR",
    "DirectoryIconBundle",
    "EMPTY_SNAPSHOT",
    "HttpRequest",
    "HttpResponse",
    "IconBundle",
    "LocalTokenStore",
    "LoggingReporter",
    "RecordingReporter",
    "RemoteTokenSource",
    "Reporter",
    "TokenCache",
    "TokenItem",
    "TokenParseError",
    "TokenSnapshot",
    "Transport",
    "UrllibTransport",
    "Visualizer",
    "export_token_report",
    "find_icon_path",
    "is_valid_json",
    "parse_token_list",
    "rewrite_currency_id",
    "token_summary",
]
