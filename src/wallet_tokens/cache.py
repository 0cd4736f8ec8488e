"""Token metadata cache: bootstrap, remote synchronisation and lookups."""

from __future__ import annotations

import logging
import threading

from .core import DELISTED_TOKEN_COLOR, EMPTY_SNAPSHOT, TokenItem, TokenSnapshot
from .diagnostics import LoggingReporter, Reporter
from .icons import IconBundle, find_icon_path
from .parsing import is_token_list_json, parse_token_list
from .sources import BundledTokenSource, LocalTokenStore, RemoteTokenSource

logger = logging.getLogger(__name__)


class TokenCache:
    """Owns the current :class:`TokenSnapshot` and keeps it up to date.

    Readers go through :attr:`snapshot`, a single attribute that is replaced
    wholesale, so a lookup sees either the old list and index or the new
    ones. Writers serialise on an internal lock that is never held across a
    network call.

    Parameters
    ----------
    store:
        Local copy of the token list.
    remote:
        Client for the ``/currencies`` endpoint. Without one, remote
        synchronisation is a no-op.
    bundle:
        Default token list used when no local copy exists yet.
    reporter:
        Sink for non-fatal errors. Defaults to :class:`LoggingReporter`.
    icon_bundle:
        Collaborator returning the extracted icon directory.
    testnet:
        Rewrite mainnet currency ids to their test network counterparts.
    delisted_color:
        Fallback gradient colour for unknown tokens.
    """

    def __init__(
        self,
        store: LocalTokenStore,
        remote: RemoteTokenSource | None = None,
        *,
        bundle: BundledTokenSource | None = None,
        reporter: Reporter | None = None,
        icon_bundle: IconBundle | None = None,
        testnet: bool = False,
        delisted_color: str = DELISTED_TOKEN_COLOR,
    ) -> None:
        self.store = store
        self.remote = remote
        self.bundle = bundle or BundledTokenSource()
        self.reporter = reporter or LoggingReporter()
        self.icon_bundle = icon_bundle
        self.testnet = testnet
        self.delisted_color = delisted_color
        self._snapshot: TokenSnapshot = EMPTY_SNAPSHOT
        self._write_lock = threading.Lock()
        self._ready = threading.Event()

    # -----------------
    # State
    # -----------------

    @property
    def snapshot(self) -> TokenSnapshot:
        return self._snapshot

    @property
    def is_initialized(self) -> bool:
        return self._ready.is_set()

    def wait_until_initialized(self, timeout: float | None = None) -> bool:
        """Block until the first load attempt has finished.

        Returns ``False`` only when ``timeout`` elapsed first.
        """

        return self._ready.wait(timeout)

    def _parse(self, text: str) -> list[TokenItem]:
        return parse_token_list(text, testnet=self.testnet, reporter=self.reporter)

    def _load_tokens(self, items: list[TokenItem]) -> bool:
        # callers hold _write_lock
        if not items and self._snapshot:
            logger.warning("Ignoring empty token list; keeping %d cached tokens", len(self._snapshot))
            return False
        self._snapshot = TokenSnapshot(items)
        self._ready.set()
        logger.debug("Token cache now holds %d tokens", len(items))
        return True

    def _save(self, text: str) -> None:
        try:
            self.store.write_text(text)
        except OSError as exc:
            self.reporter.error(f"Failed to write {self.store.filename} file", exc)

    def _load_from_store(self) -> None:
        try:
            text = self.store.read_text()
        except OSError as exc:
            self.reporter.error(f"Failed to read {self.store.filename} file", exc)
            return
        self._load_tokens(self._parse(text))

    # -----------------
    # Bootstrap loader
    # -----------------

    def initialize(self, force_reload: bool = False, *, background: bool = True) -> threading.Thread | None:
        """Populate the cache and schedule a refresh.

        Without a local copy (or with ``force_reload``) the bundled token list
        is persisted and loaded. Otherwise the local copy is loaded and a
        remote synchronisation is started, on a daemon thread when
        ``background`` is true. The ready gate is released on every path,
        including a failed bundle read.
        """

        try:
            if force_reload or not self.store.exists():
                self._bootstrap_from_bundle()
                return None
            with self._write_lock:
                self._load_from_store()
        finally:
            self._ready.set()

        if not background:
            self.sync_from_server()
            return None
        thread = threading.Thread(target=self.sync_from_server, name="token-sync", daemon=True)
        thread.start()
        return thread

    def _bootstrap_from_bundle(self) -> None:
        try:
            text = self.bundle.read_text()
        except OSError as exc:
            self.reporter.error("Failed to read bundled tokens.json", exc)
            return
        with self._write_lock:
            self._save(text)
            self._load_tokens(self._parse(text))

    # -----------------
    # Remote synchroniser
    # -----------------

    def sync_from_server(self) -> bool:
        """Fetch ``/currencies`` and swap in the result.

        Returns ``True`` when the response was accepted. Failures are reported
        and leave the cache untouched.
        """

        if self.remote is None:
            logger.debug("No remote token source configured; skipping sync")
            return False
        try:
            response = self.remote.fetch_all()
        except Exception as exc:
            logger.warning("Token request failed: %s", exc)
            self.reporter.error("failed to fetch tokens", exc)
            return False
        if not response.is_successful or not response.body_text:
            self.reporter.error(f"failed to fetch tokens: {response.code}")
            return False

        body = response.body_text
        with self._write_lock:
            if not is_token_list_json(body):
                self.reporter.error(f"failed to fetch tokens: body is not a JSON array ({response.code})")
                return False
            items = self._parse(body)
            if not items and self._snapshot:
                self.reporter.error(f"ignoring empty token list from server ({response.code})")
                return False
            self._save(body)
            return self._load_tokens(items)

    def fetch_token_by_sale_address(self, sale_address: str) -> TokenItem | None:
        """Look up a single token by its sale address on the server.

        The response must hold exactly one token; none or several yield
        ``None``. The cache is not modified.
        """

        if self.remote is None:
            return None
        try:
            response = self.remote.fetch_by_sale_address(sale_address)
        except Exception as exc:
            logger.warning("Token request for sale address %s failed: %s", sale_address, exc)
            self.reporter.error(f"failed to fetch token for sale address {sale_address}", exc)
            return None
        if not response.is_successful or not response.body_text:
            self.reporter.error(f"failed to fetch token for sale address {sale_address}: {response.code}")
            return None
        items = self._parse(response.body_text)
        if len(items) > 1:
            self.reporter.error(f"expected one token for sale address {sale_address}, got {len(items)}")
            return None
        return items[0] if items else None

    # -----------------
    # Lookups
    # -----------------

    def get_token_items(self) -> list[TokenItem]:
        if not self._snapshot:
            with self._write_lock:
                if not self._snapshot and self.store.exists():
                    self._load_from_store()
        return self._snapshot.items

    def get_token_item_by_currency_code(self, currency_code: str) -> TokenItem | None:
        return self._snapshot.by_symbol(currency_code)

    def get_token_item_for_currency_id(self, currency_id: str) -> TokenItem | None:
        return self._snapshot.by_currency_id(currency_id)

    def is_token_supported(self, symbol: str) -> bool:
        item = self._snapshot.by_symbol(symbol)
        return True if item is None else item.is_supported

    def get_exchange_rate_code(self, currency_code: str) -> str:
        item = self._snapshot.by_symbol(currency_code)
        if item is None or not item.cryptocompare_alias:
            return currency_code
        return item.cryptocompare_alias

    def get_token_start_color(self, currency_code: str) -> str:
        item = self._snapshot.by_symbol(currency_code)
        if item is not None and item.start_color and item.start_color.strip():
            return item.start_color
        return self.delisted_color

    def get_token_end_color(self, currency_code: str) -> str:
        item = self._snapshot.by_symbol(currency_code)
        if item is not None and item.end_color and item.end_color.strip():
            return item.end_color
        return self.delisted_color

    def get_token_icon_path(self, currency_code: str, with_background: bool) -> str | None:
        if self.icon_bundle is None:
            return None
        try:
            root = self.icon_bundle.extracted_path()
        except Exception as exc:
            self.reporter.error("Failed to extract token icon bundle", exc)
            return None
        return find_icon_path(root, currency_code, with_background)


__all__ = ["TokenCache"]
