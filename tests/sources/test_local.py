from __future__ import annotations

from pathlib import Path

import pytest

from wallet_tokens.sources import BundledTokenSource, LocalTokenStore
from wallet_tokens.parsing import parse_token_list


def test_store_creates_directory_and_overwrites(tmp_path: Path) -> None:
    store = LocalTokenStore(tmp_path / "files")
    assert not store.exists()

    store.write_text("[1]")
    store.write_text("[2]")

    assert store.exists()
    assert store.read_text() == "[2]"
    assert store.path == tmp_path / "files" / "tokens.json"
    assert [p.name for p in (tmp_path / "files").iterdir()] == ["tokens.json"]


def test_store_read_missing_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        LocalTokenStore(tmp_path).read_text()


def test_bundled_resource_parses() -> None:
    items = parse_token_list(BundledTokenSource().read_text())
    symbols = {item.symbol for item in items}
    assert {"BTC", "ETH", "BRD"} <= symbols


def test_bundled_override_path(tmp_path: Path) -> None:
    path = tmp_path / "custom.json"
    path.write_text("[]")
    assert BundledTokenSource(path).read_text() == "[]"


def test_bundled_missing_override_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        BundledTokenSource(tmp_path / "missing.json").read_text()
