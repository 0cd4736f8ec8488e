from __future__ import annotations

from pathlib import Path

from wallet_tokens.icons import find_icon_path


def test_missing_root_returns_none(tmp_path: Path) -> None:
    assert find_icon_path(None, "btc", with_background=False) is None
    assert find_icon_path(tmp_path / "absent", "btc", with_background=False) is None


def test_wrong_variant_is_not_used(tmp_path: Path) -> None:
    (tmp_path / "white-no-bg").mkdir()
    (tmp_path / "white-no-bg" / "btc.png").write_bytes(b"png")

    assert find_icon_path(tmp_path, "BTC", with_background=True) is None
    assert find_icon_path(tmp_path, "BTC", with_background=False).endswith("btc.png")


def test_files_outside_variant_directories_are_ignored(tmp_path: Path) -> None:
    (tmp_path / "btc.png").write_bytes(b"png")
    (tmp_path / "white-square-bg").mkdir()
    (tmp_path / "white-square-bg" / "btc.svg").write_bytes(b"svg")

    assert find_icon_path(tmp_path, "btc", with_background=True) is None
