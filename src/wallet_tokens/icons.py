"""Resolve token icon files inside an extracted icon bundle."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from .core.constants import (
    ICON_DIRECTORY_WHITE_NO_BACKGROUND,
    ICON_DIRECTORY_WHITE_SQUARE_BACKGROUND,
    ICON_FILE_NAME_FORMAT,
)


class IconBundle(Protocol):
    """Collaborator that extracts the token icon bundle and reports its root."""

    def extracted_path(self) -> str | Path | None: ...


class DirectoryIconBundle:
    """Icon bundle already extracted to a known directory."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def extracted_path(self) -> Path:
        return self.path


def find_icon_path(bundle_root: str | Path | None, symbol: str, with_background: bool) -> str | None:
    if bundle_root is None:
        return None
    root = Path(bundle_root)
    if not root.is_dir():
        return None
    directory_name = (
        ICON_DIRECTORY_WHITE_SQUARE_BACKGROUND if with_background else ICON_DIRECTORY_WHITE_NO_BACKGROUND
    )
    file_name = ICON_FILE_NAME_FORMAT.format(symbol).lower()
    for directory in sorted(root.iterdir()):
        if not directory.is_dir() or directory.name.lower() != directory_name:
            continue
        for candidate in sorted(directory.iterdir()):
            if candidate.name.lower() == file_name:
                return str(candidate.resolve())
    return None


__all__ = ["DirectoryIconBundle", "IconBundle", "find_icon_path"]
