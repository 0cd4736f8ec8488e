"""On-disk copy of the most recently accepted token list."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from ..core.constants import TOKENS_FILENAME


class LocalTokenStore:
    """Single JSON file in an application-private directory.

    The file is always replaced wholesale; a reader never sees a partially
    written document.
    """

    def __init__(self, files_dir: str | Path, filename: str = TOKENS_FILENAME) -> None:
        self.files_dir = Path(files_dir)
        self.filename = filename

    @property
    def path(self) -> Path:
        return self.files_dir / self.filename

    def exists(self) -> bool:
        return self.path.is_file()

    def read_text(self) -> str:
        return self.path.read_text(encoding="utf-8")

    def write_text(self, text: str) -> None:
        self.files_dir.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.files_dir, prefix=f".{self.filename}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp, self.path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise


__all__ = ["LocalTokenStore"]
