"""Default token list shipped inside the package."""

from __future__ import annotations

from importlib import resources
from pathlib import Path

BUNDLED_RESOURCE = "data/tokens.json"


class BundledTokenSource:
    """Read the bundled token list, or an override file when ``path`` is set."""

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path else None

    def read_text(self) -> str:
        if self.path is not None:
            return self.path.read_text(encoding="utf-8")
        return resources.files("wallet_tokens").joinpath(BUNDLED_RESOURCE).read_text(encoding="utf-8")


__all__ = ["BUNDLED_RESOURCE", "BundledTokenSource"]
