"""Matplotlib-based previews of token gradient colours."""

from __future__ import annotations

import pandas as pd

from ..core import DELISTED_TOKEN_COLOR


class Visualizer:
    """Static helpers that turn token tables into charts."""

    @staticmethod
    def _plt():
        try:
            import matplotlib.pyplot as plt
        except Exception as exc:  # pragma: no cover
            raise RuntimeError(
                "matplotlib is required for visualization. Install via pip."
            ) from exc
        return plt

    @staticmethod
    def gradient_swatches(
        df: pd.DataFrame,
        title: str = "Token gradient colours",
        label_col: str = "symbol",
        *,
        fallback_color: str = DELISTED_TOKEN_COLOR,
        save_path: str | None = None,
        show: bool = True,
    ) -> None:
        """Draw one row per token: start colour on the left, end colour on the right."""

        if df.empty:
            return
        labels = df[label_col].astype(str).tolist()
        starts = [c if isinstance(c, str) and c.strip() else fallback_color for c in df["start_color"]]
        ends = [c if isinstance(c, str) and c.strip() else fallback_color for c in df["end_color"]]
        rows = list(range(len(labels)))

        plt = Visualizer._plt()
        plt.figure(figsize=(6, max(2.0, 0.35 * len(labels))))
        plt.barh(rows, [1.0] * len(rows), left=0.0, color=starts)
        plt.barh(rows, [1.0] * len(rows), left=1.0, color=ends)
        plt.yticks(rows, labels)
        plt.xticks([0.5, 1.5], ["start", "end"])
        plt.title(title)
        plt.tight_layout()
        if save_path:
            plt.savefig(save_path, bbox_inches="tight")
        if show:
            plt.show()


__all__ = ["Visualizer"]
