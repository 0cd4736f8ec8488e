from __future__ import annotations

from pathlib import Path

import pandas as pd

from .core import TokenSnapshot

_SUMMARY_COLUMNS = ["type", "tokens", "supported", "unsupported", "with_colors"]


def _ensure_outdir(outdir: str | Path) -> Path:
    p = Path(outdir)
    p.mkdir(parents=True, exist_ok=True)
    return p


def token_summary(snapshot: TokenSnapshot) -> pd.DataFrame:
    """Count tokens per asset type, split by support flag."""

    df = snapshot.to_dataframe()
    if df.empty:
        return pd.DataFrame(columns=_SUMMARY_COLUMNS)
    df["has_colors"] = df["start_color"].notna() & df["end_color"].notna()
    summary = (
        df.groupby("type")
        .agg(
            tokens=("symbol", "count"),
            supported=("is_supported", "sum"),
            with_colors=("has_colors", "sum"),
        )
        .reset_index()
    )
    summary["unsupported"] = summary["tokens"] - summary["supported"]
    return summary[_SUMMARY_COLUMNS].sort_values("tokens", ascending=False, kind="stable").reset_index(drop=True)


def export_token_report(snapshot: TokenSnapshot, outdir: str | Path) -> dict[str, Path]:
    """Write ``tokens.csv`` and ``token_summary.csv`` to ``outdir``."""

    out = _ensure_outdir(outdir)
    paths = {
        "tokens": out / "tokens.csv",
        "summary": out / "token_summary.csv",
    }
    snapshot.to_dataframe().to_csv(paths["tokens"], index=False)
    token_summary(snapshot).to_csv(paths["summary"], index=False)
    return paths


__all__ = ["export_token_report", "token_summary"]
