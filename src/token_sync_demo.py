from __future__ import annotations

import logging
import os
import sys
import tomllib
from pathlib import Path
from typing import Any, cast

from wallet_tokens import (
    BundledTokenSource,
    DirectoryIconBundle,
    LocalTokenStore,
    RemoteTokenSource,
    TokenCache,
    UrllibTransport,
    Visualizer,
    export_token_report,
    token_summary,
)
from wallet_tokens.core import DELISTED_TOKEN_COLOR

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


def load_config(path: str | Path | None) -> dict[str, Any]:
    """Load configuration from a TOML file and merge with defaults.

    Parameters
    ----------
    path:
        Optional path to a configuration file. When ``None`` or missing, the
        built-in defaults are used.

    Returns
    -------
    dict[str, Any]
        Configuration dictionary with any file overrides applied.
    """

    default: dict[str, Any] = {
        "api": {"base_url": "https://api.breadwallet.com", "timeout": 30.0},
        "storage": {"files_dir": str(Path.home() / ".wallet_tokens"), "bundle_path": None},
        "network": {"testnet": False},
        "icons": {"bundle_dir": None},
        "colors": {"delisted": DELISTED_TOKEN_COLOR},
        "sync": {"force_reload": False, "background": False},
        "output": {"outdir": None, "show": False, "swatches": False},
    }

    cfg_path = Path(path) if path else None
    if cfg_path and cfg_path.is_file():
        with open(cfg_path, "rb") as f:
            file_cfg = tomllib.load(f)
        for k, v in file_cfg.items():
            if isinstance(v, dict) and k in default and isinstance(default[k], dict):
                cast(dict, default[k]).update(v)
            else:
                default[k] = v
    elif cfg_path:
        logger.warning("Config file not found at %s. Using defaults.", cfg_path)

    return default


def apply_env_overrides(cfg: dict[str, Any], environ: dict[str, str] | None = None) -> dict[str, Any]:
    env = os.environ if environ is None else environ
    if base_url := env.get("WALLET_TOKENS_BASE_URL"):
        cfg.setdefault("api", {})["base_url"] = base_url
    if files_dir := env.get("WALLET_TOKENS_FILES_DIR"):
        cfg.setdefault("storage", {})["files_dir"] = files_dir
    if testnet := env.get("WALLET_TOKENS_TESTNET"):
        cfg.setdefault("network", {})["testnet"] = testnet.strip().lower() in _TRUTHY
    if outdir := env.get("WALLET_TOKENS_OUTDIR"):
        cfg.setdefault("output", {})["outdir"] = outdir
    return cfg


def build_cache(cfg: dict[str, Any]) -> TokenCache:
    api = cfg.get("api", {})
    storage = cfg.get("storage", {})
    icons_dir = cfg.get("icons", {}).get("bundle_dir")
    remote = None
    if api.get("base_url"):
        remote = RemoteTokenSource(
            str(api["base_url"]),
            UrllibTransport(timeout=float(api.get("timeout", 30.0))),
        )
    return TokenCache(
        LocalTokenStore(str(storage["files_dir"])),
        remote,
        bundle=BundledTokenSource(storage.get("bundle_path")),
        icon_bundle=DirectoryIconBundle(icons_dir) if icons_dir else None,
        testnet=bool(cfg.get("network", {}).get("testnet", False)),
        delisted_color=str(cfg.get("colors", {}).get("delisted", DELISTED_TOKEN_COLOR)),
    )


def main() -> None:
    """Initialise the token cache, refresh it and print a summary."""

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    cfg_file = os.getenv("WALLET_TOKENS_CONFIG") or (sys.argv[1] if len(sys.argv) > 1 else None)
    cfg = apply_env_overrides(load_config(cfg_file))

    cache = build_cache(cfg)
    sync = cfg.get("sync", {})
    thread = cache.initialize(
        force_reload=bool(sync.get("force_reload", False)),
        background=bool(sync.get("background", False)),
    )
    if thread is not None:
        thread.join()

    snapshot = cache.snapshot
    print(f"Tokens loaded: {len(snapshot)}")
    print(token_summary(snapshot).to_string(index=False))

    out = cfg.get("output", {})
    if out.get("outdir"):
        paths = export_token_report(snapshot, out["outdir"])
        for name, p in paths.items():
            print(f"Wrote {name}: {p}")
    if out.get("swatches"):
        save_path = str(Path(out["outdir"]) / "swatches.png") if out.get("outdir") else None
        Visualizer.gradient_swatches(snapshot.to_dataframe(), save_path=save_path, show=bool(out.get("show")))


if __name__ == "__main__":
    main()
