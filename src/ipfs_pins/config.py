"""Configuration loading: TOML file + environment variables."""

from __future__ import annotations

import os
from pathlib import Path

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib  # type: ignore[no-redef]

from ipfs_pins.models.config import ClientConfig


def load_config(
    config_path: str | Path | None = None,
    env_prefix: str = "IPFS_PINS_",
) -> ClientConfig:
    """Load client configuration from a TOML file and env vars.

    Priority (highest wins):
        1. Environment variables (IPFS_PINS_API_URL, etc.)
        2. TOML config file
        3. Defaults from ClientConfig
    """
    raw: dict = {}
    if config_path is not None:
        p = Path(config_path).expanduser()
        if p.exists():
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    cfg = ClientConfig()

    # ── IPFS section ───────────────────────────────────────
    ipfs = raw.get("ipfs", {})
    if v := ipfs.get("api_url"):
        cfg.api_url = str(v)
    if v := ipfs.get("timeout"):
        cfg.timeout = int(v)

    # ── Logging section ────────────────────────────────────
    logging_raw = raw.get("logging", {})
    if v := logging_raw.get("level"):
        cfg.log_level = str(v)

    # ── Environment variable overrides (highest priority) ──
    if url := os.environ.get(f"{env_prefix}API_URL"):
        cfg.api_url = url
    if timeout := os.environ.get(f"{env_prefix}TIMEOUT"):
        cfg.timeout = int(timeout)
    if level := os.environ.get(f"{env_prefix}LOG_LEVEL"):
        cfg.log_level = level

    return cfg
