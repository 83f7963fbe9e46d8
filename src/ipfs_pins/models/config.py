"""Configuration models for the pin client."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ClientConfig:
    """Complete client configuration."""

    # IPFS
    api_url: str = "http://127.0.0.1:5001"
    timeout: int = 60  # seconds

    # Logging
    log_level: str = "info"
