"""CommandDispatcher protocol - issues commands against the Kubo RPC API."""

from __future__ import annotations

import asyncio
from typing import Protocol


class CommandDispatcher(Protocol):
    """Runs a single RPC command and returns the raw response body."""

    async def do_command(
        self,
        command: str,
        cancel: asyncio.Event | None = None,
        arg: str | None = None,
        *options: str,
    ) -> str:
        """POST /api/v0/{command}?arg={arg}&{options...} and return the text."""
        ...
