"""Pin manager - adds, lists and removes pins on a Kubo node."""

from __future__ import annotations

import asyncio
import builtins
import json
import logging
from typing import Any

from multiformats import CID

from ipfs_pins.errors import ParseError
from ipfs_pins.interfaces.dispatcher import CommandDispatcher
from ipfs_pins.ipfs.paths import to_path
from ipfs_pins.models.pins import PinMode, PinnedObject

log = logging.getLogger(__name__)


class PinApi:
    """Manages the daemon's pinset.

    Pinned objects are stored locally and never garbage collected. This
    class holds no state of its own; the pinset lives on the daemon and
    every call is one round trip through the dispatcher:
    - pin/add: pin a path or identifier
    - pin/ls: list pins, filtered by mode
    - pin/rm: remove a pin

    ``path`` arguments accept a path such as
    ``QmXarR6rgkQ2fDSHjSY5nM2kuCXKYGViky5nohtwgF65Ec/about``, a CID, or
    raw multihash bytes.
    """

    def __init__(self, dispatcher: CommandDispatcher) -> None:
        self._dispatcher = dispatcher

    async def add(
        self,
        path: str | CID | bytes,
        recursive: bool = True,
        cancel: asyncio.Event | None = None,
    ) -> list[PinnedObject]:
        """Pin an object, and its links when ``recursive`` is true."""
        pins = await self._change("pin/add", path, recursive, cancel)
        log.info("Pinned %d object(s) for %s", len(pins), path)
        return pins

    async def remove(
        self,
        path: str | CID | bytes,
        recursive: bool = True,
        cancel: asyncio.Event | None = None,
    ) -> list[PinnedObject]:
        """Unpin an object, and its links when ``recursive`` is true."""
        pins = await self._change("pin/rm", path, recursive, cancel)
        log.info("Unpinned %d object(s) for %s", len(pins), path)
        return pins

    async def list(
        self,
        mode: PinMode | str = PinMode.ALL,
        cancel: asyncio.Event | None = None,
    ) -> builtins.list[PinnedObject]:
        """List pinned objects of the given mode (all modes by default)."""
        if not isinstance(mode, PinMode):
            mode = PinMode.parse(mode)
        command = "pin/ls"
        text = await self._dispatcher.do_command(
            command, cancel, None, f"type={mode.query_value}",
        )
        keys = _field(_load(command, text), "Keys", dict, command)

        pins = []
        for cid, info in keys.items():
            if not isinstance(info, dict) or "Type" not in info:
                raise ParseError(command, f"missing Type for {cid}")
            pins.append(PinnedObject(id=cid, mode=PinMode.parse(info["Type"])))
        log.debug("Listed %d %s pin(s)", len(pins), mode.query_value)
        return pins

    async def _change(
        self,
        command: str,
        path: str | CID | bytes,
        recursive: bool,
        cancel: asyncio.Event | None,
    ) -> builtins.list[PinnedObject]:
        opts = "recursive=" + str(bool(recursive)).lower()
        text = await self._dispatcher.do_command(command, cancel, to_path(path), opts)
        ids = _field(_load(command, text), "Pins", list, command)
        if not all(isinstance(i, str) for i in ids):
            raise ParseError(command, "Pins must be a list of strings")
        return [PinnedObject(id=i) for i in ids]


def _load(command: str, text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError as exc:
        raise ParseError(command, f"invalid JSON: {exc}") from exc


def _field(data: Any, name: str, kind: type, command: str) -> Any:
    """Return ``data[name]``, checking it is present and of ``kind``."""
    if not isinstance(data, dict) or name not in data:
        raise ParseError(command, f"response has no {name!r} field")
    value = data[name]
    if not isinstance(value, kind):
        raise ParseError(command, f"{name!r} is not a {kind.__name__}")
    return value
