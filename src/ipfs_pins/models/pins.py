"""Pin records returned by the Kubo pin commands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ipfs_pins.errors import EnumMappingError


class PinMode(str, Enum):
    """How an object is retained in the pinset."""

    DIRECT = "direct"  # Only the object itself
    RECURSIVE = "recursive"  # The object and everything it links to
    INDIRECT = "indirect"  # Held by a recursive pin on an ancestor
    ALL = "all"  # Filter only, never reported as a Type

    @property
    def query_value(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, text: str) -> PinMode:
        """Map the daemon's type string to a PinMode, ignoring case."""
        mode = _MODES_BY_NAME.get(str(text).strip().lower())
        if mode is None:
            raise EnumMappingError(text)
        return mode


_MODES_BY_NAME: dict[str, PinMode] = {m.name.lower(): m for m in PinMode}


@dataclass(frozen=True)
class PinnedObject:
    """An object in the daemon's pinset.

    ``mode`` is only known for objects returned by a listing; add and
    remove responses report identifiers alone.
    """

    id: str
    mode: PinMode | None = None
