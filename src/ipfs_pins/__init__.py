"""ipfs_pins - async client for the pin commands of a Kubo IPFS node."""

from ipfs_pins.errors import (
    CommandCancelledError,
    EnumMappingError,
    ParseError,
    PinError,
    RemoteCommandError,
)
from ipfs_pins.ipfs.client import KuboClient
from ipfs_pins.ipfs.paths import to_path
from ipfs_pins.ipfs.pins import PinApi
from ipfs_pins.models.pins import PinMode, PinnedObject

__version__ = "0.1.0"

__all__ = [
    "KuboClient", "PinApi", "PinMode", "PinnedObject", "to_path",
    "PinError", "RemoteCommandError", "ParseError", "EnumMappingError",
    "CommandCancelledError",
]
