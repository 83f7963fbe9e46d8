"""IPFS components - Kubo RPC client and pin manager."""

from ipfs_pins.ipfs.client import KuboClient
from ipfs_pins.ipfs.paths import to_path
from ipfs_pins.ipfs.pins import PinApi

__all__ = ["KuboClient", "PinApi", "to_path"]
