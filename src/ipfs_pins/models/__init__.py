"""Data models for ipfs_pins."""

from ipfs_pins.models.config import ClientConfig
from ipfs_pins.models.pins import PinMode, PinnedObject

__all__ = ["ClientConfig", "PinMode", "PinnedObject"]
