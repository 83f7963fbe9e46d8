"""Protocol interfaces for ipfs_pins components."""

from ipfs_pins.interfaces.dispatcher import CommandDispatcher

__all__ = ["CommandDispatcher"]
