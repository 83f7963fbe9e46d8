"""Canonical string forms for IPFS paths and identifiers."""

from __future__ import annotations

from multiformats import CID


def to_path(value: str | CID | bytes) -> str:
    """Return the string form of a path, CID or raw multihash.

    Raw multihash bytes are rendered as a base58btc CIDv0 (``Qm...``),
    which is how the daemon prints sha2-256 dag-pb identifiers.
    """
    if isinstance(value, str):
        if not value:
            raise ValueError("path must not be empty")
        return value
    if isinstance(value, CID):
        return str(value)
    if isinstance(value, (bytes, bytearray)):
        return str(CID("base58btc", 0, "dag-pb", bytes(value)))
    raise TypeError(f"expected str, CID or multihash bytes, got {type(value).__name__}")
