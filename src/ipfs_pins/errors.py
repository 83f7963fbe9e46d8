"""Errors raised by pin operations."""

from __future__ import annotations


class PinError(Exception):
    """Base class for all ipfs_pins errors."""


class RemoteCommandError(PinError):
    """The daemon rejected a command or could not be reached."""

    def __init__(
        self, command: str, message: str, status_code: int | None = None
    ) -> None:
        self.command = command
        self.message = message
        self.status_code = status_code
        if status_code is None:
            super().__init__(f"{command}: {message}")
        else:
            super().__init__(f"{command}: HTTP {status_code}: {message}")


class ParseError(PinError):
    """A response body did not have the expected shape."""

    def __init__(self, command: str, message: str) -> None:
        self.command = command
        self.message = message
        super().__init__(f"{command}: {message}")


class EnumMappingError(ParseError):
    """A pin type string is not a known PinMode."""

    def __init__(self, value: str, command: str = "pin/ls") -> None:
        self.value = value
        super().__init__(command, f"unknown pin type {value!r}")


class CommandCancelledError(PinError):
    """The caller cancelled a command before it completed."""

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"{command}: cancelled")
