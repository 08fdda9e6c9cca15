"""petcli exception hierarchy."""

from __future__ import annotations


class PetCLIError(Exception):
    """Base exception for all petcli errors."""


class ConfigError(PetCLIError):
    """Raised when the configuration is invalid or cannot be read."""


class ConfigNotFoundError(ConfigError):
    """Raised when an explicitly requested configuration file does not exist."""


class StoreError(PetCLIError):
    """Raised when the pet store cannot be read or written."""


class ReadError(StoreError):
    """Raised when the store file cannot be read."""


class ParseError(StoreError):
    """Raised when the store file is not a JSON array of pets."""


class WriteError(StoreError):
    """Raised when the store file cannot be rewritten."""


class RecordIndexError(StoreError, IndexError):
    """Raised when an index does not address a pet in the store."""


class TerminalError(PetCLIError):
    """Raised when the terminal cannot be set up or read."""


class RenderError(PetCLIError):
    """Raised when the dashboard state cannot be drawn consistently."""
