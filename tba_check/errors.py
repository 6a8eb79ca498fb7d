"""Errors raised by the checks themselves.

Failures reported by the Bot API surface as ``telegram.error.TelegramError``
and are not wrapped.
"""

from pathlib import Path
from typing import Any


class CheckError(Exception):
    """Base class for harness failures."""


class VerificationError(CheckError):
    """A value read back from the API differs from the value just written."""

    def __init__(self, field: str, expected: Any, actual: Any):
        super().__init__(f"{field}: expected {expected!r}, got {actual!r}")
        self.field = field
        self.expected = expected
        self.actual = actual


class MissingAssetError(CheckError):
    """A sticker image referenced by the fixtures does not exist."""

    def __init__(self, path: Path):
        super().__init__(f"sticker asset not found: {path}")
        self.path = path


class ConfigError(CheckError):
    """The fixtures file is missing or cannot be parsed."""
