from __future__ import annotations
from pathlib import Path
from typing import Union


class IdenticonError(Exception):
    """Base class for everything the identicon package raises on purpose."""


class InsufficientDigestLength(IdenticonError, ValueError):
    """
    Raised when a digest is too short to pick a color or build a grid row.
    """
    def __init__(self, length: int, required: int = 3):
        self.length = length
        self.required = required
        super().__init__(
            f"Digest has {length} byte(s), at least {required} are required"
        )


class IdenticonWriteError(IdenticonError, OSError):
    """
    Raised when the rendered PNG cannot be persisted.

    Keeps the OSError triple (errno, strerror, filename) so callers can
    branch on the errno the same way they would for a plain OSError.
    """
    def __init__(self, path: Union[str, Path], errno: int | None, reason: str):
        super().__init__(errno, reason, str(path))
        self.path = Path(path)
        self.reason = reason

    def __str__(self) -> str:
        return f"Could not write identicon to {self.path}: {self.reason}"
