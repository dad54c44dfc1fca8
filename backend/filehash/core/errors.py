"""Error taxonomy for file digesting."""

from __future__ import annotations

import os
from typing import Any


class FilehashError(Exception):
    """Base class for every failure surfaced by :mod:`filehash`."""

    def __init__(self, message: str, path: Any = None) -> None:
        super().__init__(message, path)
        self.message = message
        self.path = os.fspath(path) if path is not None else None

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.message}: {self.path!r}"


class FileNotFound(FilehashError):
    """Path is missing, cannot be opened, or is not a regular file."""


class IoError(FilehashError):
    """File was opened but reading its content failed."""


class HashError(FilehashError):
    """Digest primitive refused the input or failed to finalize."""


class RequestConsumedError(FilehashError, RuntimeError):
    """A hash request was used again after ``compute()``."""


__all__ = [
    "FilehashError",
    "FileNotFound",
    "IoError",
    "HashError",
    "RequestConsumedError",
]
