"""Builder-style requests that digest a single file."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from filehash.core.errors import FileNotFound, IoError, RequestConsumedError
from filehash.hashing.algorithms import Algorithm
from filehash.hashing.engine import digest_bytes

PathArg = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


def _as_path(value: PathArg) -> Path:
    return Path(os.fsdecode(value))


@dataclass(frozen=True, slots=True)
class UnconfiguredRequest:
    """A path waiting for an algorithm. Has no ``compute``."""

    path: PathArg

    def __post_init__(self) -> None:
        # Rejects non-path values early; existence is only checked by compute().
        os.fspath(self.path)

    def with_algorithm(self, algorithm: Algorithm | str) -> "FileHashRequest":
        return FileHashRequest(self.path, algorithm)


class FileHashRequest:
    """A path plus a selected algorithm, consumed by :meth:`compute`.

    Configuration steps return new requests and never alter the receiver.
    ``compute()`` may run once; any later use raises
    :class:`~filehash.core.errors.RequestConsumedError`.
    """

    __slots__ = ("_path", "_algorithm", "_consumed")

    def __init__(self, path: PathArg, algorithm: Algorithm | str) -> None:
        os.fspath(path)
        self._path = path
        self._algorithm = Algorithm.parse(algorithm)
        self._consumed = False

    @property
    def path(self) -> PathArg:
        return self._path

    @property
    def algorithm(self) -> Algorithm:
        return self._algorithm

    @property
    def consumed(self) -> bool:
        return self._consumed

    def with_algorithm(self, algorithm: Algorithm | str) -> "FileHashRequest":
        self._ensure_fresh()
        return FileHashRequest(self._path, algorithm)

    def compute(self) -> bytes:
        """Read the file and return its raw digest bytes.

        Raises:
            FileNotFound: path is missing, unopenable, or not a regular file.
            IoError: the read failed after the file was opened.
            HashError: the digest primitive failed.
        """
        self._ensure_fresh()
        self._consumed = True
        data = _read_regular_file(_as_path(self._path))
        return digest_bytes(data, self._algorithm)

    def _ensure_fresh(self) -> None:
        if self._consumed:
            raise RequestConsumedError("hash request already computed", self._path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileHashRequest):
            return NotImplemented
        return self._path == other._path and self._algorithm is other._algorithm

    def __hash__(self) -> int:
        return hash((os.fspath(self._path), self._algorithm))

    def __repr__(self) -> str:
        state = ", consumed" if self._consumed else ""
        return f"FileHashRequest(path={self._path!r}, algorithm={self._algorithm.value!r}{state})"


def _read_regular_file(path: Path) -> bytes:
    # Checked before open so FIFOs and devices never block the caller.
    try:
        if not stat.S_ISREG(path.stat().st_mode):
            raise FileNotFound("not a regular file", path)
    except OSError as exc:
        raise FileNotFound("cannot open file", path) from exc
    try:
        fh = path.open("rb")
    except OSError as exc:
        raise FileNotFound("cannot open file", path) from exc
    with fh:
        try:
            if not stat.S_ISREG(os.fstat(fh.fileno()).st_mode):
                raise FileNotFound("not a regular file", path)
            return fh.read()
        except OSError as exc:
            raise IoError("failed to read file", path) from exc


class FileHash:
    """Entry point: ``FileHash.create(path).with_algorithm(...).compute()``."""

    @staticmethod
    def create(path: PathArg) -> UnconfiguredRequest:
        return UnconfiguredRequest(path)

    new = create


def hash_file(path: PathArg, algorithm: Algorithm | str) -> bytes:
    """Digest the file at ``path`` in one call."""
    return FileHash.create(path).with_algorithm(algorithm).compute()


__all__ = [
    "FileHash",
    "UnconfiguredRequest",
    "FileHashRequest",
    "hash_file",
]
