"""Adapter between algorithm selectors and the underlying digest primitives."""

from __future__ import annotations

import hashlib
from typing import Any, Callable

import xxhash

from filehash.core.errors import HashError
from filehash.hashing.algorithms import Algorithm

_FACTORIES: dict[Algorithm, Callable[[], Any]] = {
    Algorithm.MD5: hashlib.md5,
    Algorithm.SHA1: hashlib.sha1,
    Algorithm.SHA256: hashlib.sha256,
    Algorithm.SHA512: hashlib.sha512,
    Algorithm.XXH64: lambda: xxhash.xxh64(seed=0),
}


class DigestEngine:
    """Single-use digest: one ``write`` of the whole buffer, then ``finalize``."""

    def __init__(self, algorithm: Algorithm | str) -> None:
        self.algorithm = Algorithm.parse(algorithm)
        try:
            self._primitive = _FACTORIES[self.algorithm]()
        except Exception as exc:
            raise HashError(f"cannot initialise {self.algorithm} digest") from exc
        self._state = "new"

    def write(self, data: bytes) -> None:
        if self._state != "new":
            raise HashError(f"{self.algorithm} digest already received its input")
        try:
            self._primitive.update(data)
        except Exception as exc:
            self._state = "failed"
            raise HashError(f"{self.algorithm} digest rejected input") from exc
        self._state = "written"

    def finalize(self) -> bytes:
        if self._state != "written":
            raise HashError(f"{self.algorithm} digest cannot finalize from state {self._state!r}")
        try:
            digest = self._primitive.digest()
        except Exception as exc:
            self._state = "failed"
            raise HashError(f"{self.algorithm} digest failed to finalize") from exc
        self._state = "finalized"
        if len(digest) != self.algorithm.digest_size:
            raise HashError(
                f"{self.algorithm} produced {len(digest)} bytes, expected {self.algorithm.digest_size}"
            )
        return digest


def digest_bytes(data: bytes, algorithm: Algorithm | str) -> bytes:
    """Digest an in-memory buffer with a fresh engine."""
    engine = DigestEngine(algorithm)
    engine.write(data)
    return engine.finalize()


__all__ = ["DigestEngine", "digest_bytes"]
