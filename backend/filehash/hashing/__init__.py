"""Whole-file digesting: selectors, engine adapter and request builder."""

from .algorithms import Algorithm
from .engine import DigestEngine, digest_bytes
from .request import FileHash, FileHashRequest, UnconfiguredRequest, hash_file

__all__ = [
    "Algorithm",
    "DigestEngine",
    "digest_bytes",
    "FileHash",
    "FileHashRequest",
    "UnconfiguredRequest",
    "hash_file",
]
