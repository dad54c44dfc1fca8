"""Digest algorithm selectors."""

from __future__ import annotations

from enum import Enum

_ALIASES: dict[str, str] = {
    "sha-1": "sha1",
    "sha-256": "sha256",
    "sha-512": "sha512",
    "xxhash": "xxh64",
    "xxhash64": "xxh64",
    "xxh-64": "xxh64",
}

_DIGEST_SIZES: dict[str, int] = {
    "md5": 16,
    "sha1": 20,
    "sha256": 32,
    "sha512": 64,
    "xxh64": 8,
}


class Algorithm(str, Enum):
    """Closed set of supported digest kinds."""

    MD5 = "md5"
    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA512 = "sha512"
    XXH64 = "xxh64"

    @property
    def digest_size(self) -> int:
        return _DIGEST_SIZES[self.value]

    @property
    def cryptographic(self) -> bool:
        return self is not Algorithm.XXH64

    @classmethod
    def parse(cls, value: "Algorithm | str") -> "Algorithm":
        """Resolve a selector from an enum member or a case-insensitive name."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise TypeError(f"algorithm must be an Algorithm or str, not {type(value).__name__}")
        key = value.strip().lower().replace("_", "-")
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise ValueError(f"unknown algorithm {value!r} (expected one of: {choices})") from None

    def __str__(self) -> str:
        return self.value


__all__ = ["Algorithm"]
