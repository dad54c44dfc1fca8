"""Digest rendering helpers."""

from __future__ import annotations

import base64
from typing import Literal

Encoding = Literal["hex", "base64"]


def encode_digest(digest: bytes, encoding: Encoding = "hex") -> str:
    """Render raw digest bytes for display."""
    if encoding == "hex":
        return digest.hex()
    if encoding == "base64":
        return base64.b64encode(digest).decode("ascii")
    raise ValueError(f"unsupported encoding {encoding!r}")


__all__ = ["Encoding", "encode_digest"]
