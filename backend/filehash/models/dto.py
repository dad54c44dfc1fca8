"""Pydantic records printed by the command-line wrapper."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class DigestReport(BaseModel):
    path: str
    algorithm: str
    encoding: Literal["hex", "base64"] = "hex"
    digest: str
    size_bytes: int = Field(ge=0, description="Digest length in bytes")
    status: Literal["ok"] = "ok"


class DigestFailure(BaseModel):
    path: str
    algorithm: str
    error: Literal["file_not_found", "io_error", "hash_error"]
    detail: str
    status: Literal["error"] = "error"


__all__ = ["DigestReport", "DigestFailure"]
