"""CLI entrypoint for filehash."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
import yaml

from filehash.core.config import Settings
from filehash.core.errors import FileNotFound, FilehashError, HashError, IoError
from filehash.core.logging import configure_logging, get_logger
from filehash.hashing import Algorithm, FileHash
from filehash.models.dto import DigestFailure, DigestReport
from filehash.utils.encoding import encode_digest

app = typer.Typer(name="filehash", help="Compute file digests", no_args_is_help=True)

EXIT_CODES: dict[type[FilehashError], int] = {
    FileNotFound: 1,
    IoError: 3,
    HashError: 4,
}

_ERROR_KINDS: dict[type[FilehashError], str] = {
    FileNotFound: "file_not_found",
    IoError: "io_error",
    HashError: "hash_error",
}


def _load_settings(config: Optional[Path]) -> Settings:
    try:
        return Settings.from_yaml(config)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _resolve_algorithm(name: Optional[str], settings: Settings) -> Algorithm:
    if name is None:
        return settings.default_algorithm
    try:
        return Algorithm.parse(name)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--algorithm") from exc


@app.command()
def digest(
    paths: List[Path] = typer.Argument(..., help="Files to digest"),
    algorithm: Optional[str] = typer.Option(None, "--algorithm", "-a", help="md5, sha1, sha256, sha512 or xxh64"),
    encoding: Optional[str] = typer.Option(None, "--encoding", "-e", help="hex or base64"),
    as_json: bool = typer.Option(False, "--json", help="Emit one JSON object per file"),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML configuration file"),
) -> None:
    """Print the digest of each file."""
    settings = _load_settings(config)
    configure_logging(settings.log_level, use_json=settings.log_json)
    logger = get_logger(__name__)
    selected = _resolve_algorithm(algorithm, settings)
    output_encoding = encoding or settings.encoding
    if output_encoding not in ("hex", "base64"):
        raise typer.BadParameter("must be 'hex' or 'base64'", param_hint="--encoding")

    exit_code = 0
    for path in paths:
        extra = {"ctx_path": str(path), "ctx_algorithm": selected.value}
        try:
            raw = FileHash.create(path).with_algorithm(selected).compute()
        except FilehashError as exc:
            logger.warning("digest failed: %s", exc, extra=extra)
            if as_json:
                failure = DigestFailure(
                    path=str(path),
                    algorithm=selected.value,
                    error=_ERROR_KINDS.get(type(exc), "hash_error"),
                    detail=str(exc),
                )
                typer.echo(failure.model_dump_json())
            else:
                typer.echo(f"filehash: {exc}", err=True)
            exit_code = exit_code or EXIT_CODES.get(type(exc), 1)
            continue

        rendered = encode_digest(raw, output_encoding)
        logger.debug("digest computed", extra=extra)
        if as_json:
            report = DigestReport(
                path=str(path),
                algorithm=selected.value,
                encoding=output_encoding,
                digest=rendered,
                size_bytes=len(raw),
            )
            typer.echo(report.model_dump_json())
        else:
            typer.echo(f"{rendered}  {path}")

    if exit_code:
        raise typer.Exit(code=exit_code)


@app.command()
def algorithms() -> None:
    """List supported algorithms and their digest sizes."""
    for member in Algorithm:
        kind = "cryptographic" if member.cryptographic else "non-cryptographic"
        typer.echo(f"{member.value:<8} {member.digest_size * 8:>4} bits  {kind}")


if __name__ == "__main__":
    app()
