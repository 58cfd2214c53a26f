#!/usr/bin/env python3
"""
content_copier.cli.cli

Typer-based CLI for copying content URIs into local files.

Examples
--------
Copy a file shared by another application:

    copy-content-uri copy content://com.example.share/photos/a.jpg ./a.jpg \\
        --provider com.example.share=/srv/shared

Copy an inline data URI:

    copy-content-uri copy "data:text/plain;base64,aGVsbG8=" ./hello.txt
"""

from __future__ import annotations

import logging
import traceback
from pathlib import Path

import typer

from content_copier.application.options import DEFAULT_BUFFER_SIZE
from content_copier.application.results import Copied, FailureReason
from content_copier.errors import ContentCopierError

app = typer.Typer(
    name="copy-content-uri",
    help="Copy content URIs (content://, data:, file://) into local files.",
    no_args_is_help=True,
)

PROVIDER_HELP = "Content provider root AUTHORITY=DIR (repeatable)."

_EXIT_CODES = {
    FailureReason.RESOLUTION_FAILED: 1,
    FailureReason.IO_FAILURE: 4,
}
UNEXPECTED_ERROR_EXIT_CODE = 3


def _print_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly error.

    Parameters
    ----------
    exc : Exception
        Exception raised while running a command.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    return UNEXPECTED_ERROR_EXIT_CODE


def _provider_roots(provider: list[str] | None) -> dict[str, Path]:
    """Parse and validate repeated AUTHORITY=DIR provider entries.

    Malformed entries are usage errors (exit code 2).
    """
    from content_copier.adapters.registry import (
        create_default_registry,
        parse_provider_specs,
    )

    try:
        roots = parse_provider_specs(provider or [])
        create_default_registry(roots)
    except ContentCopierError as exc:
        raise typer.BadParameter(str(exc), param_hint="--provider") from exc
    return roots


def _configure_logging(debug: bool, verbose: bool) -> None:
    level = logging.WARNING
    if verbose:
        level = logging.INFO
    if debug:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show debug logs and full tracebacks."),
    verbose: bool = typer.Option(False, "--verbose", help="Show informational logs."),
) -> None:
    """Initialize shared CLI state.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug logging and error output.
    verbose : bool, default=False
        Whether to enable informational logging.
    """
    _configure_logging(debug, verbose)
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("copy")
def copy_cmd(
    ctx: typer.Context,
    source_uri: str = typer.Argument(..., help="Content URI or absolute path to read."),
    destination_path: Path = typer.Argument(..., help="Where to write the copied bytes."),
    buffer_size: int = typer.Option(
        DEFAULT_BUFFER_SIZE,
        "--buffer-size",
        min=1,
        help="Transfer buffer size in bytes.",
    ),
    provider: list[str] | None = typer.Option(None, "--provider", help=PROVIDER_HELP),
) -> None:
    """Copy a content URI into a local file.

    Exit codes: 0 on success, 1 when the source cannot be resolved, 2 on a
    usage error such as a malformed --provider, 3 on an unexpected error, 4
    on an I/O failure.
    """
    debug: bool = bool(ctx.obj.get("debug", False))
    provider_roots = _provider_roots(provider)

    try:
        from content_copier.api import copy_content_uri

        outcome = copy_content_uri(
            source_uri=source_uri,
            destination_path=destination_path,
            buffer_size=buffer_size,
            provider_roots=provider_roots,
        )
    except Exception as exc:
        raise typer.Exit(code=_print_error(exc, debug))

    if isinstance(outcome, Copied):
        typer.echo(f"✓ Copied {outcome.byte_count} bytes to {destination_path}")
        return
    typer.echo(f"✗ {outcome.reason.name}: {outcome.message}", err=True)
    raise typer.Exit(code=_EXIT_CODES[outcome.reason])


@app.command("resolvers")
def resolvers_cmd(
    provider: list[str] | None = typer.Option(None, "--provider", help=PROVIDER_HELP),
) -> None:
    """List registered resolvers in lookup order."""
    from content_copier.adapters.registry import create_default_registry

    roots = _provider_roots(provider)
    registry = create_default_registry(roots)
    typer.echo(f"resolvers: {', '.join(registry.names())}")
    for authority, root in sorted(roots.items()):
        typer.echo(f"content://{authority} -> {root}")


if __name__ == "__main__":
    app()
