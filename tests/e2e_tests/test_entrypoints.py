"""End-to-end smoke tests for installed entrypoints."""

from __future__ import annotations

import subprocess
from pathlib import Path

import content_copier


def test_package_import_smoke() -> None:
    """Ensure package can be imported in the test process."""
    assert content_copier.__version__


def test_cli_help_smoke() -> None:
    """Ensure the installed CLI entrypoint responds to --help."""
    result = subprocess.run(
        ["copy-content-uri", "--help"],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0, result.stderr
    assert "Copy content URIs" in result.stdout


def test_cli_copy_roundtrip(tmp_path: Path) -> None:
    """Copy a data URI through the installed CLI."""
    destination = tmp_path / "nested" / "hello.txt"
    result = subprocess.run(
        ["copy-content-uri", "copy", "data:text/plain,hello", str(destination)],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0, result.stderr
    assert destination.read_text() == "hello"


def test_cli_unresolvable_source_fails_cleanly(tmp_path: Path) -> None:
    """Return a resolution failure exit code without a traceback."""
    result = subprocess.run(
        [
            "copy-content-uri",
            "copy",
            "content://definitely.missing/file.bin",
            str(tmp_path / "out.bin"),
        ],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 1
    assert "RESOLUTION_FAILED" in result.stderr
    assert "Traceback" not in result.stderr
