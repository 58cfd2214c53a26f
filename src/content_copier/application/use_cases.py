"""Application use-cases orchestrating content copies."""

from __future__ import annotations

import logging
from contextlib import ExitStack, closing
from pathlib import Path

from pydantic import ValidationError

from content_copier.application.options import DEFAULT_BUFFER_SIZE, CopyOptions
from content_copier.application.ports import ContentResolver
from content_copier.application.results import (
    Copied,
    CopyOutcome,
    Failed,
    FailureReason,
)
from content_copier.errors import ContentCopierError
from content_copier.schemas import CopyOptionsConfig
from content_copier.types import ByteStream, DestinationPath, SourceHandle

logger = logging.getLogger(__name__)


class ContentCopier:
    """Copy bytes behind a content handle into a local file.

    Parameters
    ----------
    resolver : ContentResolver
        Capability that opens content handles for reading.
    options : CopyOptions | None, default=None
        Transfer options; defaults to ``CopyOptions()``.
    """

    def __init__(
        self,
        resolver: ContentResolver,
        options: CopyOptions | None = None,
    ) -> None:
        self._resolver = resolver
        self._options = options or CopyOptions()

    @property
    def options(self) -> CopyOptions:
        return self._options

    def copy(self, source: SourceHandle, destination: DestinationPath) -> CopyOutcome:
        """Copy ``source`` into ``destination`` and report the outcome.

        Never raises for I/O or resolution problems; every such failure is
        returned as a ``Failed`` value.

        Parameters
        ----------
        source : str
            Opaque content handle understood by the resolver.
        destination : str | os.PathLike[str]
            Local file path. Missing parent directories are created.

        Returns
        -------
        CopyOutcome
            ``Copied`` with the byte count, or ``Failed`` with a reason.
        """
        logger.debug("Copying from %s to %s", source, destination)
        try:
            destination_path = Path(destination)
        except (TypeError, ValueError) as exc:
            logger.error("Invalid destination path: %s", exc)
            return Failed(FailureReason.IO_FAILURE, str(exc))

        _ensure_parent_dirs(destination_path)

        try:
            stream = self._resolver.open_input_stream(source)
        except Exception as exc:
            logger.error("Failed to open input stream for URI: %s", exc)
            return Failed(FailureReason.RESOLUTION_FAILED, str(exc))
        if stream is None:
            logger.error("Failed to open input stream for URI")
            return Failed(
                FailureReason.RESOLUTION_FAILED,
                f"unable to open content handle: {source}",
            )

        try:
            total = self._transfer(stream, destination_path)
        except OSError as exc:
            logger.error("I/O error during copy: %s", exc)
            return Failed(FailureReason.IO_FAILURE, str(exc))
        except Exception as exc:
            logger.error("Exception during copy: %s", exc)
            return Failed(FailureReason.IO_FAILURE, str(exc))

        logger.debug("Successfully copied %d bytes", total)
        return Copied(byte_count=total)

    def copy_or_false(self, source: SourceHandle, destination: DestinationPath) -> bool:
        """Copy and collapse the outcome into a success flag."""
        return self.copy(source, destination).ok

    def _transfer(self, stream: ByteStream, destination_path: Path) -> int:
        buffer_size = self._options.buffer_size
        total = 0
        with ExitStack() as stack:
            source = stack.enter_context(closing(stream))
            sink = stack.enter_context(destination_path.open("wb"))
            while True:
                chunk = source.read(buffer_size)
                # Zero-length or None reads mean exhaustion.
                if not chunk:
                    break
                sink.write(chunk)
                total += len(chunk)
        return total


def _ensure_parent_dirs(destination_path: Path) -> None:
    """Best-effort creation of the destination's directory chain."""
    try:
        destination_path.parent.mkdir(parents=True, exist_ok=True)
    except (OSError, ValueError) as exc:
        logger.warning(
            "Could not create parent directories for %s: %s", destination_path, exc
        )


def build_copy_options(*, buffer_size: int = DEFAULT_BUFFER_SIZE) -> CopyOptions:
    """Build typed option object from command/API params."""
    try:
        config = CopyOptionsConfig(buffer_size=buffer_size)
    except ValidationError as exc:
        raise ContentCopierError(f"Invalid copy options: {exc}") from exc
    return CopyOptions(buffer_size=config.buffer_size)


def copy_content(
    *,
    source: SourceHandle,
    destination: DestinationPath,
    resolver: ContentResolver,
    options: CopyOptions | None = None,
) -> CopyOutcome:
    """Use-case: copy a content handle into a local file."""
    return ContentCopier(resolver, options).copy(source, destination)
