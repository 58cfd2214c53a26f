"""Application-layer use-cases and option objects."""

from __future__ import annotations

from content_copier.application.options import DEFAULT_BUFFER_SIZE, CopyOptions
from content_copier.application.ports import ContentResolver
from content_copier.application.results import (
    Copied,
    CopyOutcome,
    Failed,
    FailureReason,
)
from content_copier.types import DestinationPath, SourceHandle


def build_copy_options(*, buffer_size: int = DEFAULT_BUFFER_SIZE) -> CopyOptions:
    """Build typed copy options via lazy use-case import."""
    from content_copier.application.use_cases import build_copy_options as _impl

    return _impl(buffer_size=buffer_size)


def copy_content(
    *,
    source: SourceHandle,
    destination: DestinationPath,
    resolver: ContentResolver,
    options: CopyOptions | None = None,
) -> CopyOutcome:
    """Copy content handle into a local file via lazy use-case import."""
    from content_copier.application.use_cases import copy_content as _impl

    return _impl(
        source=source,
        destination=destination,
        resolver=resolver,
        options=options,
    )


__all__ = [
    "ContentResolver",
    "Copied",
    "CopyOptions",
    "CopyOutcome",
    "Failed",
    "FailureReason",
    "build_copy_options",
    "copy_content",
]
