"""Top-level API for copying content URIs into local files."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import TYPE_CHECKING

from content_copier.application.options import DEFAULT_BUFFER_SIZE
from content_copier.types import DestinationPath, SourceHandle

if TYPE_CHECKING:
    from content_copier.application.ports import ContentResolver
    from content_copier.application.results import CopyOutcome

__version__ = "0.1.0"


def copy_content_uri(
    source_uri: SourceHandle,
    destination_path: DestinationPath,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
    resolver: ContentResolver | None = None,
    provider_roots: Mapping[str, str | os.PathLike[str]] | None = None,
) -> CopyOutcome:
    """Copy the bytes behind a content URI into a local file.

    Parameters
    ----------
    source_uri : str
        Opaque content handle (``content://``, ``data:``, ``file://`` or an
        absolute path with the default resolvers).
    destination_path : str | os.PathLike[str]
        Destination file. Missing parent directories are created and an
        existing file is overwritten.
    buffer_size : int, default=1024
        Size of the fixed transfer buffer in bytes.
    resolver : ContentResolver, optional
        Custom resolver capability. Defaults to the built-in registry.
    provider_roots : Mapping[str, PathLike], optional
        ``content://`` authorities mapped to root directories.

    Returns
    -------
    CopyOutcome
        ``Copied(byte_count)`` or ``Failed(reason, message)``.
    """
    from .api import copy_content_uri as _impl

    return _impl(
        source_uri=source_uri,
        destination_path=destination_path,
        buffer_size=buffer_size,
        resolver=resolver,
        provider_roots=provider_roots,
    )


__all__ = ["copy_content_uri"]
