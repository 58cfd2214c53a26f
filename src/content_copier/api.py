"""Public copy API (delegates to application use-cases)."""

from __future__ import annotations

import os
from collections.abc import Mapping

from content_copier.adapters.registry import create_default_registry
from content_copier.application.options import DEFAULT_BUFFER_SIZE
from content_copier.application.ports import ContentResolver
from content_copier.application.results import CopyOutcome
from content_copier.application.use_cases import build_copy_options, copy_content
from content_copier.types import DestinationPath, SourceHandle


def copy_content_uri(
    source_uri: SourceHandle,
    destination_path: DestinationPath,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
    resolver: ContentResolver | None = None,
    provider_roots: Mapping[str, str | os.PathLike[str]] | None = None,
) -> CopyOutcome:
    """Copy a content URI into a local file.

    When no resolver is given, the default registry is built from
    ``provider_roots``.
    """
    options = build_copy_options(buffer_size=buffer_size)
    return copy_content(
        source=source_uri,
        destination=destination_path,
        resolver=resolver or create_default_registry(provider_roots),
        options=options,
    )
