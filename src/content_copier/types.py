"""Shared type aliases and protocols for copier modules."""

from __future__ import annotations

import os
from typing import Protocol, runtime_checkable

type SourceHandle = str
type DestinationPath = str | os.PathLike[str]
type ProviderRoots = dict[str, str | os.PathLike[str]]


@runtime_checkable
class ByteStream(Protocol):
    """Readable, closeable binary stream returned by resolvers."""

    def read(self, size: int = -1, /) -> bytes | None:
        """Read up to ``size`` bytes."""
        ...

    def close(self) -> None:
        """Release the underlying resource."""
        ...
