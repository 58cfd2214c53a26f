"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from typing import Protocol

from content_copier.types import ByteStream


class ContentResolver(Protocol):
    """Map an opaque content handle to a readable byte stream."""

    def open_input_stream(self, handle: str) -> ByteStream | None:
        """Open handle for reading, or return ``None`` when unavailable."""
