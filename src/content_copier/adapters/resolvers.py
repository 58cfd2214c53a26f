"""Concrete content resolvers for supported handle schemes."""

from __future__ import annotations

import base64
import binascii
import io
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol, runtime_checkable
from urllib.parse import unquote, unquote_to_bytes, urlparse
from urllib.request import url2pathname

from content_copier.errors import ResolutionError
from content_copier.types import ByteStream

logger = logging.getLogger(__name__)


@runtime_checkable
class HandleResolver(Protocol):
    """Resolver that handles one family of content handles."""

    name: str

    def can_handle(self, handle: str) -> bool:
        """Check whether this resolver understands ``handle``."""

    def open_input_stream(self, handle: str) -> ByteStream | None:
        """Open ``handle`` for reading, or return ``None`` when unavailable."""


def _open_local_file(path: Path, handle: str) -> ByteStream | None:
    if not path.is_file():
        logger.debug("No readable file behind handle %s", handle)
        return None
    try:
        return path.open("rb")
    except OSError as exc:
        logger.debug("Unable to open %s: %s", handle, exc)
        return None


class FileResolver:
    """Resolve ``file://`` URIs and absolute local paths.

    Registered last in the default registry since it matches every absolute
    path.
    """

    name = "file"

    def can_handle(self, handle: str) -> bool:
        if handle.startswith("file:"):
            return True
        return Path(handle).is_absolute()

    def open_input_stream(self, handle: str) -> ByteStream | None:
        try:
            path = self._to_path(handle)
        except ResolutionError as exc:
            logger.debug("Unable to resolve %s: %s", handle, exc)
            return None
        return _open_local_file(path, handle)

    @staticmethod
    def _to_path(handle: str) -> Path:
        if not handle.startswith("file:"):
            return Path(handle)
        parsed = urlparse(handle)
        if parsed.netloc and parsed.netloc != "localhost":
            raise ResolutionError(f"remote file host is not supported: {parsed.netloc}")
        return Path(url2pathname(parsed.path))


class DataUriResolver:
    """Resolve RFC 2397 ``data:`` URIs.

    Supports both ``data:<mediatype>;base64,<payload>`` and percent-encoded
    ``data:<mediatype>,<payload>`` forms.
    """

    name = "data"

    def can_handle(self, handle: str) -> bool:
        return handle.startswith("data:")

    def open_input_stream(self, handle: str) -> ByteStream | None:
        try:
            payload = self.decode(handle)
        except ResolutionError as exc:
            logger.debug("Invalid data URI: %s", exc)
            return None
        return io.BytesIO(payload)

    @staticmethod
    def decode(handle: str) -> bytes:
        """Decode a data URI into its payload bytes.

        Raises
        ------
        ResolutionError
            If the URI is malformed or its base64 payload is invalid.
        """
        if not handle.startswith("data:"):
            raise ResolutionError(f"must start with 'data:', got: {handle[:50]}")
        header, sep, data = handle[len("data:") :].partition(",")
        if not sep:
            raise ResolutionError("data URI is missing the ',' separator")
        if header.lower().endswith(";base64"):
            try:
                return base64.b64decode(unquote(data), validate=True)
            except (binascii.Error, ValueError) as exc:
                raise ResolutionError(f"invalid base64 payload: {exc}") from exc
        return unquote_to_bytes(data)


class ContentProviderResolver:
    """Resolve ``content://<authority>/<path>`` handles.

    Each authority maps to a root directory holding another application's
    shared files. Handles that name an unknown authority or escape their root
    resolve to nothing.

    Parameters
    ----------
    roots : Mapping[str, str | os.PathLike[str]]
        Authority to root directory mapping.
    """

    name = "content"

    def __init__(self, roots: Mapping[str, str | os.PathLike[str]] | None = None) -> None:
        self._roots = {authority: Path(root) for authority, root in (roots or {}).items()}

    @property
    def authorities(self) -> list[str]:
        return sorted(self._roots)

    def can_handle(self, handle: str) -> bool:
        return handle.startswith("content://")

    def open_input_stream(self, handle: str) -> ByteStream | None:
        try:
            path = self.resolve_path(handle)
        except ResolutionError as exc:
            logger.debug("Unable to resolve %s: %s", handle, exc)
            return None
        return _open_local_file(path, handle)

    def resolve_path(self, handle: str) -> Path:
        """Map a content handle to the file it names.

        Raises
        ------
        ResolutionError
            If the authority is unknown or the path escapes its root.
        """
        parsed = urlparse(handle)
        if parsed.scheme != "content":
            raise ResolutionError(f"not a content handle: {handle}")
        root = self._roots.get(parsed.netloc)
        if root is None:
            raise ResolutionError(f"unknown content authority: {parsed.netloc!r}")
        relative = unquote(parsed.path).lstrip("/")
        if not relative:
            raise ResolutionError("content handle has no path")
        resolved_root = root.resolve()
        candidate = (resolved_root / relative).resolve()
        if not candidate.is_relative_to(resolved_root):
            raise ResolutionError(f"content handle escapes provider root: {handle}")
        return candidate
