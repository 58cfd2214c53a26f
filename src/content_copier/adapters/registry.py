"""Resolver registry and configuration helpers."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from pathlib import Path

from pydantic import ValidationError

from content_copier.adapters.resolvers import (
    ContentProviderResolver,
    DataUriResolver,
    FileResolver,
    HandleResolver,
)
from content_copier.errors import ResolutionError, ResolverConfigError
from content_copier.schemas import ProviderRootsConfig
from content_copier.types import ByteStream

logger = logging.getLogger(__name__)


class ResolverRegistry:
    """Ordered registry of handle resolvers; first match wins."""

    def __init__(self) -> None:
        self._resolvers: list[HandleResolver] = []

    def register(self, resolver: HandleResolver) -> None:
        """Append resolver to the lookup order.

        Parameters
        ----------
        resolver : HandleResolver
            Resolver instance to register.

        Raises
        ------
        ResolverConfigError
            If resolver does not provide a valid name.
        """
        name = getattr(resolver, "name", "").strip()
        if not name:
            raise ResolverConfigError("Resolver must define a non-empty 'name'.")
        self._resolvers.append(resolver)

    def names(self) -> list[str]:
        """Return registered resolver names in lookup order."""
        return [resolver.name for resolver in self._resolvers]

    def get_resolver(self, handle: str) -> HandleResolver:
        """Get first resolver that can handle ``handle``.

        Raises
        ------
        ResolutionError
            If no registered resolver understands the handle.
        """
        for resolver in self._resolvers:
            if resolver.can_handle(handle):
                return resolver
        raise ResolutionError(
            f"No resolver found for handle: {handle}. "
            f"Registered resolvers: {', '.join(self.names())}"
        )

    def open_input_stream(self, handle: str) -> ByteStream | None:
        """Open handle through the matching resolver, or ``None``."""
        try:
            resolver = self.get_resolver(handle)
        except ResolutionError as exc:
            logger.debug("%s", exc)
            return None
        return resolver.open_input_stream(handle)


def parse_provider_specs(specs: Iterable[str]) -> dict[str, Path]:
    """Parse ``AUTHORITY=DIR`` entries into a provider root mapping.

    Raises
    ------
    ResolverConfigError
        If an entry is malformed.
    """
    parsed: dict[str, Path] = {}
    for item in specs:
        entry = item.strip()
        if not entry:
            continue
        if "=" not in entry:
            raise ResolverConfigError(
                f"Invalid provider entry '{entry}'. Use AUTHORITY=DIR format."
            )
        authority, root = entry.split("=", 1)
        authority = authority.strip()
        root = root.strip()
        if not authority or not root:
            raise ResolverConfigError(
                f"Invalid provider entry '{entry}'. Use AUTHORITY=DIR format."
            )
        parsed[authority] = Path(root)
    return parsed


def provider_roots_from_env(
    environ: Mapping[str, str] | None = None,
) -> dict[str, Path]:
    """Read ``CONTENT_COPIER_PROVIDERS`` as comma-separated provider entries."""
    env = os.environ if environ is None else environ
    raw = env.get("CONTENT_COPIER_PROVIDERS", "")
    return parse_provider_specs(raw.split(","))


def create_default_registry(
    provider_roots: Mapping[str, str | os.PathLike[str]] | None = None,
) -> ResolverRegistry:
    """Create default resolver registry.

    Parameters
    ----------
    provider_roots : Mapping[str, str | os.PathLike[str]] | None, optional
        Content-provider authorities mapped to their root directories.

    Returns
    -------
    ResolverRegistry
        Registry with content-provider, data URI and file resolvers.
    """
    try:
        config = ProviderRootsConfig(roots=dict(provider_roots or {}))
    except ValidationError as exc:
        raise ResolverConfigError(f"Invalid provider roots: {exc}") from exc

    registry = ResolverRegistry()
    registry.register(ContentProviderResolver(config.roots))
    registry.register(DataUriResolver())
    registry.register(FileResolver())
    return registry
