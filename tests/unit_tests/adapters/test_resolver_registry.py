"""Unit tests for resolver registry and provider configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from content_copier.adapters.registry import (
    ResolverRegistry,
    create_default_registry,
    parse_provider_specs,
    provider_roots_from_env,
)
from content_copier.errors import ResolutionError, ResolverConfigError


class _Resolver:
    def __init__(self, name: str, prefix: str, payload: object) -> None:
        self.name = name
        self.prefix = prefix
        self.payload = payload
        self.calls: list[str] = []

    def can_handle(self, handle: str) -> bool:
        return handle.startswith(self.prefix)

    def open_input_stream(self, handle: str) -> object:
        self.calls.append(handle)
        return self.payload


def test_registry_uses_first_matching_resolver() -> None:
    """Dispatch to the earliest registered resolver that claims the handle."""
    registry = ResolverRegistry()
    first = _Resolver("first", "x:", "first-stream")
    second = _Resolver("second", "x:", "second-stream")
    registry.register(first)
    registry.register(second)

    assert registry.names() == ["first", "second"]
    assert registry.open_input_stream("x:1") == "first-stream"
    assert first.calls == ["x:1"]
    assert second.calls == []


def test_registry_returns_none_when_no_resolver_matches() -> None:
    """Report unavailability for unclaimed handles."""
    registry = ResolverRegistry()
    registry.register(_Resolver("only", "x:", "stream"))

    assert registry.open_input_stream("y:1") is None
    with pytest.raises(ResolutionError, match="No resolver found"):
        registry.get_resolver("y:1")


def test_registry_rejects_unnamed_resolver() -> None:
    """Require every resolver to carry a name."""
    with pytest.raises(ResolverConfigError, match="non-empty 'name'"):
        ResolverRegistry().register(_Resolver("  ", "x:", None))


def test_default_registry_order() -> None:
    """Check specific resolvers before the absolute-path fallback."""
    assert create_default_registry().names() == ["content", "data", "file"]


def test_default_registry_resolves_provider_roots(tmp_path: Path) -> None:
    """Wire provider roots into the content resolver."""
    (tmp_path / "a.txt").write_bytes(b"A")
    registry = create_default_registry({"auth": tmp_path})

    stream = registry.open_input_stream("content://auth/a.txt")
    assert stream is not None
    try:
        assert stream.read() == b"A"
    finally:
        stream.close()


def test_default_registry_rejects_bad_authority(tmp_path: Path) -> None:
    """Reject authorities containing path separators."""
    with pytest.raises(ResolverConfigError, match="Invalid provider roots"):
        create_default_registry({"bad/authority": tmp_path})


def test_parse_provider_specs() -> None:
    """Parse AUTHORITY=DIR entries and skip blanks."""
    parsed = parse_provider_specs(["a.b=/srv/a", " ", "c = /srv/c=d "])

    assert parsed == {"a.b": Path("/srv/a"), "c": Path("/srv/c=d")}


@pytest.mark.parametrize("entry", ["no-separator", "=/srv/a", "auth="])
def test_parse_provider_specs_rejects_malformed(entry: str) -> None:
    """Reject entries missing an authority or directory."""
    with pytest.raises(ResolverConfigError, match="AUTHORITY=DIR"):
        parse_provider_specs([entry])


def test_provider_roots_from_env() -> None:
    """Read comma-separated provider entries from the environment mapping."""
    env = {"CONTENT_COPIER_PROVIDERS": "one=/srv/1,two=/srv/2"}

    assert provider_roots_from_env(env) == {
        "one": Path("/srv/1"),
        "two": Path("/srv/2"),
    }
    assert provider_roots_from_env({}) == {}
