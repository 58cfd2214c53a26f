"""Pydantic schemas for runtime validation of copy inputs."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CopyOptionsConfig(BaseModel):
    """Validated copy transfer options."""

    model_config = ConfigDict(extra="forbid")

    buffer_size: int = Field(default=1024, gt=0)


class CopyContentUriArguments(BaseModel):
    """Validated ``copyContentUri`` method-call arguments."""

    model_config = ConfigDict(extra="ignore", strict=True, populate_by_name=True)

    source_uri: str = Field(alias="sourceUri", min_length=1)
    destination_path: str = Field(alias="destinationPath", min_length=1)


class ProviderRootsConfig(BaseModel):
    """Validated mapping of content-provider authorities to root directories."""

    model_config = ConfigDict(extra="forbid")

    roots: dict[str, Path] = Field(default_factory=dict)

    @field_validator("roots")
    @classmethod
    def _validate_authorities(cls, value: dict[str, Path]) -> dict[str, Path]:
        cleaned: dict[str, Path] = {}
        for authority, root in value.items():
            key = authority.strip()
            if not key:
                raise ValueError("provider authority cannot be empty.")
            if "/" in key:
                raise ValueError(f"provider authority '{key}' cannot contain '/'.")
            cleaned[key] = root
        return cleaned
