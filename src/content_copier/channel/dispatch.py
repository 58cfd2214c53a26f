"""Method-channel dispatch for file utility calls."""

from __future__ import annotations

import logging
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from content_copier.application.options import CopyOptions
from content_copier.application.ports import ContentResolver
from content_copier.application.use_cases import ContentCopier
from content_copier.errors import ChannelArgumentError
from content_copier.schemas import CopyContentUriArguments

logger = logging.getLogger(__name__)

CHANNEL_NAME = "file_utils"
COPY_CONTENT_URI = "copyContentUri"
MISSING_ARGS = "MISSING_ARGS"
COPY_ERROR = "COPY_ERROR"


class MethodCall(BaseModel):
    """Incoming method call."""

    model_config = ConfigDict(extra="forbid")

    method: str
    arguments: dict[str, Any] = Field(default_factory=dict)


class ChannelError(BaseModel):
    """Structured error delivered on the failure channel."""

    model_config = ConfigDict(extra="forbid")

    code: str
    message: str
    details: None = None


class MethodResponse(BaseModel):
    """Reply to a method call: success, error or not implemented."""

    model_config = ConfigDict(extra="forbid")

    status: Literal["success", "error", "not_implemented"]
    result: bool | None = None
    error: ChannelError | None = None

    @classmethod
    def success(cls, result: bool) -> MethodResponse:
        return cls(status="success", result=result)

    @classmethod
    def failure(cls, code: str, message: str) -> MethodResponse:
        return cls(status="error", error=ChannelError(code=code, message=message))

    @classmethod
    def not_implemented(cls) -> MethodResponse:
        return cls(status="not_implemented")


def parse_copy_arguments(arguments: dict[str, Any]) -> CopyContentUriArguments:
    """Validate ``copyContentUri`` arguments.

    Raises
    ------
    ChannelArgumentError
        If ``sourceUri`` or ``destinationPath`` is absent, empty or not a string.
    """
    try:
        return CopyContentUriArguments.model_validate(arguments)
    except ValidationError as exc:
        raise ChannelArgumentError(
            "Missing sourceUri or destinationPath", code=MISSING_ARGS
        ) from exc


class FileUtilsChannel:
    """Dispatch file utility method calls to the content copier.

    Parameters
    ----------
    resolver : ContentResolver
        Capability used to open source handles.
    options : CopyOptions | None, default=None
        Transfer options forwarded to the copier.
    """

    def __init__(
        self,
        resolver: ContentResolver,
        options: CopyOptions | None = None,
    ) -> None:
        self._copier = ContentCopier(resolver, options)

    def handle(self, call: MethodCall) -> MethodResponse:
        """Handle one method call and produce exactly one response."""
        if call.method == COPY_CONTENT_URI:
            return self._copy_content_uri(call.arguments)
        logger.debug("Method not implemented: %s", call.method)
        return MethodResponse.not_implemented()

    def _copy_content_uri(self, arguments: dict[str, Any]) -> MethodResponse:
        try:
            args = parse_copy_arguments(arguments)
        except ChannelArgumentError as exc:
            logger.error("Missing required parameters for %s", COPY_CONTENT_URI)
            return MethodResponse.failure(exc.code, str(exc))

        try:
            copied = self._copier.copy_or_false(args.source_uri, args.destination_path)
        except Exception as exc:
            logger.error("Error copying content URI: %s", exc)
            return MethodResponse.failure(
                COPY_ERROR, f"Failed to copy content URI: {exc}"
            )
        return MethodResponse.success(copied)
