"""HTTP transport for the file utility method channel."""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Mapping
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from content_copier.adapters.registry import (
    create_default_registry,
    provider_roots_from_env,
)
from content_copier.application.options import DEFAULT_BUFFER_SIZE
from content_copier.application.use_cases import build_copy_options
from content_copier.channel.dispatch import (
    CHANNEL_NAME,
    COPY_ERROR,
    MISSING_ARGS,
    FileUtilsChannel,
    MethodCall,
    MethodResponse,
)
from content_copier.errors import ContentCopierError

logger = logging.getLogger(__name__)

try:
    import fastapi
    from fastapi.responses import JSONResponse
except ModuleNotFoundError:  # pragma: no cover
    fastapi = None
    JSONResponse = None

try:
    import uvicorn
except ModuleNotFoundError:  # pragma: no cover
    uvicorn = None

if TYPE_CHECKING:
    from fastapi import FastAPI

_ERROR_STATUS = {
    MISSING_ARGS: 400,
    COPY_ERROR: 500,
}


def _require_http_runtime() -> None:
    """Ensure HTTP server runtime dependencies are available."""
    if fastapi is None or JSONResponse is None:
        raise RuntimeError(
            "fastapi is required to run copy-content-uri-http. "
            "Install with extra: .[server]"
        )


class HealthResponse(BaseModel):
    """Health response payload."""

    model_config = ConfigDict(extra="forbid")

    status: str


class ReadyResponse(BaseModel):
    """Readiness response payload."""

    model_config = ConfigDict(extra="forbid")

    status: str


def status_code_for(response: MethodResponse) -> int:
    """Map a channel response onto an HTTP status code."""
    if response.status == "success":
        return 200
    if response.status == "not_implemented":
        return 501
    if response.error is None:
        return 500
    return _ERROR_STATUS.get(response.error.code, 500)


def channel_from_env(environ: Mapping[str, str] | None = None) -> FileUtilsChannel:
    """Build channel from ``CONTENT_COPIER_*`` environment variables."""
    env = os.environ if environ is None else environ
    raw_buffer_size = env.get("CONTENT_COPIER_BUFFER_SIZE", str(DEFAULT_BUFFER_SIZE))
    try:
        buffer_size = int(raw_buffer_size)
    except ValueError as exc:
        raise ContentCopierError(
            f"CONTENT_COPIER_BUFFER_SIZE must be an integer, got: {raw_buffer_size!r}"
        ) from exc
    options = build_copy_options(buffer_size=buffer_size)
    registry = create_default_registry(provider_roots_from_env(env))
    return FileUtilsChannel(registry, options)


def create_app(channel: FileUtilsChannel | None = None) -> FastAPI:
    """Create file utility channel HTTP application."""
    _require_http_runtime()
    file_utils = channel or channel_from_env()
    app = fastapi.FastAPI(
        title="Content URI Copier",
        version="0.1.0",
        description="Copy content URIs into local files through a method channel.",
    )

    @app.get("/healthz", response_model=HealthResponse)
    async def healthz() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/readyz", response_model=ReadyResponse)
    async def readyz() -> ReadyResponse:
        return ReadyResponse(status="ready")

    # Sync handler so blocking copies run in the threadpool.
    @app.post(f"/v1/channels/{CHANNEL_NAME}", response_model=MethodResponse)
    def invoke(call: MethodCall) -> JSONResponse:
        """Dispatch a method call and return the channel response."""
        try:
            response = file_utils.handle(call)
        except Exception:  # pragma: no cover
            logger.exception("unexpected error during channel dispatch")
            response = MethodResponse.failure(COPY_ERROR, "internal server error")
        return JSONResponse(
            status_code=status_code_for(response),
            content=response.model_dump(),
        )

    return app


def main() -> None:
    """Run file utility channel HTTP entrypoint."""
    _require_http_runtime()
    if uvicorn is None:
        raise RuntimeError("uvicorn is required to run copy-content-uri-http")
    parser = argparse.ArgumentParser(description="Content URI copier HTTP server.")
    parser.add_argument(
        "--host",
        default=os.getenv("CONTENT_COPIER_HTTP_HOST", "0.0.0.0"),
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("CONTENT_COPIER_HTTP_PORT", "8091")),
    )
    args = parser.parse_args()
    uvicorn.run(
        "content_copier.channel.http_server:create_app",
        host=args.host,
        port=args.port,
        reload=False,
        factory=True,
    )


if __name__ == "__main__":
    main()
