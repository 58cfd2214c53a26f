"""Exception hierarchy for content copying."""

from __future__ import annotations


class ContentCopierError(Exception):
    """Base error for content copier failures."""


class ResolutionError(ContentCopierError):
    """Raised when a content handle cannot be opened for reading."""


class ResolverConfigError(ContentCopierError):
    """Raised when resolver configuration is malformed."""


class ChannelArgumentError(ContentCopierError):
    """Raised when a method call is missing required arguments.

    Parameters
    ----------
    message : str
        Human-readable error message.
    code : str, default="MISSING_ARGS"
        Channel error code reported to the caller.
    """

    def __init__(self, message: str, code: str = "MISSING_ARGS") -> None:
        super().__init__(message)
        self.code = code
