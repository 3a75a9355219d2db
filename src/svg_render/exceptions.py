"""Errors raised while handling a render request.

Every error carries the fixed message that is sent to the client; the
underlying cause is only ever logged.
"""

from typing import Optional


class RenderServiceError(Exception):
    """Base class for errors that end a render request."""

    client_message = "Internal server error"

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail or self.client_message)
        self.detail = detail


class MalformedPayloadError(RenderServiceError):
    """The request body is not a valid render payload."""

    client_message = "Invalid request body"


class SourceFetchError(RenderServiceError):
    """The SVG source could not be retrieved."""

    client_message = "Error retrieving source"


class SourceRequestError(SourceFetchError):
    """The request to the source failed or the URL is unusable."""


class InvalidContentTypeError(SourceFetchError):
    """The source did not declare itself as SVG."""

    def __init__(self, content_type: Optional[str]):
        super().__init__(f"Invalid Content-Type: {content_type!r}")
        self.content_type = content_type


class ReadFailureError(SourceFetchError):
    """The source body could not be read."""
