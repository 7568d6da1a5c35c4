"""Structured exceptions for the Printavo client.

Three kinds of failure reach callers:

- `TransportError`: the request could not be completed, or the server
  answered with a non-2xx status. Retry candidates.
- `DecodeError`: the body is not valid JSON for the requested type. Carries
  the exact field path that failed.
- `UrlConstructionError`: the base URL or a route cannot form a valid URL.
  A configuration problem.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class PrintavoError(Exception):
    """Base exception for every error raised by this package."""


class TransportError(PrintavoError):
    """Network or HTTP-level failure.

    Attributes:
        status_code: HTTP status when the server answered, None for
            connection failures and timeouts.
        response: The final response, if there was one.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class ClientError(TransportError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized, after the authentication retry budget is spent."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class UnprocessableEntityError(ClientError):
    """422 Unprocessable Entity."""

    pass


class RateLimitError(ClientError):
    """429 Too Many Requests."""

    def __init__(self, message: str, retry_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(TransportError):
    """5xx server errors."""

    pass


class DecodeError(PrintavoError):
    """Response body could not be deserialized into the requested type.

    Attributes:
        path: Location of the first failure, e.g. ``data[0].id``. ``.`` is the
            document root.
        message: What went wrong at that location.
        body: The raw response text.
    """

    def __init__(self, path: str, message: str, body: str | None = None):
        super().__init__(f"JSON error in {path}: {message}")
        self.path = path
        self.message = message
        self.body = body


class UrlConstructionError(PrintavoError):
    """Base URL or route could not be joined into a valid absolute URL."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class ConfigurationError(PrintavoError):
    """Client could not be built from the supplied settings."""

    pass
