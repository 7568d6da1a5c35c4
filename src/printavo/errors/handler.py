"""Map HTTP responses to the exception hierarchy."""

import httpx

from printavo.errors.exceptions import (
    BadRequestError,
    ClientError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TransportError,
    UnauthorizedError,
    UnprocessableEntityError,
)

EXCEPTION_MAP: dict[int, type[TransportError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    422: UnprocessableEntityError,
    429: RateLimitError,
}


def exception_class_for(status_code: int) -> type[TransportError]:
    """Pick the `TransportError` subclass for a status code."""
    if status_code in EXCEPTION_MAP:
        return EXCEPTION_MAP[status_code]
    if 400 <= status_code < 500:
        return ClientError
    if 500 <= status_code < 600:
        return ServerError
    return TransportError


def raise_for_status(response: httpx.Response) -> None:
    """Raise the matching `TransportError` for a non-2xx response.

    Args:
        response: A response whose body has already been read.

    Raises:
        TransportError subclass based on status code.
    """
    if response.is_success:
        return

    status_code = response.status_code
    exc_class = exception_class_for(status_code)

    response_text = response.text[:200]
    message = f"HTTP {status_code}: {response_text}" if response_text else f"HTTP {status_code}"

    if exc_class is RateLimitError:
        retry_after = None
        if "retry-after" in response.headers:
            try:
                retry_after = int(response.headers["retry-after"])
            except ValueError:
                retry_after = None
        raise RateLimitError(message, retry_after=retry_after, status_code=status_code, response=response)

    raise exc_class(message, status_code=status_code, response=response)
