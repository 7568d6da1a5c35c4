"""Error taxonomy for the Printavo client."""

from printavo.errors.exceptions import (
    BadRequestError,
    ClientError,
    ConfigurationError,
    DecodeError,
    ForbiddenError,
    NotFoundError,
    PrintavoError,
    RateLimitError,
    ServerError,
    TransportError,
    UnauthorizedError,
    UnprocessableEntityError,
    UrlConstructionError,
)
from printavo.errors.handler import raise_for_status

__all__ = [
    "BadRequestError",
    "ClientError",
    "ConfigurationError",
    "DecodeError",
    "ForbiddenError",
    "NotFoundError",
    "PrintavoError",
    "RateLimitError",
    "ServerError",
    "TransportError",
    "UnauthorizedError",
    "UnprocessableEntityError",
    "UrlConstructionError",
    "raise_for_status",
]
