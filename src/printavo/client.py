"""Printavo API client and request-execution engine.

Every call goes through `Printavo.execute`, which attaches the client's
credential and sends the request. An authenticated request answered with 401
is sent again, at most `MAX_RETRIES` times.

Example:
    ```python
    from printavo import Printavo

    async with Printavo.builder().token_auth("ops@example.com", token).build() as printavo:
        orders = await printavo.orders().list().per_page(10).send()
    ```
"""

import logging
import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, TypeVar

import httpx

from printavo.auth import Credential
from printavo.decoding import decode
from printavo.errors import ConfigurationError, TransportError, UrlConstructionError, raise_for_status
from printavo.orders import OrdersHandler
from printavo.params import ParamBag, serialize, to_query_pairs

logger = logging.getLogger(__name__)

T = TypeVar("T")

MAX_RETRIES = 3

PRINTAVO_BASE_URL = "https://www.printavo.com"
USER_AGENT = "printavo-python"
DEFAULT_TIMEOUT = 30.0

_HEADER_NAME = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")
_HEADER_VALUE = re.compile(r"^[\t\x20-\x7e]*$")

_REDACTED_PARAMS = frozenset(["token"])


class Version(str, Enum):
    """Printavo API version."""

    V1 = "v1"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RequestDescriptor:
    """One request, before any credential is attached.

    Descriptors are never mutated: `with_credential` returns a new one, so a
    retry always starts again from the unauthenticated original.
    """

    method: str
    url: httpx.URL
    params: tuple[tuple[str, str], ...] = ()
    json: Any = None

    def with_credential(self, credential: Credential) -> "RequestDescriptor":
        extra = tuple(credential.query_params())
        if not extra:
            return self
        return replace(self, params=self.params + extra)

    def __repr__(self) -> str:
        params = [(key, "***" if key in _REDACTED_PARAMS else value) for key, value in self.params]
        return f"RequestDescriptor(method={self.method!r}, url={str(self.url)!r}, params={params!r})"


@dataclass(frozen=True)
class ClientConfig:
    """Read-only settings shared by every request a client makes."""

    base_url: httpx.URL
    credential: Credential
    version: Version
    headers: tuple[tuple[str, str], ...]
    timeout: float | None


def parse_base_url(base_url: str | httpx.URL) -> httpx.URL:
    """Parse and check a base URL.

    Raises:
        UrlConstructionError: If the URL is malformed or not absolute http(s).
    """
    try:
        url = httpx.URL(base_url)
    except httpx.InvalidURL as exc:
        raise UrlConstructionError(f"Invalid base URL {str(base_url)!r}: {exc}", url=str(base_url)) from exc

    if url.scheme not in ("http", "https") or not url.host:
        raise UrlConstructionError(f"Base URL must be an absolute http(s) URL: {str(base_url)!r}", url=str(base_url))
    return url


class Printavo:
    """Async client for the Printavo API.

    Build one with `Printavo.builder()`. A client is safe to share between
    concurrent tasks; close it with `aclose()` or use it as an async context
    manager.
    """

    def __init__(self, config: ClientConfig, http: httpx.AsyncClient):
        self._config = config
        self._http = http

    @staticmethod
    def builder() -> "PrintavoBuilder":
        return PrintavoBuilder()

    @property
    def base_url(self) -> httpx.URL:
        return self._config.base_url

    @property
    def version(self) -> Version:
        return self._config.version

    @property
    def config(self) -> ClientConfig:
        return self._config

    def __repr__(self) -> str:
        return (
            f"Printavo(base_url={str(self._config.base_url)!r}, version={self._config.version.value!r}, "
            f"credential={self._config.credential!r})"
        )

    async def __aenter__(self) -> "Printavo":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    def orders(self) -> OrdersHandler:
        return OrdersHandler(self)

    def absolute_url(self, route: str) -> httpx.URL:
        """Resolve ``route`` against the base URL (RFC 3986 reference resolution).

        Raises:
            UrlConstructionError: If the result is not a valid URL.
        """
        try:
            return self._config.base_url.join(route)
        except httpx.InvalidURL as exc:
            raise UrlConstructionError(
                f"Cannot resolve route {route!r} against {str(self._config.base_url)!r}: {exc}", url=route
            ) from exc

    async def get(self, route: str, params: ParamBag | None = None, *, response_type: type[T] = Any) -> T:
        """Send a ``GET`` to ``route`` and decode the body into ``response_type``.

        Args:
            route: Path relative to the base URL, e.g. ``api/v1/orders``.
            params: Query parameters; None-valued fields are omitted.
            response_type: Any type pydantic can validate. Defaults to plain
                JSON data.

        Raises:
            UrlConstructionError: If the route cannot be resolved.
            TransportError: On network failure or a non-2xx response.
            DecodeError: If the body does not match ``response_type``.
        """
        descriptor = RequestDescriptor("GET", self.absolute_url(route), params=to_query_pairs(params))
        response = await self.execute(descriptor)
        return await decode(response, response_type)

    async def post(self, route: str, body: ParamBag | None = None, *, response_type: type[T] = Any) -> T:
        """Send a ``POST`` with a JSON body to ``route`` and decode the response.

        Raises the same exceptions as `get`.
        """
        descriptor = RequestDescriptor("POST", self.absolute_url(route), json=serialize(body))
        response = await self.execute(descriptor)
        return await decode(response, response_type)

    async def execute(self, descriptor: RequestDescriptor) -> httpx.Response:
        """Send ``descriptor`` with the client's credential attached.

        A 401 from an authenticated request is retried up to `MAX_RETRIES`
        times, re-attaching the credential to the original descriptor each
        time. Nothing else is retried.

        Returns:
            The 2xx response, with its body read.

        Raises:
            TransportError: On network failure, or the matching subclass for a
                non-2xx final response (e.g. `UnauthorizedError` once the
                retry budget is spent).
        """
        credential = self._config.credential
        retries = 0

        while True:
            attempt = descriptor.with_credential(credential)
            request = self._http.build_request(
                attempt.method,
                attempt.url,
                params=list(attempt.params),
                json=attempt.json,
            )

            logger.debug(f"Sending {descriptor.method} {descriptor.url} (attempt {retries + 1})")

            try:
                response = await self._http.send(request)
            except httpx.HTTPStatusError as exc:
                # Transport raised on status; classify it like any other response.
                response = exc.response
            except httpx.HTTPError as exc:
                raise TransportError(f"{descriptor.method} {descriptor.url} failed: {exc}") from exc

            if self._should_retry(response, credential, retries):
                retries += 1
                logger.warning(
                    f"Request {descriptor.method} {descriptor.url} failed with {response.status_code}, "
                    f"retrying (attempt {retries}/{MAX_RETRIES})"
                )
                continue

            await response.aread()
            raise_for_status(response)
            return response

    def _should_retry(self, response: httpx.Response, credential: Credential, current_retries: int) -> bool:
        if response.status_code != httpx.codes.UNAUTHORIZED:
            return False
        if not credential.is_authenticated:
            return False
        return current_retries < MAX_RETRIES


class PrintavoBuilder:
    """Collects client settings; `build()` produces an immutable `Printavo`."""

    def __init__(self) -> None:
        self._credential: Credential = Credential.none()
        self._extra_headers: list[tuple[str, str]] = []
        self._base_url: httpx.URL | None = None
        self._version = Version.V1
        self._timeout: float | None = DEFAULT_TIMEOUT
        self._transport: httpx.AsyncBaseTransport | None = None

    def token_auth(self, email: str, token: str) -> "PrintavoBuilder":
        """Authenticate with Printavo's long-lived tokens."""
        self._credential = Credential.token(email, token)
        return self

    def credential(self, credential: Credential) -> "PrintavoBuilder":
        """Use an existing credential, e.g. one from `CredentialResolver`.

        Raises:
            ConfigurationError: If ``credential`` is not a `Credential`.
        """
        if not isinstance(credential, Credential):
            raise ConfigurationError(f"Expected a Credential, got {type(credential).__name__}")
        self._credential = credential
        return self

    def base_url(self, base_url: str | httpx.URL) -> "PrintavoBuilder":
        """Override the base URL (default ``https://www.printavo.com``).

        Raises:
            UrlConstructionError: If the URL is not a valid absolute http(s) URL.
        """
        self._base_url = parse_base_url(base_url)
        return self

    def add_header(self, name: str, value: str) -> "PrintavoBuilder":
        """Add a header sent with every request. Checked in `build()`."""
        self._extra_headers.append((name, value))
        return self

    def version(self, version: Version) -> "PrintavoBuilder":
        self._version = version
        return self

    def timeout(self, seconds: float | None) -> "PrintavoBuilder":
        self._timeout = seconds
        return self

    def transport(self, transport: httpx.AsyncBaseTransport) -> "PrintavoBuilder":
        """Use a custom transport, e.g. ``httpx.MockTransport`` in tests."""
        self._transport = transport
        return self

    def build(self) -> Printavo:
        """Create the client.

        Raises:
            ConfigurationError: If a header name or value is invalid.
        """
        headers = [("User-Agent", USER_AGENT)]
        for name, value in self._extra_headers:
            if not _HEADER_NAME.match(name):
                raise ConfigurationError(f"Invalid header name: {name!r}")
            if not _HEADER_VALUE.match(value):
                raise ConfigurationError(f"Invalid value for header {name!r}")
            headers.append((name, value))

        config = ClientConfig(
            base_url=self._base_url or parse_base_url(PRINTAVO_BASE_URL),
            credential=self._credential,
            version=self._version,
            headers=tuple(headers),
            timeout=self._timeout,
        )
        http = httpx.AsyncClient(
            headers=list(config.headers),
            timeout=config.timeout,
            transport=self._transport,
        )
        logger.debug(f"Built Printavo client for {config.base_url} ({config.version.value})")
        return Printavo(config, http)
