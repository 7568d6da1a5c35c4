"""Async typed client for the Printavo order-management API.

- Token authentication attached as ``email``/``token`` query parameters
- Bounded retry when the server rejects a token with 401
- Typed decoding with the exact path of any field that fails to parse
- `Page` envelope for list endpoints

Example:
    ```python
    from printavo import Direction, Printavo
    from printavo.auth import CredentialResolver

    credential = CredentialResolver().resolve_token_auth(required=True)

    async with Printavo.builder().credential(credential).build() as printavo:
        page = await printavo.orders().list().per_page(10).direction(Direction.ASCENDING).send()
        print(page.meta)
        for order in page:
            print(order.id, order.order_total)
    ```
"""

from printavo.auth import Credential, CredentialResolver
from printavo.client import MAX_RETRIES, ClientConfig, Printavo, PrintavoBuilder, RequestDescriptor, Version
from printavo.decoding import decode, decode_json
from printavo.errors import (
    ConfigurationError,
    DecodeError,
    PrintavoError,
    TransportError,
    UnauthorizedError,
    UrlConstructionError,
)
from printavo.models import Order, Payment
from printavo.page import Page, PageMeta
from printavo.params import Direction

__version__ = "0.1.0"

__all__ = [
    "MAX_RETRIES",
    "ClientConfig",
    "ConfigurationError",
    "Credential",
    "CredentialResolver",
    "DecodeError",
    "Direction",
    "Order",
    "Page",
    "PageMeta",
    "Payment",
    "Printavo",
    "PrintavoBuilder",
    "PrintavoError",
    "RequestDescriptor",
    "TransportError",
    "UnauthorizedError",
    "UrlConstructionError",
    "Version",
    "__version__",
    "decode",
    "decode_json",
]
