"""Pytest configuration and shared fixtures for printavo tests."""

import os
from collections.abc import Callable

import httpx
import pytest

from printavo import Printavo

BASE_URL = "https://api.example.com"


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: clear Printavo environment variables before each test."""
    for key in list(os.environ.keys()):
        if key.startswith(("PRINTAVO_", "TEST_")):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def make_client() -> Callable[..., Printavo]:
    """Factory building a client whose requests go to an ``httpx.MockTransport``.

    Example:
        ```python
        client = make_client(handler, credential=Credential.token("a@b.c", "t"))
        ```
    """

    def factory(handler, credential=None, **builder_options) -> Printavo:
        builder = Printavo.builder().base_url(BASE_URL).transport(httpx.MockTransport(handler))
        if credential is not None:
            builder = builder.credential(credential)
        for name, value in builder_options.get("headers", {}).items():
            builder = builder.add_header(name, value)
        return builder.build()

    return factory


@pytest.fixture
def page_payload() -> Callable[..., dict]:
    """Factory for ``{meta, data}`` envelopes of orders."""

    def build(ids, *, page=1, per_page=10, total_count=None, total_pages=None) -> dict:
        return {
            "meta": {
                "page": page,
                "per_page": per_page,
                "total_count": total_count if total_count is not None else len(ids),
                "total_pages": total_pages if total_pages is not None else 1,
            },
            "data": [{"id": order_id, "order_total": float(order_id) * 10} for order_id in ids],
        }

    return build
