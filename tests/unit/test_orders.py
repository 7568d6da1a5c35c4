"""Tests for the orders endpoint builders."""

import json
from datetime import UTC, datetime

import httpx
import pydantic
import pytest

from printavo import Credential, DecodeError, Direction, Order, Page, Payment

PAYMENT = {
    "id": 77,
    "order_id": 1000,
    "transaction_date": "2022-11-30T00:00:00.000Z",
    "name": "Deposit",
    "amount": 100.0,
    "created_at": "2022-11-30T12:00:00.000Z",
    "updated_at": "2022-11-30T12:00:00.000Z",
}


class TestListOrders:
    @pytest.mark.unit
    def test_no_fields_set_serializes_to_empty_bag(self, make_client):
        client = make_client(lambda request: httpx.Response(200))

        assert client.orders().list().to_params() == {}

    @pytest.mark.unit
    async def test_no_fields_set_sends_no_query(self, make_client, page_payload):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=page_payload([1]))

        client = make_client(handler)
        await client.orders().list().send()

        assert seen[0].url.query == b""
        assert seen[0].url.path == "/api/v1/orders"

    @pytest.mark.unit
    async def test_list_sends_all_parameters(self, make_client, page_payload):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=page_payload(list(range(11, 21)), page=2, total_count=25, total_pages=3))

        client = make_client(handler, credential=Credential.token("ops@example.com", "tok"))
        page = await (
            client.orders()
            .list()
            .page(2)
            .per_page(10)
            .sort_column("id")
            .direction(Direction.ASCENDING)
            .in_production_after(datetime(2022, 11, 1, tzinfo=UTC))
            .in_production_before(datetime(2022, 11, 30, tzinfo=UTC))
            .send()
        )

        params = seen[0].url.params
        assert params["page"] == "2"
        assert params["per_page"] == "10"
        assert params["sort_column"] == "id"
        assert params["direction"] == "asc"
        assert params["in_production_after"].startswith("2022-11-01T00:00:00")
        assert params["in_production_before"].startswith("2022-11-30T00:00:00")
        assert params["email"] == "ops@example.com"
        assert isinstance(page, Page)
        assert [order.id for order in page] == list(range(11, 21))
        assert page.meta.total_pages == 3

    @pytest.mark.unit
    def test_per_page_out_of_range_is_rejected(self, make_client):
        client = make_client(lambda request: httpx.Response(200))

        with pytest.raises(pydantic.ValidationError):
            client.orders().list().per_page(300)

    @pytest.mark.unit
    async def test_bad_item_surfaces_decode_error(self, make_client):
        body = {
            "meta": {"page": 1, "per_page": 10, "total_count": 1, "total_pages": 1},
            "data": [{"id": "not-a-number", "order_total": 1.0}],
        }
        client = make_client(lambda request: httpx.Response(200, json=body))

        with pytest.raises(DecodeError) as exc_info:
            await client.orders().list().send()

        assert exc_info.value.path == "data[0].id"


class TestSearchOrders:
    @pytest.mark.unit
    async def test_search_route_and_params(self, make_client, page_payload):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=page_payload([15046]))

        client = make_client(handler)
        page = await client.orders().search().page(1).per_page(10).query("15046").send()

        assert seen[0].url.path == "/api/v1/orders/search"
        assert dict(seen[0].url.params) == {"page": "1", "per_page": "10", "query": "15046"}
        assert page[0] == Order(id=15046, order_total=150460.0)

    @pytest.mark.unit
    def test_unset_fields_are_omitted(self, make_client):
        client = make_client(lambda request: httpx.Response(200))

        assert client.orders().search().query("abc").to_params() == {"query": "abc"}


class TestAddPayment:
    @pytest.mark.unit
    async def test_posts_book_body(self, make_client):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=PAYMENT)

        client = make_client(handler, credential=Credential.token("ops@example.com", "tok"))
        payment = await client.orders().add_payment(1000, 100.0, "11/30/2022").book_category_id(3).send()

        request = seen[0]
        assert request.method == "POST"
        assert request.url.path == "/api/v1/orders/1000/add_payment"
        assert request.url.params["token"] == "tok"
        assert json.loads(request.content) == {
            "book": {"amount": 100.0, "formatted_transaction_date": "11/30/2022", "book_category_id": 3}
        }
        assert isinstance(payment, Payment)
        assert payment.id == 77

    @pytest.mark.unit
    def test_optional_fields(self, make_client):
        client = make_client(lambda request: httpx.Response(200))
        builder = client.orders().add_payment(1, 5.0, "01/02/2023").name("Card").user_generated(False)

        assert builder.to_body() == {
            "book": {
                "amount": 5.0,
                "formatted_transaction_date": "01/02/2023",
                "name": "Card",
                "user_generated": False,
            }
        }
