"""Orders endpoints.

Builders collect optional parameters with chained setters and hand them to
the client on `send()`. Unset parameters are left out of the request.

Example:
    ```python
    page = await (
        printavo.orders()
        .list()
        .page(2)
        .per_page(10)
        .sort_column("id")
        .direction(Direction.ASCENDING)
        .send()
    )

    payment = await printavo.orders().add_payment(1000, 100.0, "11/30/2022").book_category_id(3).send()
    ```
"""

from datetime import datetime
from typing import TYPE_CHECKING, Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

from printavo.models import Order, Payment
from printavo.page import Page
from printavo.params import Direction, serialize

if TYPE_CHECKING:
    from printavo.client import Printavo

PerPage = Annotated[int, Field(ge=0, le=255)]


class ListOrdersParams(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    page: NonNegativeInt | None = None
    per_page: PerPage | None = None
    sort_column: str | None = None
    direction: Direction | None = None
    in_production_after: datetime | None = None
    in_production_before: datetime | None = None


class SearchOrdersParams(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    page: NonNegativeInt | None = None
    per_page: PerPage | None = None
    query: str | None = None


class AddPaymentBook(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    amount: float
    formatted_transaction_date: str
    book_category_id: NonNegativeInt | None = None
    name: str | None = None
    user_generated: bool | None = None


class AddPaymentBody(BaseModel):
    book: AddPaymentBook


class OrdersHandler:
    """Handler for Printavo's orders API. Created with `Printavo.orders`."""

    def __init__(self, printavo: "Printavo"):
        self._printavo = printavo

    def route(self, *segments: str | int) -> str:
        path = "/".join(str(segment) for segment in segments)
        return f"api/{self._printavo.version.value}/orders" + (f"/{path}" if path else "")

    def list(self) -> "ListOrdersBuilder":
        return ListOrdersBuilder(self._printavo, self.route())

    def search(self) -> "SearchOrdersBuilder":
        return SearchOrdersBuilder(self._printavo, self.route("search"))

    def add_payment(self, id: int, amount: float, formatted_transaction_date: str) -> "AddPaymentToOrderBuilder":
        return AddPaymentToOrderBuilder(
            self._printavo, self.route(id, "add_payment"), amount, formatted_transaction_date
        )


class ListOrdersBuilder:
    """``GET api/<version>/orders``."""

    def __init__(self, printavo: "Printavo", route: str):
        self._printavo = printavo
        self._route = route
        self._params = ListOrdersParams()

    def page(self, page: int) -> "ListOrdersBuilder":
        self._params.page = page
        return self

    def per_page(self, per_page: int) -> "ListOrdersBuilder":
        self._params.per_page = per_page
        return self

    def sort_column(self, sort_column: str) -> "ListOrdersBuilder":
        self._params.sort_column = sort_column
        return self

    def direction(self, direction: Direction | str) -> "ListOrdersBuilder":
        self._params.direction = direction
        return self

    def in_production_after(self, in_production_after: datetime) -> "ListOrdersBuilder":
        self._params.in_production_after = in_production_after
        return self

    def in_production_before(self, in_production_before: datetime) -> "ListOrdersBuilder":
        self._params.in_production_before = in_production_before
        return self

    def to_params(self) -> dict[str, Any]:
        return serialize(self._params)

    async def send(self) -> Page[Order]:
        return await self._printavo.get(self._route, self._params, response_type=Page[Order])


class SearchOrdersBuilder:
    """``GET api/<version>/orders/search``."""

    def __init__(self, printavo: "Printavo", route: str):
        self._printavo = printavo
        self._route = route
        self._params = SearchOrdersParams()

    def page(self, page: int) -> "SearchOrdersBuilder":
        self._params.page = page
        return self

    def per_page(self, per_page: int) -> "SearchOrdersBuilder":
        self._params.per_page = per_page
        return self

    def query(self, query: str) -> "SearchOrdersBuilder":
        self._params.query = query
        return self

    def to_params(self) -> dict[str, Any]:
        return serialize(self._params)

    async def send(self) -> Page[Order]:
        return await self._printavo.get(self._route, self._params, response_type=Page[Order])


class AddPaymentToOrderBuilder:
    """``POST api/<version>/orders/<id>/add_payment``."""

    def __init__(self, printavo: "Printavo", route: str, amount: float, formatted_transaction_date: str):
        self._printavo = printavo
        self._route = route
        self._body = AddPaymentBody(
            book=AddPaymentBook(amount=amount, formatted_transaction_date=formatted_transaction_date)
        )

    def book_category_id(self, book_category_id: int) -> "AddPaymentToOrderBuilder":
        self._body.book.book_category_id = book_category_id
        return self

    def name(self, name: str) -> "AddPaymentToOrderBuilder":
        self._body.book.name = name
        return self

    def user_generated(self, user_generated: bool) -> "AddPaymentToOrderBuilder":
        self._body.book.user_generated = user_generated
        return self

    def to_body(self) -> dict[str, Any]:
        return serialize(self._body)

    async def send(self) -> Payment:
        return await self._printavo.post(self._route, self._body, response_type=Payment)
