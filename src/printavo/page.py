"""Pagination envelope for list-style endpoints.

Printavo wraps list responses as ``{"meta": {...}, "data": [...]}``. A `Page`
is exactly one of those responses; fetching the next page is up to the
caller (``.page(meta.next_page)`` on the same builder).

Example:
    ```python
    page = await client.orders().list().per_page(25).send()
    for order in page:
        print(order.id)
    if page.meta.has_next_page:
        page = await client.orders().list().per_page(25).page(page.meta.next_page).send()
    ```
"""

from collections.abc import Iterator
from typing import Annotated, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

T = TypeVar("T")


class PageMeta(BaseModel):
    """Pagination metadata exactly as reported by the server."""

    model_config = ConfigDict(frozen=True)

    page: NonNegativeInt
    per_page: Annotated[int, Field(ge=0, le=255)]
    total_count: NonNegativeInt
    total_pages: NonNegativeInt

    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages

    @property
    def next_page(self) -> int | None:
        return self.page + 1 if self.has_next_page else None


class Page(BaseModel, Generic[T]):
    """One page of results.

    Iterating yields items in server order and may be repeated; `meta` is
    unaffected by iteration. `into_items()` returns the
    caller's own copy of the item list.
    """

    model_config = ConfigDict(frozen=True)

    meta: PageMeta
    data: list[T]

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, index: int) -> T:
        return self.data[index]

    @property
    def items(self) -> tuple[T, ...]:
        """Read-only view of the items."""
        return tuple(self.data)

    def into_items(self) -> list[T]:
        """A mutable copy of the items, e.g. to extend with later pages."""
        return list(self.data)
