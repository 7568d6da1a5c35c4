"""Printavo resources returned by the orders endpoints.

Only the fields this client relies on are modelled; anything else in the
payload is ignored.
"""

from datetime import datetime

from pydantic import BaseModel


class Order(BaseModel):
    id: int
    order_total: float


class Payment(BaseModel):
    id: int
    order_id: int
    transaction_date: datetime
    name: str | None = None
    amount: float
    created_at: datetime
    updated_at: datetime
