"""Filtros de listagem de ordens de depósito."""

from __future__ import annotations

from pydantic import Field, StrictInt

from api.query_builders.base import QueryParams
from app.constants.banking import OrderType


class ListDepositOrdersParams(QueryParams):
    """Filtros de GET /accounts/{id}/deposits/order."""

    start_date: str | None = Field(None, alias="startDate")
    end_date: str | None = Field(None, alias="endDate")
    order_type: OrderType | str | None = Field(None, alias="orderType")
    first: StrictInt | None = None
    max: StrictInt | None = None
