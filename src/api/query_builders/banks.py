"""Filtros de listagem de bancos (destinos de TED)."""

from __future__ import annotations

from pydantic import Field, StrictInt

from api.query_builders.base import QueryParams
from app.constants.banking import OrderType


class ListBanksParams(QueryParams):
    """Filtros de GET /banks."""

    order_type: OrderType | str | None = Field(None, alias="orderType")
    first: StrictInt | None = None
    max: StrictInt | None = None
