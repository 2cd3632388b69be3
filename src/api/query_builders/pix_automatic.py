"""Filtros de listagem de PIX Automático (recorrências e cobranças)."""

from __future__ import annotations

from pydantic import Field, StrictBool, StrictInt

from api.query_builders.base import QueryParams
from app.constants.banking import RecurrenceStatus


class ListAutomaticPixParams(QueryParams):
    """Filtros de GET /pix/automatic/account/{id} e .../charge/account/{id}."""

    inactive: StrictBool | None = Field(None, description="Inclui recorrências inativas.")
    recurrence_id: str | None = Field(None, alias="recurrenceId")
    page: StrictInt | None = None
    size: StrictInt | None = None
    recurrence_status: RecurrenceStatus | None = Field(None, alias="recurrenceStatus")
    is_payer: StrictBool | None = Field(
        None,
        alias="isPayer",
        description="True para a visão do pagador, False para a do recebedor.",
    )
