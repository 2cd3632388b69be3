"""Filtros de listagem e busca de cartões."""

from __future__ import annotations

from pydantic import Field, StrictInt

from api.query_builders.base import Int64, QueryParams
from app.constants.banking import CardCategory, CardStatus, CardType


class ListCardsParams(QueryParams):
    """Filtros de GET /accounts/{id}/cards."""

    status: CardStatus | None = None
    card_type: CardType | None = Field(None, alias="cardType")
    first: StrictInt | None = None
    max: StrictInt | None = None


class SearchCardsParams(QueryParams):
    """Filtros de GET /cards (busca em todas as contas)."""

    status: CardStatus | None = None
    card_type: CardType | None = Field(None, alias="cardType")
    card_category: CardCategory | None = Field(None, alias="cardCategory")
    account_id: Int64 | None = Field(
        None,
        alias="accountId",
        description="Restringe a busca aos cartões de uma conta.",
    )
    first: StrictInt | None = None
    max: StrictInt | None = None
