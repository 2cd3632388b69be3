"""Filtros de listagem de contas e de extrato."""

from __future__ import annotations

from pydantic import Field, StrictBool, StrictInt

from api.query_builders.base import QueryParams
from app.constants.banking import (
    AccountStatus,
    AccountType,
    OrderType,
    StatementEntryType,
)


class ListAccountsParams(QueryParams):
    """Filtros de GET /accounts."""

    status: AccountStatus | None = Field(None, description="Status da conta.")
    account_type: AccountType | None = Field(
        None,
        alias="accountType",
        description="Pessoa física (PERSONAL) ou jurídica (COMPANY).",
    )
    document: str | None = Field(None, description="CPF/CNPJ do titular, só dígitos.")
    name: str | None = Field(None, description="Nome (ou parte) do titular.")
    first: StrictInt | None = Field(None, description="Offset do primeiro registro.")
    max: StrictInt | None = Field(None, description="Quantidade máxima de registros.")


class StatementParams(QueryParams):
    """Filtros de GET /accounts/{id}/statement."""

    start_date: str | None = Field(
        None,
        alias="startDate",
        description="Data inicial (YYYY-MM-DD).",
    )
    end_date: str | None = Field(
        None,
        alias="endDate",
        description="Data final (YYYY-MM-DD).",
    )
    order_type: OrderType | str | None = Field(None, alias="orderType")
    is_pix: StrictBool | None = Field(
        None,
        alias="isPix",
        description="Restringe o extrato a movimentações PIX.",
    )
    entry_type: StatementEntryType | str | None = Field(
        None,
        alias="type",
        description="credit ou debit.",
    )
    first: StrictInt | None = None
    max: StrictInt | None = None
