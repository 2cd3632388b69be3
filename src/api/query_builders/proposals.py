"""Filtros de listagem de propostas."""

from __future__ import annotations

from pydantic import Field, StrictInt

from api.query_builders.base import QueryParams
from app.constants.banking import ProposalStatus


class ListProposalsParams(QueryParams):
    """Filtros de GET /proposal e GET /proposal/legalEntities."""

    status: ProposalStatus | str | None = Field(
        None,
        description="Status da proposta; aceita valores fora do enum.",
    )
    document: str | None = None
    first: StrictInt | None = None
    max: StrictInt | None = None
