"""Filtros do MED (Mecanismo Especial de Devolução do PIX).

Relatos de infração e solicitações de devolução compartilham a mesma
janela de modificação (modifiedAfter/modifiedBefore, ISO 8601) e o
mesmo limite de página (padrão 20 no servidor).
"""

from __future__ import annotations

from pydantic import Field, StrictBool, StrictInt

from api.query_builders.base import QueryParams
from app.constants.banking import (
    InfractionReportStatus,
    ParticipantRole,
    RefundStatus,
)


class ListInfractionReportsParams(QueryParams):
    """Filtros de GET /pix/infraction-reports."""

    include_indirect_participants: StrictBool | None = Field(
        None,
        alias="includeIndirectParticipants",
    )
    is_reporter: StrictBool | None = Field(None, alias="isReporter")
    is_counterparty: StrictBool | None = Field(None, alias="isCounterparty")
    status: InfractionReportStatus | None = None
    include_details: StrictBool | None = Field(None, alias="includeDetails")
    modified_after: str | None = Field(None, alias="modifiedAfter")
    modified_before: str | None = Field(None, alias="modifiedBefore")
    limit: StrictInt | None = None


class ListRefundsParams(QueryParams):
    """Filtros de GET /pix/refunds.

    A API exige participantRole, mas a obrigatoriedade é validada pelo
    servidor; aqui o campo segue opcional como os demais.
    """

    include_indirect_participants: StrictBool | None = Field(
        None,
        alias="includeIndirectParticipants",
    )
    participant_role: ParticipantRole | None = Field(None, alias="participantRole")
    status: RefundStatus | str | None = None
    include_details: StrictBool | None = Field(None, alias="includeDetails")
    modified_after: str | None = Field(None, alias="modifiedAfter")
    modified_before: str | None = Field(None, alias="modifiedBefore")
    limit: StrictInt | None = None
