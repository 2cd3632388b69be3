"""Filtros do backoffice (dispositivos HCE)."""

from __future__ import annotations

from pydantic import Field, StrictInt

from api.query_builders.base import Int64, QueryParams
from app.constants.banking import HceDeviceStatus


class ListHceDevicesParams(QueryParams):
    """Filtros de GET /backoffice/hce/devices."""

    account_id: Int64 | None = Field(None, alias="accountId")
    status: HceDeviceStatus | str | None = None
    page: StrictInt | None = None
    page_size: StrictInt | None = Field(None, alias="pageSize")
