"""Composição de paths de listagem da API bancária.

Cada função devolve o path relativo já com a query string dos filtros.
O envio HTTP fica a cargo do cliente que consome estes paths.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.query_builders.base import encode_query

if TYPE_CHECKING:
    from api.query_builders import (
        ListAccountsParams,
        ListAutomaticPixParams,
        ListBanksParams,
        ListCardsParams,
        ListDepositOrdersParams,
        ListHceDevicesParams,
        ListInfractionReportsParams,
        ListProposalsParams,
        ListRefundsParams,
        QueryParams,
        SearchCardsParams,
        StatementParams,
    )
    from config.settings import BankingApiSettings


def with_query(path: str, params: QueryParams | None) -> str:
    """Anexa a query string dos filtros ao path (nada se não houver filtros)."""
    return path + encode_query(params)


def build_request_url(path: str, settings: BankingApiSettings | None = None) -> str:
    """Junta a URL base configurada com o path relativo.

    Args:
        path: Path relativo (com ou sem barra inicial), já com query string
        settings: BankingApiSettings opcional. Se None, carrega do ambiente.

    Returns:
        URL absoluta com exatamente uma barra entre base e path
    """
    # Import local para evitar dependência circular
    from config.settings import get_banking_api_settings

    api = settings or get_banking_api_settings()
    return f"{api.api_base_url.rstrip('/')}/{path.lstrip('/')}"


def list_accounts_path(params: ListAccountsParams | None = None) -> str:
    return with_query("/accounts", params)


def account_statement_path(account_id: int, params: StatementParams | None = None) -> str:
    return with_query(f"/accounts/{account_id:d}/statement", params)


def list_cards_path(account_id: int, params: ListCardsParams | None = None) -> str:
    return with_query(f"/accounts/{account_id:d}/cards", params)


def search_cards_path(params: SearchCardsParams | None = None) -> str:
    return with_query("/cards", params)


def list_proposals_path(params: ListProposalsParams | None = None) -> str:
    return with_query("/proposal", params)


def list_legal_entity_proposals_path(params: ListProposalsParams | None = None) -> str:
    return with_query("/proposal/legalEntities", params)


def list_deposit_orders_path(
    account_id: int,
    params: ListDepositOrdersParams | None = None,
) -> str:
    return with_query(f"/accounts/{account_id:d}/deposits/order", params)


def list_banks_path(params: ListBanksParams | None = None) -> str:
    return with_query("/banks", params)


def list_infraction_reports_path(
    params: ListInfractionReportsParams | None = None,
) -> str:
    return with_query("/pix/infraction-reports", params)


def list_refunds_path(params: ListRefundsParams | None = None) -> str:
    return with_query("/pix/refunds", params)


def list_automatic_pix_charges_path(
    account_id: int,
    params: ListAutomaticPixParams | None = None,
) -> str:
    return with_query(f"/pix/automatic/charge/account/{account_id:d}", params)


def list_automatic_pix_path(
    account_id: int,
    params: ListAutomaticPixParams | None = None,
) -> str:
    return with_query(f"/pix/automatic/account/{account_id:d}", params)


def list_hce_devices_path(params: ListHceDevicesParams | None = None) -> str:
    return with_query("/backoffice/hce/devices", params)
