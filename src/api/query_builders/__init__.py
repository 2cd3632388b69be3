"""Query builders — filtros opcionais de listagem da API bancária.

Um único codificador genérico (base.encode_query) e um módulo por
família de endpoints com a declaração dos seus filtros:
- accounts: contas e extrato
- cards: listagem e busca de cartões
- proposals: propostas (PF e PJ)
- deposits: ordens de depósito
- banks: bancos para TED
- med: relatos de infração e devoluções PIX
- pix_automatic: recorrências do PIX Automático
- backoffice: dispositivos HCE
"""

from api.query_builders.accounts import ListAccountsParams, StatementParams
from api.query_builders.backoffice import ListHceDevicesParams
from api.query_builders.banks import ListBanksParams
from api.query_builders.base import (
    Int64,
    QueryParams,
    encode_query,
    format_query_value,
)
from api.query_builders.cards import ListCardsParams, SearchCardsParams
from api.query_builders.deposits import ListDepositOrdersParams
from api.query_builders.med import ListInfractionReportsParams, ListRefundsParams
from api.query_builders.pix_automatic import ListAutomaticPixParams
from api.query_builders.proposals import ListProposalsParams

__all__ = [
    "Int64",
    "ListAccountsParams",
    "ListAutomaticPixParams",
    "ListBanksParams",
    "ListCardsParams",
    "ListDepositOrdersParams",
    "ListHceDevicesParams",
    "ListInfractionReportsParams",
    "ListProposalsParams",
    "ListRefundsParams",
    "QueryParams",
    "SearchCardsParams",
    "StatementParams",
    "encode_query",
    "format_query_value",
]
