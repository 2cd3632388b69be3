"""Enums de domínio usados nos filtros de listagem da API bancária.

Os literais são contratuais com a API e não devem ser alterados.
"""

from __future__ import annotations

from enum import StrEnum


class AccountStatus(StrEnum):
    """Status de uma conta."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    BLOCKED = "BLOCKED"
    SUSPENDED = "SUSPENDED"
    CLOSED = "CLOSED"
    PENDING = "PENDING"


class AccountType(StrEnum):
    """Tipo de conta."""

    PERSONAL = "PERSONAL"
    COMPANY = "COMPANY"


class CardStatus(StrEnum):
    """Status de um cartão."""

    ACTIVE = "ACTIVE"
    BLOCKED = "BLOCKED"
    CANCELED = "CANCELED"
    PENDING = "PENDING"
    EXPIRED = "EXPIRED"


class CardType(StrEnum):
    PHYSICAL = "PHYSICAL"
    VIRTUAL = "VIRTUAL"


class CardCategory(StrEnum):
    DEBIT = "DEBIT"
    CREDIT = "CREDIT"
    POSTPAID = "POSTPAID"


class ProposalStatus(StrEnum):
    """Status de uma proposta de abertura de conta."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    CANCELED = "CANCELED"


class InfractionReportStatus(StrEnum):
    """Status de um relato de infração (MED)."""

    OPEN = "OPEN"
    ACKNOWLEDGED = "ACKNOWLEDGED"
    CLOSED = "CLOSED"
    CANCELLED = "CANCELLED"


class ParticipantRole(StrEnum):
    """Papel do participante numa solicitação de devolução (MED)."""

    REQUESTING = "REQUESTING"
    CONTESTED = "CONTESTED"


class RefundStatus(StrEnum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"
    CANCELLED = "CANCELLED"


class RecurrenceStatus(StrEnum):
    """Status de recorrência do PIX Automático (códigos Bacen)."""

    PENDING = "PDNG"
    CONFIRMED = "CFDB"
    CANCELLED = "CCLD"


class HceDeviceStatus(StrEnum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    BLOCKED = "BLOCKED"


class OrderType(StrEnum):
    """Ordenação de listagens por data."""

    ASC = "ASC"
    DESC = "DESC"


class StatementEntryType(StrEnum):
    """Natureza do lançamento no extrato."""

    CREDIT = "credit"
    DEBIT = "debit"
