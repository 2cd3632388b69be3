"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ApiError,
    BankingClientError,
    BusinessApiError,
    FieldViolation,
    InsufficientFundsApiError,
    IntegrationApiError,
    NotFoundApiError,
    QueryParamsDefinitionError,
    ThirdPartyApiError,
    UnprocessableEntityApiError,
    ValidationApiError,
)

__all__ = [
    "ApiError",
    "BankingClientError",
    "BusinessApiError",
    "FieldViolation",
    "InsufficientFundsApiError",
    "IntegrationApiError",
    "NotFoundApiError",
    "QueryParamsDefinitionError",
    "ThirdPartyApiError",
    "UnprocessableEntityApiError",
    "ValidationApiError",
]
