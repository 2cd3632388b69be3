"""Exceções compartilhadas do cliente da API bancária."""

from __future__ import annotations

from dataclasses import dataclass

# Status tratados como transitórios (rate limit e falhas temporárias de servidor)
_RETRYABLE_STATUS = frozenset({429, 500, 502, 503, 504})


class BankingClientError(Exception):
    """Base para erros do cliente da API bancária."""


class QueryParamsDefinitionError(BankingClientError, TypeError):
    """Declaração inválida de conjunto de filtros (ex: wire name duplicado).

    Erro de programação: é levantado na definição da classe, nunca
    durante a codificação da query string.
    """


@dataclass(frozen=True)
class FieldViolation:
    """Violação de campo retornada pela API em respostas HTTP 400."""

    code: str
    field: str
    message: str


class ApiError(BankingClientError):
    """Erro retornado pela API bancária (envelope code/message)."""

    def __init__(
        self,
        message: str,
        status_code: int,
        code: str = "",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code

    @property
    def is_retryable(self) -> bool:
        """True para 429, 500, 502, 503 e 504."""
        return self.status_code in _RETRYABLE_STATUS

    def __str__(self) -> str:
        if self.code:
            return f"[{self.status_code}] [{self.code}] {self.message}"
        return f"[{self.status_code}] {self.message}"


class ValidationApiError(ApiError):
    """HTTP 400 com lista de violações de campo."""

    def __init__(
        self,
        violations: list[FieldViolation],
        status_code: int = 400,
    ) -> None:
        message = (
            f"validation failed: {violations[0].message}"
            if violations
            else "validation error"
        )
        code = violations[0].code if violations else ""
        super().__init__(message, status_code=status_code, code=code)
        self.violations = violations


class BusinessApiError(ApiError):
    """HTTP 409: violação de regra de negócio."""


class IntegrationApiError(ApiError):
    """HTTP 503: falha em serviço externo consultado pela API."""


class InsufficientFundsApiError(ApiError):
    """HTTP 402: saldo insuficiente, com valores exigido e disponível."""

    def __init__(
        self,
        message: str,
        status_code: int = 402,
        code: str = "",
        required: int = 0,
        available: int = 0,
    ) -> None:
        super().__init__(message, status_code=status_code, code=code)
        self.required = required
        self.available = available


class NotFoundApiError(ApiError):
    """HTTP 404: recurso não encontrado."""

    def __init__(
        self,
        message: str,
        status_code: int = 404,
        code: str = "",
        resource: str = "",
    ) -> None:
        super().__init__(message, status_code=status_code, code=code)
        self.resource = resource


class UnprocessableEntityApiError(ApiError):
    """HTTP 422: requisição bem formada, mas semanticamente inválida."""


class ThirdPartyApiError(ApiError):
    """HTTP 424: falha em serviço de terceiro (dependência)."""

    def __init__(
        self,
        message: str,
        status_code: int = 424,
        code: str = "",
        service: str = "",
    ) -> None:
        super().__init__(message, status_code=status_code, code=code)
        self.service = service
