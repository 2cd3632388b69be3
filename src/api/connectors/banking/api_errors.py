"""Parsing do envelope de erro da API bancária.

Formatos conhecidos:
- 400: lista de {code, field, message} ou objeto {code, message}
- 402: {code, message, required, available} (saldo insuficiente)
- 404: {message, resource}
- 409: {code, message} (regra de negócio)
- 422: {code, message}
- 424: {code, message, service} (serviço de terceiro)
- 503: {message} (falha de integração, com ou sem code)
- demais: {code?, message}
"""

from __future__ import annotations

from typing import Any

from utils.errors import (
    ApiError,
    BusinessApiError,
    FieldViolation,
    InsufficientFundsApiError,
    IntegrationApiError,
    NotFoundApiError,
    ThirdPartyApiError,
    UnprocessableEntityApiError,
    ValidationApiError,
)

# Códigos de erro conhecidos
ERR_ACCOUNT_NOT_FOUND = "account.not.found"
ERR_ACCOUNT_NOT_ACTIVE = "account.not.active"
ERR_PROPOSAL_ALREADY_EXISTS = "already.exists.proposal"
ERR_INSUFFICIENT_FUNDS = "insufficient.funds"
ERR_TRANSACTION_CODE_NOT_FOUND = "transaction.code.not.found"
ERR_SCHEDULING_INVALID_DATE = "scheduling.not.in.valid.date"
ERR_PIX_LIMIT_EXCEED = "limit.pix.exceed"
ERR_DUPLICATED_END_TO_END = "duplicated.end.to.end"
ERR_PIX_KEY_ALREADY_REGISTERED = "pix.key.already.registered"
ERR_PIX_DEVICE_NOT_FOUND = "pix.device.not.found"
ERR_FRAUD_DETECTED = "fraud.detected"
ERR_QRCODE_INVALID_FORMAT = "qrcode.invalid.format"
ERR_QRCODE_EXPIRED = "qr.code.expired"
ERR_EMAIL_INVALID = "email.invalid"
ERR_CELLPHONE_INVALID = "cellphone.invalid"
ERR_DOCUMENT_INVALID = "document.invalid"
ERR_INVALID_FIELD = "invalid.field"
ERR_INTEGRATION_ERROR = "integration.error"
ERR_UNKNOWN_ERROR = "unknow.error"  # grafia da própria API

_DEFAULT_MESSAGE = "Erro desconhecido"


def _parse_violations(body: list[Any]) -> list[FieldViolation]:
    return [
        FieldViolation(
            code=str(item.get("code", "")),
            field=str(item.get("field", "")),
            message=str(item.get("message", "")),
        )
        for item in body
        if isinstance(item, dict)
    ]


def _as_int(value: Any) -> int:
    # bool é subclasse de int, mas não é um valor monetário
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return 0


def parse_api_error(status_code: int, body: Any) -> ApiError | None:
    """Classifica o corpo (JSON já decodificado) de uma resposta de erro.

    Args:
        status_code: Status HTTP da resposta
        body: Corpo decodificado (dict, list ou None)

    Returns:
        ApiError (ou subclasse) para status >= 400, None caso contrário
    """
    if status_code < 400:
        return None

    if status_code == 400 and isinstance(body, list):
        violations = _parse_violations(body)
        if violations:
            return ValidationApiError(violations, status_code=status_code)

    data = body if isinstance(body, dict) else {}
    code = str(data.get("code") or "")
    message = str(data.get("message") or _DEFAULT_MESSAGE)

    if status_code == 402:
        return InsufficientFundsApiError(
            message,
            status_code=status_code,
            code=code,
            required=_as_int(data.get("required")),
            available=_as_int(data.get("available")),
        )
    if status_code == 404:
        return NotFoundApiError(
            message,
            status_code=status_code,
            code=code,
            resource=str(data.get("resource") or ""),
        )
    if status_code == 409:
        return BusinessApiError(message, status_code=status_code, code=code)
    if status_code == 422:
        return UnprocessableEntityApiError(message, status_code=status_code, code=code)
    if status_code == 424:
        return ThirdPartyApiError(
            message,
            status_code=status_code,
            code=code,
            service=str(data.get("service") or ""),
        )
    if status_code == 503:
        return IntegrationApiError(message, status_code=status_code, code=code)
    return ApiError(message, status_code=status_code, code=code)
