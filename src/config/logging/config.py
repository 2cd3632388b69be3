"""Configuração centralizada de logging.

Logs JSON estruturados com campos obrigatórios (correlation_id, service,
level, logger, message) e nível configurável por ambiente.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="banking-query")

    logger = get_logger(__name__)
    logger.debug("query_string_encoded", extra={"field_count": 3})

Nunca registrar valores de filtros (documento, nome): são PII.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

    from config.settings import BaseSettings

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "banking-query"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função opcional que retorna o correlation_id
            do contexto atual (ex: de ContextVar).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def configure_logging_from_settings(
    settings: BaseSettings | None = None,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging a partir de BaseSettings (LOG_LEVEL, SERVICE_NAME).

    Args:
        settings: BaseSettings opcional. Se None, carrega do ambiente.
        correlation_id_getter: Repassado para configure_logging.
    """
    # Import local para evitar dependência circular
    from config.settings import get_base_settings

    base = settings or get_base_settings()
    level = "DEBUG" if base.debug else base.log_level
    configure_logging(
        level=level,
        service_name=base.service_name,
        correlation_id_getter=correlation_id_getter,
    )


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado.

    O filter injeta automaticamente service e correlation_id.
    """
    return logging.getLogger(name)
