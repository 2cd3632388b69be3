"""Agregador de settings do cliente da API bancária.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.banking_api import (
    DEFAULT_API_BASE_URL,
    BankingApiSettings,
    get_banking_api_settings,
)
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

__all__ = [
    "DEFAULT_API_BASE_URL",
    "BankingApiSettings",
    "BaseSettings",
    "Environment",
    "get_banking_api_settings",
    "get_base_settings",
]
