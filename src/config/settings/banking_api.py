"""Settings da API bancária consumida pelo cliente.

Centralizar a leitura de env aqui evita espalhar parse de configuracao
pelos builders de path e de query.
"""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_API_BASE_URL = "https://api.bank.example.com"


class BankingApiSettings(BaseModel):
    """Configuracoes de acesso a API bancaria."""

    model_config = ConfigDict(extra="ignore")

    api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL,
        description="URL base da API (sem barra final).",
    )

    def validate_settings(self) -> list[str]:
        """Valida configuracoes da API.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []
        if not self.api_base_url.startswith(("http://", "https://")):
            errors.append(f"BANKING_API_BASE_URL invalida: {self.api_base_url}")
        return errors


def _load_banking_api_from_env() -> BankingApiSettings:
    """Carrega BankingApiSettings a partir de variaveis de ambiente."""
    return BankingApiSettings(
        api_base_url=os.getenv("BANKING_API_BASE_URL", DEFAULT_API_BASE_URL).strip(),
    )


@lru_cache(maxsize=1)
def get_banking_api_settings() -> BankingApiSettings:
    """Retorna instancia cacheada de BankingApiSettings."""
    return _load_banking_api_from_env()


__all__ = ["DEFAULT_API_BASE_URL", "BankingApiSettings", "get_banking_api_settings"]
