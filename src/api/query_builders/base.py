"""Codificação genérica de filtros opcionais em query string.

Cada conjunto de filtros é um modelo Pydantic imutável que herda de
QueryParams. Os campos são declarados como `T | None` com o wire name
no alias; `None` significa "não informado" e nunca é serializado.

Regras de formatação:
- str: valor literal (escapado pela codificação de query padrão)
- bool: "true" / "false"
- int / int64: decimal base 10, preservando sinal
- enum: literal declarado do enum

Uso:
    params = ListAccountsParams(status=AccountStatus.ACTIVE, first=0)
    path = "/accounts" + encode_query(params)  # /accounts?status=ACTIVE&first=0
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Annotated, Any
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from utils.errors import QueryParamsDefinitionError

logger = logging.getLogger(__name__)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Inteiro estrito (bool rejeitado) com faixa de 64 bits com sinal (ids de conta)
Int64 = Annotated[StrictInt, Field(ge=INT64_MIN, le=INT64_MAX)]

QueryValue = str | bool | int | Enum


def format_query_value(value: QueryValue) -> str:
    """Formata um valor de filtro conforme seu tipo semântico.

    Args:
        value: Valor já validado pelo modelo (nunca None)

    Returns:
        Representação textual usada na query string

    Raises:
        TypeError: Se o tipo não é suportado
    """
    # bool antes de int: bool é subclasse de int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value
    raise TypeError(f"Tipo de filtro não suportado: {type(value).__name__}")


class QueryParams(BaseModel):
    """Base para conjuntos de filtros opcionais de listagem.

    Subclasses declaram apenas campos opcionais com alias igual ao
    wire name. A ordem de declaração define a ordem das chaves.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
    )

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        seen: dict[str, str] = {}
        for name, info in cls.model_fields.items():
            wire_name = info.alias or name
            if wire_name in seen:
                raise QueryParamsDefinitionError(
                    f"{cls.__name__}: wire name '{wire_name}' declarado em "
                    f"'{seen[wire_name]}' e '{name}'"
                )
            seen[wire_name] = name

    @classmethod
    def wire_names(cls) -> tuple[str, ...]:
        """Retorna os wire names na ordem de declaração."""
        return tuple(info.alias or name for name, info in cls.model_fields.items())

    def query_items(self) -> list[tuple[str, str]]:
        """Retorna pares (wire name, valor formatado) dos campos informados."""
        items: list[tuple[str, str]] = []
        for name, info in type(self).model_fields.items():
            value = getattr(self, name)
            if value is None:
                continue
            items.append((info.alias or name, format_query_value(value)))
        return items

    def query_string(self) -> str:
        """Atalho para encode_query(self)."""
        return encode_query(self)


def encode_query(params: QueryParams | None) -> str:
    """Codifica um conjunto de filtros em query string.

    Args:
        params: Filtros da listagem; None significa "sem filtros"

    Returns:
        "" quando params é None ou nenhum campo foi informado;
        caso contrário "?" seguido de key=value&... escapado
    """
    if params is None:
        return ""

    items = params.query_items()
    if not items:
        return ""

    logger.debug(
        "query_string_encoded",
        extra={
            "params_type": type(params).__name__,
            "field_count": len(items),
        },
    )
    return "?" + urlencode(items)


__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "Int64",
    "QueryParams",
    "QueryValue",
    "encode_query",
    "format_query_value",
]
