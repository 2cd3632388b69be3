"""Conector da API bancária — composição de requisições de listagem.

Responsabilidades:
- Paths de listagem com query string de filtros
- URL absoluta a partir da URL base configurada
- Parsing do envelope de erro da API
"""

from .api_errors import parse_api_error
from .paths import build_request_url, with_query

__all__ = [
    "build_request_url",
    "parse_api_error",
    "with_query",
]
