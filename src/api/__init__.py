"""API — camada de borda para a API bancária.

Subpastas:
- query_builders/: filtros opcionais de listagem → query string
- connectors/: composição de paths e parsing de erros por API externa

NÃO PODE conter: transporte HTTP, autenticação, retry ou paginação.
"""
