"""Connectors — adapters de borda para APIs externas.

Estrutura:
- banking/: API bancária (contas, cartões, PIX, MED, backoffice)
"""

__all__: list[str] = []
