"""App — constantes de domínio compartilhadas pelas camadas.

Subpastas:
- constants/: enums com os literais contratuais da API bancária
"""
