"""Connectors — adapters de borda para APIs externas.

Estrutura:
- email/: API HTTP transacional de email (Resend)
"""

__all__: list[str] = []
