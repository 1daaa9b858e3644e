"""Payload builders — construção de payloads para APIs externas.

Estrutura:
- email/: payload JSON de POST /emails
"""

__all__: list[str] = []
