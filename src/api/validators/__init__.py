"""Validators — validação de mensagens para APIs externas.

Estrutura:
- email/: envelope, corpo, headers, tags e anexos
"""

__all__: list[str] = []
