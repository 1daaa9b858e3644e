"""Exceções do cliente de email transacional.

Todas as falhas visíveis ao chamador derivam de EmailClientError.
Respostas de erro da API remota (JSON bem formado) NÃO são exceções:
são devolvidas como resultado para o chamador inspecionar.
"""

from __future__ import annotations


class EmailClientError(Exception):
    """Base para falhas do cliente de email."""


class ValidationError(EmailClientError):
    """Requisição inválida, detectada localmente antes de qualquer IO de rede.

    Args:
        message: Descrição do problema (sem PII)
        field: Campo ofensor (ex.: "body", "attachments", "tags")
        index: Posição do item ofensor em campos sequenciais
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        index: int | None = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.index = index


class RenderError(EmailClientError):
    """Falha do renderer ao converter o componente em HTML/texto."""


class TransportError(EmailClientError):
    """Nenhuma resposta obtida ou corpo da resposta não é JSON válido."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
