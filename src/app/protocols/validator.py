"""Protocolos de validação de mensagens de email."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from utils.errors import ValidationError

if TYPE_CHECKING:
    from .models import MessageRequest, NormalizedMessage


class EmailRequestValidatorProtocol(Protocol):
    """Contrato mínimo para validação de requisições de email."""

    def validate_request(self, request: MessageRequest, api_key: str) -> None: ...

    def validate_normalized(self, message: NormalizedMessage) -> None: ...


__all__ = ["EmailRequestValidatorProtocol", "ValidationError"]
