"""Validador agregado de mensagens de email."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.validators.email.attachments import (
    validate_attachment_entries,
    validate_attachments_size,
)
from api.validators.email.body import validate_body
from api.validators.email.headers import validate_headers
from api.validators.email.recipients import validate_envelope
from api.validators.email.tags import validate_tags
from utils.errors import ValidationError

if TYPE_CHECKING:
    from app.protocols.models import MessageRequest, NormalizedMessage


class EmailMessageValidator:
    """Valida requisições de email antes de qualquer IO de rede."""

    def validate_request(self, request: MessageRequest, api_key: str) -> None:
        """Valida a requisição como fornecida pelo chamador.

        Raises:
            ValidationError: Na primeira violação encontrada
        """
        if not api_key or not api_key.strip():
            raise ValidationError("api_key is required", field="api_key")

        validate_envelope(request)
        validate_body(request)
        validate_headers(request.headers)
        validate_tags(request.tags)
        validate_attachment_entries(request.attachments)

    def validate_normalized(self, message: NormalizedMessage) -> None:
        """Valida limites que só podem ser medidos após a normalização."""
        validate_attachments_size(message.attachments)
