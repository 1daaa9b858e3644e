"""Builder do payload JSON de envio de email."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.email.attachments import build_attachment_payload

if TYPE_CHECKING:
    from app.protocols.models import NormalizedMessage, Recipients

# Campos opcionais copiados sem transformação, na ordem do wire
_OPTIONAL_FIELDS = ("html", "text", "cc", "bcc", "reply_to")


def _recipients(value: Recipients) -> str | list[str]:
    return value if isinstance(value, str) else list(value)


def build_full_payload(message: NormalizedMessage) -> dict[str, Any]:
    """Constrói payload completo para a API de email.

    Chaves em snake_case; campos opcionais ausentes são omitidos.

    Args:
        message: Mensagem já normalizada

    Returns:
        Payload pronto para serialização JSON
    """
    payload: dict[str, Any] = {
        "from": message.from_,
        "to": _recipients(message.to),
        "subject": message.subject,
    }

    for name in _OPTIONAL_FIELDS:
        value = getattr(message, name)
        if value is None:
            continue
        payload[name] = value if name in ("html", "text") else _recipients(value)

    if message.headers is not None:
        payload["headers"] = dict(message.headers)

    if message.tags is not None:
        payload["tags"] = [tag.to_payload() for tag in message.tags]

    if message.attachments is not None:
        payload["attachments"] = [
            build_attachment_payload(attachment) for attachment in message.attachments
        ]

    return payload


class EmailPayloadBuilder:
    """Implementação de PayloadBuilderProtocol para a API de email."""

    def build_full_payload(self, message: NormalizedMessage) -> dict[str, Any]:
        return build_full_payload(message)
