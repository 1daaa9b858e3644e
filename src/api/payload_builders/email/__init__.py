"""Payload builders para Email (API HTTP).

Responsabilidades:
- Construir o payload JSON de envio (snake_case, campos ausentes omitidos)
- Serializar anexos já normalizados (content base64 ou path)
"""

from api.payload_builders.email.attachments import build_attachment_payload
from api.payload_builders.email.builder import EmailPayloadBuilder, build_full_payload

__all__ = [
    "EmailPayloadBuilder",
    "build_attachment_payload",
    "build_full_payload",
]
