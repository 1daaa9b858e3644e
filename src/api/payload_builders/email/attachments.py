"""Builder de anexos para o payload de email."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.protocols.models import NormalizedAttachment


def build_attachment_payload(attachment: NormalizedAttachment) -> dict[str, Any]:
    """Constrói o objeto de anexo conforme a API.

    `filename=False` é serializado explicitamente; `None` é omitido.
    """
    payload: dict[str, Any] = {}
    if attachment.content is not None:
        payload["content"] = attachment.content
    if attachment.path is not None:
        payload["path"] = attachment.path
    if attachment.filename is not None:
        payload["filename"] = attachment.filename
    return payload
