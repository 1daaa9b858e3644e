"""Normalização de anexos para a forma do wire.

Cada variante de conteúdo tem uma função de coerção própria; conteúdo
binário termina sempre como texto base64. As coerções rodam em paralelo
e a ordem de saída é a ordem de entrada.
"""

from __future__ import annotations

import asyncio
import base64
import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, Optional

from app.protocols.models import (
    Attachment,
    BytesContent,
    FileContent,
    NormalizedAttachment,
    StreamContent,
    TextContent,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.protocols.models import AttachmentEntry

logger = logging.getLogger(__name__)


def bytes_to_base64(data: bytes) -> str:
    """Codifica bytes em base64 (texto ASCII)."""
    return base64.b64encode(data).decode("ascii")


Coerced = tuple[str, Optional[int]]


def _encode(data: bytes) -> Coerced:
    return bytes_to_base64(data), len(data)


async def _coerce_text(content: TextContent) -> Coerced:
    return content.value, None


async def _coerce_bytes(content: BytesContent) -> Coerced:
    return _encode(content.data)


async def _coerce_stream(content: StreamContent) -> Coerced:
    return _encode(bytes(await content.read()))


async def _coerce_file(content: FileContent) -> Coerced:
    # Leitura bloqueante fora do event loop
    data = await asyncio.to_thread(content.handle.read)
    return _encode(bytes(data))


# Mapeamento de variante de conteúdo para coerção: (texto do wire, bytes de origem)
_COERCIONS: dict[type, Callable[[Any], Awaitable[Coerced]]] = {
    TextContent: _coerce_text,
    BytesContent: _coerce_bytes,
    StreamContent: _coerce_stream,
    FileContent: _coerce_file,
}


async def normalize_attachment(entry: AttachmentEntry) -> NormalizedAttachment:
    """Normaliza um anexo (já validado) para NormalizedAttachment.

    Raises:
        TypeError: Se o conteúdo não for uma variante conhecida
    """
    attachment = entry if isinstance(entry, Attachment) else Attachment.from_file(entry)

    if attachment.content is None:
        return NormalizedAttachment(path=attachment.path, filename=attachment.filename)

    coerce = _COERCIONS.get(type(attachment.content))
    if coerce is None:
        raise TypeError(
            f"conteúdo de anexo não suportado: {type(attachment.content).__name__}"
        )

    content, size = await coerce(attachment.content)
    return NormalizedAttachment(content=content, filename=attachment.filename, size=size)


async def normalize_attachments(
    attachments: Sequence[AttachmentEntry] | None,
) -> tuple[NormalizedAttachment, ...] | None:
    """Normaliza todos os anexos preservando a ordem de entrada.

    Returns:
        Tupla de anexos normalizados, ou None se não houver campo de anexos
    """
    if attachments is None:
        return None

    tasks = [asyncio.ensure_future(normalize_attachment(entry)) for entry in attachments]
    try:
        normalized = await asyncio.gather(*tasks)
    except BaseException:
        # Uma falha cancela as coerções ainda pendentes
        for task in tasks:
            task.cancel()
        raise

    logger.debug(
        "email_attachments_normalized",
        extra={"attachment_count": len(normalized)},
    )
    return tuple(normalized)
