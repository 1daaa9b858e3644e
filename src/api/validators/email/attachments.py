"""Validadores de anexos."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.validators.email.limits import MAX_ATTACHMENTS_SIZE_BYTES
from app.protocols.models import CONTENT_VARIANTS, Attachment
from utils.errors import ValidationError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.protocols.models import AttachmentEntry, NormalizedAttachment


def validate_attachment_entries(attachments: Sequence[AttachmentEntry] | None) -> None:
    """Valida exclusividade mútua de content/path e o tipo do conteúdo.

    Handles de arquivo são aceitos como entrada direta.

    Raises:
        ValidationError: Com o índice do anexo ofensor
    """
    for index, entry in enumerate(attachments or ()):
        if not isinstance(entry, Attachment):
            if not callable(getattr(entry, "read", None)):
                raise ValidationError(
                    f"attachments[{index}] must be an Attachment or a binary file handle",
                    field="attachments",
                    index=index,
                )
            continue

        has_content = entry.content is not None
        has_path = bool(entry.path)
        if has_content and has_path:
            raise ValidationError(
                f"attachments[{index}] must not set both content and path",
                field="attachments",
                index=index,
            )
        if not has_content and not has_path:
            raise ValidationError(
                f"attachments[{index}] requires either content or path",
                field="attachments",
                index=index,
            )
        if has_content and not isinstance(entry.content, CONTENT_VARIANTS):
            raise ValidationError(
                f"attachments[{index}] has unsupported content type "
                f"{type(entry.content).__name__}",
                field="attachments",
                index=index,
            )


def validate_attachments_size(attachments: Sequence[NormalizedAttachment] | None) -> None:
    """Valida o tamanho somado dos anexos binários, antes do base64.

    Conteúdo textual do chamador e anexos por path não entram na soma.

    Raises:
        ValidationError: Se exceder MAX_ATTACHMENTS_SIZE_BYTES
    """
    total = sum(item.size for item in attachments or () if item.size is not None)
    if total > MAX_ATTACHMENTS_SIZE_BYTES:
        raise ValidationError(
            f"attachments exceed maximum of {MAX_ATTACHMENTS_SIZE_BYTES} bytes per email",
            field="attachments",
        )
