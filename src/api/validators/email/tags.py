"""Validador de tags de email."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.validators.email.limits import MAX_TAG_LENGTH, TAG_PATTERN
from utils.errors import ValidationError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.protocols.models import Tag


def _validate_tag_part(value: str, part: str, index: int) -> None:
    if not isinstance(value, str) or not TAG_PATTERN.match(value):
        raise ValidationError(
            f"tag {part} may only contain ASCII letters, numbers, underscores or dashes",
            field="tags",
            index=index,
        )
    if len(value) > MAX_TAG_LENGTH:
        raise ValidationError(
            f"tag {part} exceeds maximum length of {MAX_TAG_LENGTH} characters",
            field="tags",
            index=index,
        )


def validate_tags(tags: Sequence[Tag] | None) -> None:
    """Valida name/value de cada tag.

    Raises:
        ValidationError: Com o índice da tag inválida
    """
    for index, tag in enumerate(tags or ()):
        _validate_tag_part(tag.name, "name", index)
        _validate_tag_part(tag.value, "value", index)
