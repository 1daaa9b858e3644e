"""Validadores de envelope: remetente, destinatários e assunto."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from api.validators.email.limits import MAX_TO_RECIPIENTS
from utils.errors import ValidationError

if TYPE_CHECKING:
    from app.protocols.models import MessageRequest, Recipients


def _as_list(value: Recipients, field: str) -> list[str]:
    if not isinstance(value, (str, Sequence)):
        raise ValidationError(
            f"{field} must be a string or a list of strings",
            field=field,
        )
    addresses = [value] if isinstance(value, str) else list(value)
    for index, address in enumerate(addresses):
        if not isinstance(address, str) or not address.strip():
            raise ValidationError(
                f"{field} must contain non-empty strings",
                field=field,
                index=index,
            )
    return addresses


def validate_envelope(request: MessageRequest) -> None:
    """Valida from, to, subject e destinatários opcionais.

    Raises:
        ValidationError: Campo obrigatório ausente, endereço vazio ou
            mais de MAX_TO_RECIPIENTS destinatários em `to`
    """
    if not isinstance(request.from_, str) or not request.from_.strip():
        raise ValidationError("from is required and must be a string", field="from")

    if not isinstance(request.subject, str) or not request.subject:
        raise ValidationError("subject is required", field="subject")

    if not request.to:
        raise ValidationError("to is required", field="to")

    to = _as_list(request.to, "to")
    if len(to) > MAX_TO_RECIPIENTS:
        raise ValidationError(
            f"to exceeds maximum of {MAX_TO_RECIPIENTS} recipients",
            field="to",
        )

    for field in ("cc", "bcc", "reply_to"):
        value = getattr(request, field)
        if value is not None:
            _as_list(value, field)
