"""Validadores do corpo da mensagem (component / html / text)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from utils.errors import ValidationError

if TYPE_CHECKING:
    from app.protocols.models import MessageRequest


def validate_body(request: MessageRequest) -> None:
    """Valida que o corpo vem de exatamente uma fonte.

    `component` é exclusivo; `html` e `text` podem coexistir.

    Raises:
        ValidationError: Se nenhuma fonte de corpo foi informada, ou se
            `component` foi combinado com `html`/`text`
    """
    has_component = request.component is not None
    has_html = bool(request.html)
    has_text = bool(request.text)

    if not (has_component or has_html or has_text):
        raise ValidationError(
            "one of component, html or text is required",
            field="body",
        )

    if has_component and (has_html or has_text):
        raise ValidationError(
            "component cannot be combined with html or text",
            field="component",
        )
