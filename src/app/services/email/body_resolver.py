"""Resolução do corpo da mensagem (component -> html + text)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.protocols.models import MessageRequest
    from app.protocols.renderer import RendererProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolvedBody:
    """Corpo final da mensagem."""

    html: str | None
    text: str | None


def _load_default_renderer() -> RendererProtocol:
    # Import local: o renderer padrão (Jinja2) só é carregado quando há componente
    from app.infra.rendering import create_default_renderer

    return create_default_renderer()


async def resolve_body(
    request: MessageRequest,
    renderer: RendererProtocol | None = None,
) -> ResolvedBody:
    """Resolve html/text a partir da requisição.

    Com `component`, o renderer é chamado duas vezes (HTML e texto puro).
    Sem componente, html/text passam sem alteração e o renderer não é usado.
    Falhas do renderer propagam sem tratamento.

    Args:
        request: Requisição já validada
        renderer: Renderer injetado; se None, o padrão é carregado sob demanda

    Returns:
        ResolvedBody com html e text finais
    """
    if request.component is None:
        return ResolvedBody(html=request.html, text=request.text)

    active = renderer or _load_default_renderer()
    html = await active.render(request.component)
    text = await active.render(request.component, plain_text=True)

    logger.debug(
        "email_component_rendered",
        extra={"html_length": len(html), "text_length": len(text)},
    )
    return ResolvedBody(html=html, text=text)
