"""Protocolo do renderer de componentes de email."""

from __future__ import annotations

from typing import Any, Protocol


class RendererProtocol(Protocol):
    """Contrato mínimo para renderizar um componente.

    `render(component)` retorna HTML sanitizado;
    `render(component, plain_text=True)` retorna a projeção em texto puro.
    """

    async def render(self, component: Any, *, plain_text: bool = False) -> str: ...
