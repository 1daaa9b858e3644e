"""Protocolos HTTP usados pelo app.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping


class EmailHttpClientProtocol(Protocol):
    """Contrato mínimo para cliente HTTP da API de email."""

    async def send_email(
        self,
        endpoint: str,
        api_key: str,
        payload: dict[str, Any],
        headers: Mapping[str, str] | None = None,
    ) -> dict[str, Any]: ...
