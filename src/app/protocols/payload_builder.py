"""Protocolos de construção de payload de email."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .models import NormalizedMessage


class PayloadBuilderProtocol(Protocol):
    """Contrato mínimo para construir o payload JSON de envio."""

    def build_full_payload(self, message: NormalizedMessage) -> dict[str, Any]: ...
