"""Superfície pública do cliente de email.

Uso:
    from app import Resend, send

    response = await send(
        {"from": "a@x.com", "to": "b@x.com", "subject": "hi", "html": "<p>hi</p>"},
        "re_123",
    )

    client = Resend("re_123")
    response = await client.emails.send(request)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from app.bootstrap.email_factory import create_send_email_use_case
from app.protocols.models import MessageRequest
from utils.errors import ValidationError

if TYPE_CHECKING:
    from app.protocols.http_client import EmailHttpClientProtocol
    from app.protocols.renderer import RendererProtocol
    from config.settings import EmailSettings


async def send(
    request: MessageRequest | Mapping[str, Any],
    api_key: str,
    *,
    renderer: RendererProtocol | None = None,
    http_client: EmailHttpClientProtocol | None = None,
    settings: EmailSettings | None = None,
) -> dict[str, Any]:
    """Normaliza e envia um email em um único POST.

    Args:
        request: MessageRequest ou mapping com as chaves do wire
        api_key: Bearer token da API
        renderer: Renderer de componentes (opcional)
        http_client: Cliente HTTP (opcional)
        settings: EmailSettings (opcional)

    Returns:
        Corpo JSON da resposta, sem alteração (ex.: {"id": "..."})

    Raises:
        ValidationError: Requisição inválida (nenhuma chamada de rede feita)
        RenderError: Falha do renderer padrão
        TransportError: Sem resposta ou resposta não-JSON
    """
    message = request if isinstance(request, MessageRequest) else MessageRequest.from_dict(request)
    use_case = create_send_email_use_case(
        renderer=renderer,
        http_client=http_client,
        settings=settings,
    )
    return await use_case.execute(message, api_key)


class Emails:
    """Agrupamento `client.emails.send(...)`."""

    def __init__(self, client: Resend) -> None:
        self._client = client

    async def send(self, request: MessageRequest | Mapping[str, Any]) -> dict[str, Any]:
        return await self._client.send(request)


class Resend:
    """Cliente orientado a objeto; delega para send().

    Args:
        api_key: Bearer token. Se None, usa RESEND_API_KEY das settings.
        renderer: Renderer de componentes (opcional)
        http_client: Cliente HTTP (opcional)
        settings: EmailSettings (opcional)

    Raises:
        ValidationError: Se nenhuma API key estiver disponível
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        renderer: RendererProtocol | None = None,
        http_client: EmailHttpClientProtocol | None = None,
        settings: EmailSettings | None = None,
    ) -> None:
        from config.settings import get_email_settings

        self._settings = settings or get_email_settings()
        self._api_key = api_key if api_key is not None else self._settings.api_key
        if not self._api_key:
            raise ValidationError("api_key is required", field="api_key")
        self._renderer = renderer
        self._http_client = http_client
        self.emails = Emails(self)

    async def send(self, request: MessageRequest | Mapping[str, Any]) -> dict[str, Any]:
        return await send(
            request,
            self._api_key,
            renderer=self._renderer,
            http_client=self._http_client,
            settings=self._settings,
        )
