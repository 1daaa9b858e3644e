"""Use case para envio de email."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.protocols.models import NormalizedMessage
from app.services.email import normalize_attachments, resolve_body

if TYPE_CHECKING:
    from app.protocols.http_client import EmailHttpClientProtocol
    from app.protocols.models import MessageRequest
    from app.protocols.payload_builder import PayloadBuilderProtocol
    from app.protocols.renderer import RendererProtocol
    from app.protocols.validator import EmailRequestValidatorProtocol

logger = logging.getLogger(__name__)


class SendEmailUseCase:
    """Orquestra validação, normalização, build e envio.

    Erros não são capturados: ValidationError ocorre antes de qualquer IO
    de rede; falhas do renderer e do transporte propagam ao chamador.
    """

    def __init__(
        self,
        validator: EmailRequestValidatorProtocol,
        builder: PayloadBuilderProtocol,
        http_client: EmailHttpClientProtocol,
        endpoint: str,
        renderer: RendererProtocol | None = None,
    ) -> None:
        self._validator = validator
        self._builder = builder
        self._http_client = http_client
        self._endpoint = endpoint
        self._renderer = renderer

    async def execute(self, request: MessageRequest, api_key: str) -> dict[str, Any]:
        """Executa o envio e retorna o corpo JSON da resposta remota."""
        self._validator.validate_request(request, api_key)

        message = await self.normalize(request)
        self._validator.validate_normalized(message)

        payload = self._builder.build_full_payload(message)
        logger.debug(
            "email_send_started",
            extra={
                "has_component": request.component is not None,
                "attachment_count": len(message.attachments or ()),
                "tag_count": len(message.tags or ()),
            },
        )
        return await self._http_client.send_email(
            self._endpoint,
            api_key,
            payload,
            headers=request.headers,
        )

    async def normalize(self, request: MessageRequest) -> NormalizedMessage:
        """Produz a mensagem normalizada sem alterar a requisição original."""
        body = await resolve_body(request, self._renderer)
        attachments = await normalize_attachments(request.attachments)
        return NormalizedMessage(
            from_=request.from_,
            to=request.to,
            subject=request.subject,
            html=body.html,
            text=body.text,
            cc=request.cc,
            bcc=request.bcc,
            reply_to=request.reply_to,
            headers=request.headers,
            tags=None if request.tags is None else tuple(request.tags),
            attachments=attachments,
        )
