"""Factory de wiring para Email (bootstrap)."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.protocols.http_client import EmailHttpClientProtocol
    from app.protocols.renderer import RendererProtocol
    from app.use_cases.email.send_email import SendEmailUseCase
    from config.settings import EmailSettings


def create_send_email_use_case(
    *,
    renderer: RendererProtocol | None = None,
    http_client: EmailHttpClientProtocol | None = None,
    settings: EmailSettings | None = None,
) -> SendEmailUseCase:
    """Cria use case de envio com dependências injetadas.

    Args:
        renderer: Renderer de componentes; None carrega o padrão sob demanda
        http_client: Cliente HTTP; None cria EmailHttpClient a partir das settings
        settings: EmailSettings opcional. Se None, carrega do ambiente.
    """
    # Imports locais: api/ depende de app.infra e app.protocols
    from api.connectors.email import create_email_http_client
    from api.payload_builders.email import EmailPayloadBuilder
    from api.validators.email import EmailMessageValidator
    from app.use_cases.email.send_email import SendEmailUseCase
    from config.settings import get_email_settings

    email = settings or get_email_settings()
    return SendEmailUseCase(
        validator=EmailMessageValidator(),
        builder=EmailPayloadBuilder(),
        http_client=http_client or create_email_http_client(email),
        endpoint=email.emails_endpoint,
        renderer=renderer,
    )
