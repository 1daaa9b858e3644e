"""Cliente HTTP especializado para a API de email.

Estende HttpClient genérico com comportamentos específicos:
- Serialização JSON compacta do payload
- Headers padrão (Content-Type, Authorization Bearer) com headers do
  chamador aplicados por cima
- Qualquer resposta HTTP com JSON válido é devolvida como resultado,
  inclusive status não-2xx
- Logging estruturado sem PII
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.email.api_errors import EmailApiError, parse_api_error
from api.connectors.email.api_logging import log_api_error, log_success
from app.infra.http import HttpClient, HttpClientConfig
from utils.errors import TransportError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from config.settings import EmailSettings

logger: logging.Logger = logging.getLogger(__name__)


class EmailHttpClient(HttpClient):
    """Cliente HTTP para o endpoint de envio de emails."""

    async def send_email(
        self,
        endpoint: str,
        api_key: str,
        payload: dict[str, Any],
        headers: Mapping[str, str] | None = None,
    ) -> dict[str, Any]:
        """Envia o payload de email em um único POST.

        Args:
            endpoint: URL do endpoint (ex: https://api.resend.com/emails)
            api_key: Bearer token para autenticação
            payload: Payload JSON já normalizado
            headers: Headers do chamador; sobrescrevem os padrões

        Returns:
            Corpo JSON da resposta, sem alteração

        Raises:
            TransportError: Sem resposta ou corpo não-JSON
        """
        request_headers = self._build_headers(api_key, headers)
        body = json.dumps(payload, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
        response = await self.post(endpoint, content=body, headers=request_headers)
        return self._process_response(response, endpoint)

    @staticmethod
    def _build_headers(
        api_key: str,
        headers: Mapping[str, str] | None,
    ) -> httpx.Headers:
        """Headers padrão primeiro; headers do chamador aplicados por cima.

        A sobrescrita ignora maiúsculas/minúsculas no nome do header.
        """
        merged = httpx.Headers(
            {
                "Content-Type": "application/json",
                "Authorization": f"Bearer {api_key}",
            }
        )
        merged.update(headers or {})
        return merged

    def _process_response(
        self,
        response: httpx.Response,
        endpoint: str,
    ) -> dict[str, Any]:
        try:
            response_data = response.json()
        except ValueError as e:
            logger.error(
                "email_api_invalid_json",
                extra={"endpoint": endpoint, "status_code": response.status_code},
            )
            raise TransportError(
                "invalid_json_response",
                status_code=response.status_code,
            ) from e

        api_error = parse_api_error(response_data)
        if api_error is None and response.is_error:
            api_error = EmailApiError(
                name="http_error",
                message="",
                status_code=response.status_code,
            )

        if api_error is not None:
            log_api_error(api_error, endpoint, response.status_code)
        else:
            log_success(endpoint, response.status_code)
        return response_data


def create_email_http_client(
    settings: EmailSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> EmailHttpClient:
    """Factory para criar cliente de email com config padrão.

    Args:
        settings: EmailSettings opcional. Se None, carrega do ambiente.
        transport: Transport httpx opcional (ex.: httpx.MockTransport em testes)

    Returns:
        Cliente HTTP configurado para a API de email.
    """
    # Import local para evitar dependência circular
    from config.settings import get_email_settings

    email = settings or get_email_settings()
    config = HttpClientConfig(
        timeout_seconds=email.request_timeout_seconds,
        transport=transport,
    )
    return EmailHttpClient(config=config)
