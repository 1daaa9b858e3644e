"""Cliente HTTP base para conectores da camada API.

Uma única tentativa por chamada: sem retry, sem backoff. Falhas de
transporte (sem resposta) viram TransportError encadeado ao erro httpx.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import httpx

from utils.errors import TransportError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True
    transport: httpx.AsyncBaseTransport | None = None


class HttpClient:
    """Cliente HTTP simples para chamadas externas."""

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        self._config = config or HttpClientConfig()

    async def post(
        self,
        url: str,
        content: bytes,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        """Executa um POST e retorna a resposta, qualquer que seja o status.

        Raises:
            TransportError: Se nenhuma resposta foi obtida
        """
        merged_headers = httpx.Headers(self._config.default_headers)
        merged_headers.update(headers or {})
        try:
            async with httpx.AsyncClient(
                verify=self._config.verify_ssl,
                transport=self._config.transport,
            ) as client:
                return await client.post(
                    url,
                    content=content,
                    headers=merged_headers,
                    timeout=self._config.timeout_seconds,
                )
        except httpx.TransportError as exc:
            logger.warning(
                "http_connection_error",
                extra={"error_type": type(exc).__name__},
            )
            raise TransportError("http_connection_error") from exc
