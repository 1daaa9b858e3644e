"""Connector Email — adapter de borda para a API HTTP de email.

Este módulo é o único ponto de IO de rede do canal Email.
Responsabilidades:
- HTTP client para o endpoint de envio
- Parsing de erros devolvidos no corpo da resposta
"""

from .api_errors import EmailApiError, parse_api_error
from .http_client import EmailHttpClient, create_email_http_client

__all__ = [
    "EmailApiError",
    "EmailHttpClient",
    "create_email_http_client",
    "parse_api_error",
]
