"""Settings específicas de Email.

Configurações do canal Email via API HTTP transacional (Resend).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes da API
EMAIL_API_BASE_URL: str = "https://api.resend.com"
EMAILS_PATH: str = "/emails"


@dataclass(frozen=True)
class EmailSettings:
    """Configurações do canal Email.

    Attributes:
        api_key: API key (Bearer token) da API de email
        api_base_url: URL base da API
        request_timeout_seconds: Timeout para requisições HTTP
        templates_dir: Diretório de templates Jinja2 do renderer padrão
    """

    # Credenciais
    api_key: str = ""

    # API
    api_base_url: str = EMAIL_API_BASE_URL

    # Timeouts
    request_timeout_seconds: float = 30.0

    # Renderização de componentes
    templates_dir: str = ""

    @property
    def emails_endpoint(self) -> str:
        """URL completa para envio de emails."""
        return f"{self.api_base_url.rstrip('/')}{EMAILS_PATH}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Email.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_key:
            errors.append("RESEND_API_KEY não configurado")

        if not self.api_base_url.startswith(("https://", "http://")):
            errors.append("RESEND_BASE_URL deve ser uma URL http(s)")

        if self.request_timeout_seconds <= 0:
            errors.append("RESEND_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> EmailSettings:
    """Carrega EmailSettings de variáveis de ambiente."""
    return EmailSettings(
        api_key=os.getenv("RESEND_API_KEY", ""),
        api_base_url=os.getenv("RESEND_BASE_URL", EMAIL_API_BASE_URL),
        request_timeout_seconds=float(
            os.getenv("RESEND_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        templates_dir=os.getenv("RESEND_TEMPLATES_DIR", ""),
    )


@lru_cache(maxsize=1)
def get_email_settings() -> EmailSettings:
    """Retorna instância cacheada de EmailSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
