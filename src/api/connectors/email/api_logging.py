"""Helpers de logging para a API de email (sem PII)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .api_errors import EmailApiError

logger = logging.getLogger(__name__)


def log_api_error(api_error: EmailApiError, endpoint: str, http_status: int) -> None:
    """Loga erro devolvido pela API sem expor dados sensíveis."""
    logger.warning(
        "email_api_error_response",
        extra={
            "endpoint": endpoint,
            "http_status": http_status,
            "error_name": api_error.name,
            "error_status_code": api_error.status_code,
        },
    )


def log_success(endpoint: str, status_code: int) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "email_api_success",
        extra={"endpoint": endpoint, "status_code": status_code},
    )
