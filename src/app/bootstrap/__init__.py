"""Bootstrap — inicialização e wiring.

Composition root: conecta implementações concretas aos protocolos e
oferece a configuração opcional de logging para aplicações hospedeiras.

Uso:
    from app.bootstrap import bootstrap_logging, validate_runtime_settings

    bootstrap_logging()
    validate_runtime_settings()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging import configure_logging
from config.settings import get_base_settings, get_email_settings

if TYPE_CHECKING:
    from collections.abc import Callable

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def bootstrap_logging(correlation_id_getter: Callable[[], str] | None = None) -> None:
    """Configura logging JSON a partir de LOG_LEVEL e SERVICE_NAME."""
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=correlation_id_getter,
    )


def validate_runtime_settings() -> list[str]:
    """Valida settings obrigatórias.

    Em `staging`/`production` falha rápido; em `development` apenas alerta.

    Returns:
        Lista de erros encontrados (vazia = OK)

    Raises:
        RuntimeError: Se houver erros em ambiente estrito
    """
    base = get_base_settings()
    errors: list[str] = [f"base: {error}" for error in base.validate()]
    errors.extend(f"email: {error}" for error in get_email_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "environment": base.environment},
        )
        return errors

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "environment": base.environment,
            "error_count": len(errors),
        },
    )
    if base.environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")
    return errors
