"""Agregador de settings do cliente de email.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Channel-specific settings
from config.settings.email import (
    EMAIL_API_BASE_URL,
    EMAILS_PATH,
    EmailSettings,
    get_email_settings,
)

__all__ = [
    # Constants
    "EMAILS_PATH",
    "EMAIL_API_BASE_URL",
    # Base
    "BaseSettings",
    "Environment",
    # Channels
    "EmailSettings",
    "get_base_settings",
    "get_email_settings",
]
