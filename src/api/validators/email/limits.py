"""Limites da API de email."""

from __future__ import annotations

import re

# Tags: apenas letras ASCII, dígitos, underscore e hífen
MAX_TAG_LENGTH = 256
TAG_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")

# Destinatários
MAX_TO_RECIPIENTS = 50

# Anexos (tamanho serializado somado, por email)
MAX_ATTACHMENTS_SIZE_BYTES = 40 * 1024 * 1024
