"""Serviços de normalização de mensagens de email."""

from .attachment_normalizer import (
    bytes_to_base64,
    normalize_attachment,
    normalize_attachments,
)
from .body_resolver import ResolvedBody, resolve_body

__all__ = [
    "ResolvedBody",
    "bytes_to_base64",
    "normalize_attachment",
    "normalize_attachments",
    "resolve_body",
]
