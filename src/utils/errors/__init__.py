"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    EmailClientError,
    RenderError,
    TransportError,
    ValidationError,
)

__all__ = [
    "EmailClientError",
    "RenderError",
    "TransportError",
    "ValidationError",
]
