"""Validador de headers customizados."""

from __future__ import annotations

from typing import TYPE_CHECKING

from utils.errors import ValidationError

if TYPE_CHECKING:
    from collections.abc import Mapping

# Quebras de linha permitiriam injetar headers extras
_FORBIDDEN_CHARS = ("\r", "\n")


def _is_ascii(value: str) -> bool:
    try:
        value.encode("ascii")
    except UnicodeEncodeError:
        return False
    return True


def validate_headers(headers: Mapping[str, str] | None) -> None:
    """Valida que headers é um mapping str -> str transmissível em HTTP.

    Nomes e valores precisam ser ASCII e sem CR/LF.

    Raises:
        ValidationError: Se alguma chave ou valor for inválido
    """
    if headers is None:
        return

    for key, value in headers.items():
        if not isinstance(key, str) or not key:
            raise ValidationError("header names must be non-empty strings", field="headers")
        if not isinstance(value, str):
            raise ValidationError(f"header {key!r} must have a string value", field="headers")
        if not _is_ascii(key) or any(char in key for char in _FORBIDDEN_CHARS):
            raise ValidationError(
                f"header name {key!r} must be ASCII without line breaks",
                field="headers",
            )
        if not _is_ascii(value) or any(char in value for char in _FORBIDDEN_CHARS):
            raise ValidationError(
                f"header {key!r} must have an ASCII value without line breaks",
                field="headers",
            )
