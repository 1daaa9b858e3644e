"""Erros e helpers de parsing para respostas da API de email.

A API devolve falhas no próprio corpo JSON, por exemplo:
    {"statusCode": 422, "name": "validation_error", "message": "..."}

O cliente não levanta exceção para essas respostas; este helper permite
ao chamador (e aos logs) identificar o erro no resultado.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class EmailApiError:
    """Erro retornado pela API de email."""

    name: str
    message: str
    status_code: int | None


def parse_api_error(response_data: Any) -> EmailApiError | None:
    """Extrai informações de erro do response da API.

    Args:
        response_data: Corpo JSON decodificado

    Returns:
        EmailApiError se o corpo descreve uma falha, None caso contrário
    """
    if not isinstance(response_data, dict) or "id" in response_data:
        return None

    name = response_data.get("name")
    status_code = response_data.get("statusCode")
    if name is None and status_code is None:
        return None

    return EmailApiError(
        name=str(name or "unknown_error"),
        message=str(response_data.get("message", "")),
        status_code=status_code if isinstance(status_code, int) else None,
    )
