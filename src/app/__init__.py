"""App — orquestração, casos de uso e infraestrutura do cliente de email.

Subpastas:
- bootstrap/: composition root (factories, logging)
- use_cases/: casos de uso (validação -> normalização -> envio)
- services/: normalização de corpo e anexos
- infra/: implementações concretas de IO (HTTP base, renderer Jinja2)
- protocols/: contratos e modelos canônicos

Padrão: app executa; api adapta; config configura; utils apoia.
"""

from app.client import Emails, Resend, send

__all__ = [
    "Emails",
    "Resend",
    "send",
]
