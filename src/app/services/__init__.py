"""Serviços de aplicação.

Unidades reutilizáveis de normalização (sem IO de rede).
Implementações concretas de IO ficam em app/infra/.
"""
