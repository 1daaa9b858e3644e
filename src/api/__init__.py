"""API — camada de borda com a API HTTP de email.

Responsabilidades:
- Validar mensagens e limites da API antes de qualquer chamada de rede
- Construir o payload JSON enviado à API
- Executar o POST autenticado e decodificar a resposta

Subpastas:
- connectors/: adapter HTTP da API de email
- payload_builders/: construção do payload do wire
- validators/: validação de mensagens e limites

NÃO PODE conter: renderização de componentes, normalização de anexos,
orquestração de use cases.
"""
