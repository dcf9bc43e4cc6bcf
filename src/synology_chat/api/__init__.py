"""Camada API — contratos externos do Synology Chat.

Estrutura:
- schemas/: contrato estrutural da mensagem
- validators/: validação com violações enumeradas
- normalizers/: body bruto (JSON ou form) -> mensagem canônica
- connectors/: envio HTTP para o incoming webhook
- routes/: rota POST do outgoing webhook
"""
