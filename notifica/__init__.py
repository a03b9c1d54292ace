"""
================================================================================
Notifica — Notification Pattern para APIs Python
================================================================================

Em vez de lançar exceções (ou devolver só um booleano) a cada regra de
validação que falha, acumulamos mensagens em uma lista e decidimos a resposta
uma única vez, na borda da operação.

## Pacotes:

- `notifica.notification`: Notification, Notifier, standardize e adaptadores
- `notifica.api`: aplicação FastAPI que usa o padrão por requisição
- `notifica.customers`: exemplo de cadastro de clientes
- `notifica.cli`: comando `notifica`
"""

__version__ = "0.2.0"
