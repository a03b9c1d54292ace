"""
================================================================================
CLI `notifica` — Interface de Linha de Comando
================================================================================

## Comandos disponíveis:

```bash
notifica serve                      # Inicia a API
notifica check clientes.json        # Valida payloads de cadastro
notifica --json check *.json        # Mesma coisa, saída JSON
```

O CLI é construído com:
- **Click**: Framework para CLIs em Python
- **Rich**: Formatação colorida e painéis
"""

from .main import cli

__all__ = ["cli"]
