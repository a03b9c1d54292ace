"""
================================================================================
API Module — FastAPI com Notification Pattern
================================================================================

## Endpoints disponíveis:

| Método | Endpoint                   | Descrição                     |
|--------|----------------------------|-------------------------------|
| GET    | /health                    | Health check e versão         |
| GET    | /api/v1/health             | Health check detalhado        |
| POST   | /api/v1/customers          | Cadastrar cliente             |
| GET    | /api/v1/customers          | Listar clientes               |
| GET    | /api/v1/customers/{id}     | Buscar cliente                |

## Uso:

```python
from notifica.api import create_app

app = create_app()
# ou via CLI: notifica serve
```
"""

from .app import create_app
from .config import APIConfig
from .deps import get_notifier
from .responses import standardized_response

__all__ = [
    "create_app",
    "APIConfig",
    "get_notifier",
    "standardized_response",
]
