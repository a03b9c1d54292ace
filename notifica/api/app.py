"""
================================================================================
FastAPI Application Factory
================================================================================

Cria e configura a aplicação FastAPI do Notifica.

## Uso:

```python
from notifica.api import create_app

app = create_app()
```

## Via CLI:

```bash
notifica serve --port 8000 --reload
```
"""

from __future__ import annotations

import logging
import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..customers import InMemoryCustomerRepository
from ..notification import FailureResponse, Notifier, pydantic_errors_to_notifications
from .config import APIConfig
from .responses import standardized_response
from .routes import create_api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Gerencia ciclo de vida da aplicação.

    - Startup: registra o horário de início
    - Shutdown: nada a liberar (armazenamento em memória)
    """
    app.state.start_time = datetime.now(timezone.utc)
    logger.info("Notifica API iniciada")

    yield

    logger.info("Notifica API encerrada")


def create_app(config: APIConfig | None = None) -> FastAPI:
    """
    Cria e configura a aplicação FastAPI.

    ## Parâmetros:

    - `config`: Configuração da API. Se None, usa valores de ambiente.

    ## Retorna:

    Aplicação FastAPI configurada com:
    - CORS habilitado
    - Erros de validação convertidos em notificações
    - Rotas registradas
    - Documentação OpenAPI

    ## Exemplo:

        >>> app = create_app()
        >>> # ou com config customizada
        >>> app = create_app(APIConfig(port=3000, debug=True))
    """
    if config is None:
        config = APIConfig.from_env()

    app = FastAPI(
        title="Notifica API",
        description="""
## 📋 Notifica — Notification Pattern

Erros de validação são acumulados e devolvidos de uma vez, sempre no
mesmo envelope:

- Sucesso: `{"success": true, "data": ...}`
- Falha: `{"success": false, "errors": ["..."]}`
        """,
        version=__version__,
        docs_url="/docs" if config.docs_enabled else None,
        redoc_url="/redoc" if config.docs_enabled else None,
        openapi_url="/openapi.json" if config.docs_enabled else None,
        lifespan=lifespan,
    )

    app.state.config = config
    app.state.customers = InMemoryCustomerRepository()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Nota: Funções decoradas são registradas pelo FastAPI, não acessadas diretamente
    @app.middleware("http")
    async def add_request_id(  # pyright: ignore[reportUnusedFunction]
        request: Request,
        call_next: Any
    ) -> Any:
        request_id = request.headers.get("X-Request-ID", uuid.uuid4().hex[:12])
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response

    # Validação do framework (body, query, path) vira notificação
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(  # pyright: ignore[reportUnusedFunction]
        request: Request,
        exc: RequestValidationError
    ) -> JSONResponse:
        notifier = Notifier()
        notifier.extend(pydantic_errors_to_notifications(exc.errors()))
        return standardized_response(notifier)

    @app.exception_handler(Exception)
    async def generic_exception_handler(  # pyright: ignore[reportUnusedFunction]
        request: Request,
        exc: Exception
    ) -> JSONResponse:
        # Respondido fora do middleware de request_id: o header vai aqui
        request_id = getattr(request.state, "request_id", None) or request.headers.get(
            "X-Request-ID", uuid.uuid4().hex[:12]
        )
        logger.exception("Erro não tratado (request_id=%s)", request_id)
        if config.debug:
            error_detail = str(exc)
        else:
            error_detail = "Erro interno do servidor"

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=FailureResponse(errors=[error_detail]).model_dump(),
            headers={"X-Request-ID": request_id},
        )

    api_router = create_api_router()
    app.include_router(api_router, prefix=config.api_prefix)

    # Rota de health check na raiz (sem prefixo)
    @app.get("/health", tags=["Health"])
    async def root_health() -> dict[str, Any]:  # pyright: ignore[reportUnusedFunction]
        """Health check na raiz."""
        return {
            "status": "healthy",
            "version": __version__,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    return app


def get_app() -> FastAPI:
    """
    Retorna instância da app para uso com uvicorn.

    ## Uso com uvicorn:

    ```bash
    uvicorn notifica.api.app:get_app --factory --reload
    ```
    """
    return create_app()
