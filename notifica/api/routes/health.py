"""
================================================================================
Rota: /health
================================================================================

Health check e status da API.
"""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Request

from ... import __version__
from ..schemas.common import HealthResponse


router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Verifica se a API está funcionando e retorna informações de status.",
)
async def health_check(request: Request) -> HealthResponse:
    """
    Retorna status de saúde da API.

    ## Resposta:

    - `status`: "healthy" se tudo OK
    - `version`: Versão do Notifica
    - `timestamp`: Hora atual
    - `components`: Status de componentes internos
    """
    customers = getattr(request.app.state, "customers", None)
    components = {
        "customers": "available" if customers is not None else "not_configured",
    }

    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now(timezone.utc),
        components=components,
    )
