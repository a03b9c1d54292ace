"""
================================================================================
Rotas da API
================================================================================

Este módulo agrupa todas as rotas da API.
"""

from fastapi import APIRouter

from .customers import router as customers_router
from .health import router as health_router


def create_api_router() -> APIRouter:
    """
    Cria e configura o router principal da API.

    ## Rotas registradas:

    - /health - Health check
    - /customers - Cadastro de clientes (exemplo do padrão)
    """
    router = APIRouter()

    router.include_router(health_router, tags=["Health"])
    router.include_router(customers_router, prefix="/customers", tags=["Customers"])

    return router


__all__ = ["create_api_router"]
