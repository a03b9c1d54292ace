"""
================================================================================
Dependências Injetáveis da API
================================================================================

Define dependências que podem ser injetadas nos endpoints via FastAPI Depends.

O ponto central é `get_notifier`: cada requisição recebe um Notifier NOVO.
Dentro da mesma requisição o FastAPI reaproveita a instância (cache de
dependências), então rota e sub-dependências enxergam a mesma lista.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Request

from ..customers import CustomerService, InMemoryCustomerRepository
from ..notification import Notifier


def get_notifier() -> Generator[Notifier, None, None]:
    """
    Fornece um Notifier exclusivo da requisição.

    ## Uso em endpoint:

        >>> @router.post("/")
        >>> def endpoint(notifier: Notifier = Depends(get_notifier)):
        ...     notifier.add("Algo deu errado")
    """
    notifier = Notifier()
    yield notifier


def get_customer_repository(request: Request) -> InMemoryCustomerRepository:
    """Repositório compartilhado pela aplicação (vive em app.state)."""
    return request.app.state.customers


def get_customer_service(request: Request) -> Generator[CustomerService, None, None]:
    """
    Fornece instância de CustomerService.

    ## Uso em endpoint:

        >>> @router.post("/customers")
        >>> def create(service: CustomerService = Depends(get_customer_service)):
        ...     service.register(data, notifier)
    """
    service = CustomerService(get_customer_repository(request))
    yield service
