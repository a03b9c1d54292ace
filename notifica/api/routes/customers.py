"""
================================================================================
Rota: /customers
================================================================================

Cadastro de clientes, o exemplo clássico do Notification Pattern.

Cada rota recebe um Notifier novo, delega ao serviço e devolve
`standardized_response`. Nenhuma rota lança exceção para erro de negócio.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ...customers import CustomerCreate, CustomerService
from ...notification import Notifier
from ..deps import get_customer_service, get_notifier
from ..responses import standardized_response
from ..schemas.common import FailureResponse
from ..schemas.customers import CustomerEnvelope, CustomerListEnvelope


router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=CustomerEnvelope,
    responses={400: {"model": FailureResponse}},
    summary="Cadastrar Cliente",
    description="""
Cadastra um cliente.

## Regras:

- Nome com ao menos 3 caracteres
- E-mail válido e ainda não cadastrado
- Idade mínima de 18 anos (quando informada)

Todas as regras são verificadas; a resposta de falha lista todos os
problemas encontrados, na ordem em que foram verificados.
    """,
)
def create_customer(
    request: CustomerCreate,
    notifier: Notifier = Depends(get_notifier),
    service: CustomerService = Depends(get_customer_service),
) -> JSONResponse:
    """
    Cadastra um cliente.

    ## Retorna:

    - **201**: `{"success": true, "data": {...cliente...}}`
    - **400**: `{"success": false, "errors": [...]}`
    """
    customer = service.register(request, notifier)
    return standardized_response(
        notifier,
        customer,
        success_status=status.HTTP_201_CREATED,
    )


@router.get(
    "",
    response_model=CustomerListEnvelope,
    summary="Listar Clientes",
)
def list_customers(
    notifier: Notifier = Depends(get_notifier),
    service: CustomerService = Depends(get_customer_service),
) -> JSONResponse:
    """Lista os clientes em ordem de cadastro."""
    return standardized_response(notifier, service.list())


@router.get(
    "/{customer_id}",
    response_model=CustomerEnvelope,
    responses={404: {"model": FailureResponse}},
    summary="Buscar Cliente",
)
def get_customer(
    customer_id: int,
    notifier: Notifier = Depends(get_notifier),
    service: CustomerService = Depends(get_customer_service),
) -> JSONResponse:
    """Busca um cliente pelo id."""
    customer = service.get(customer_id, notifier)
    return standardized_response(
        notifier,
        customer,
        failure_status=status.HTTP_404_NOT_FOUND,
    )
