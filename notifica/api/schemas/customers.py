"""
================================================================================
Schemas para /customers
================================================================================

Envelopes tipados, usados apenas na documentação OpenAPI.
"""

from __future__ import annotations

from pydantic import Field

from ...customers import Customer
from .common import SuccessResponse


class CustomerEnvelope(SuccessResponse):
    """
    Resposta de sucesso com um cliente.

    ## Exemplo:

        {
            "success": true,
            "data": {
                "id": 1,
                "name": "Maria Silva",
                "email": "maria@example.com",
                "age": 32,
                "created_at": "2026-01-01T12:00:00Z"
            }
        }
    """

    data: Customer | None = Field(None, description="Cliente")


class CustomerListEnvelope(SuccessResponse):
    """Resposta de sucesso com a lista de clientes."""

    data: list[Customer] = Field(default_factory=list, description="Clientes cadastrados")
