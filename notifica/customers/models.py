"""
================================================================================
Modelos do Cadastro de Clientes
================================================================================

`CustomerCreate` cobre só a forma dos dados (tipos, obrigatoriedade). As regras
de negócio ficam no `CustomerService`, que acumula notificações.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator


class CustomerCreate(BaseModel):
    """
    Dados para cadastrar um cliente.

    ## Exemplo:

        {
            "name": "Maria Silva",
            "email": "maria@example.com",
            "age": 32
        }
    """

    name: str = Field(..., description="Nome completo")
    email: str = Field(..., description="E-mail de contato")
    age: int | None = Field(None, description="Idade em anos")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"name": "Maria Silva", "email": "maria@example.com", "age": 32}
            ]
        }
    }

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Nome não pode ser vazio")
        return value.strip()

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.strip().lower()


class Customer(BaseModel):
    """Cliente cadastrado."""

    id: int = Field(..., description="Identificador sequencial")
    name: str = Field(..., description="Nome completo")
    email: str = Field(..., description="E-mail (normalizado em minúsculas)")
    age: int | None = Field(None, description="Idade em anos")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Momento do cadastro (UTC)",
    )
