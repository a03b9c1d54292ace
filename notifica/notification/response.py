"""
================================================================================
Padronização de Respostas
================================================================================

Na borda da operação, o estado do Notifier vira uma de duas respostas:

    Sucesso:  {"success": true,  "data": <payload ou null>}
    Falha:    {"success": false, "errors": ["mensagem 1", "mensagem 2"]}

Uma resposta de falha nunca devolve dados parciais: o payload é ignorado
sempre que houver ao menos uma notificação.
"""

from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel, Field

from .notifier import Notifier


class SuccessResponse(BaseModel):
    """
    Resposta de sucesso padronizada.

    ## Exemplo:

        {
            "success": true,
            "data": { "id": 1 }
        }
    """

    success: Literal[True] = Field(True, description="Sempre true para sucesso")
    data: Any | None = Field(None, description="Dados da resposta")


class FailureResponse(BaseModel):
    """
    Resposta de falha padronizada.

    ## Exemplo:

        {
            "success": false,
            "errors": ["E-mail já cadastrado"]
        }
    """

    success: Literal[False] = Field(False, description="Sempre false para falhas")
    errors: list[str] = Field(..., description="Mensagens na ordem em que foram registradas")


StandardResponse = Union[SuccessResponse, FailureResponse]


def standardize(notifier: Notifier, payload: Any = None) -> StandardResponse:
    """
    Converte o estado final do Notifier em uma resposta padronizada.

    ## Parâmetros:

    - `notifier`: Acumulador da operação
    - `payload`: Dados de sucesso (ignorados quando há notificações)

    ## Exemplo:

        >>> notifier = Notifier()
        >>> standardize(notifier, {"id": 1}).model_dump()
        {'success': True, 'data': {'id': 1}}
    """
    if notifier.has_any():
        return FailureResponse(errors=notifier.messages())
    return SuccessResponse(data=payload)


def status_code_for(
    response: StandardResponse,
    success_status: int = 200,
    failure_status: int = 400,
) -> int:
    """Status HTTP correspondente à resposta."""
    return success_status if response.success else failure_status
