"""
================================================================================
Respostas HTTP Padronizadas
================================================================================

Em vez de uma controller base com helpers herdados, uma função livre:
qualquer rota chama `standardized_response(notifier, payload)`.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse

from ..notification import Notifier, standardize, status_code_for

logger = logging.getLogger(__name__)


def standardized_response(
    notifier: Notifier,
    payload: Any = None,
    success_status: int = status.HTTP_200_OK,
    failure_status: int = status.HTTP_400_BAD_REQUEST,
) -> JSONResponse:
    """
    Monta a JSONResponse a partir do Notifier da requisição.

    ## Parâmetros:

    - `notifier`: Notifier da requisição
    - `payload`: Dados de sucesso (ignorados se houver notificações)
    - `success_status`: Status para sucesso (padrão 200)
    - `failure_status`: Status para falha (padrão 400)
    """
    response = standardize(notifier, payload)
    status_code = status_code_for(response, success_status, failure_status)

    if not response.success:
        logger.info("Requisição falhou com %d notificação(ões)", len(notifier))

    return JSONResponse(
        status_code=status_code,
        content=response.model_dump(mode="json"),
    )
