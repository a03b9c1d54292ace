"""
================================================================================
Schemas Comuns da API
================================================================================

Modelos base reutilizados em múltiplos endpoints. Os envelopes de sucesso e
falha vêm do núcleo (`notifica.notification.response`).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from ...notification import FailureResponse, SuccessResponse


class HealthResponse(BaseModel):
    """
    Resposta do health check.
    """

    status: str = Field(..., description="Status do serviço", examples=["healthy"])
    version: str = Field(..., description="Versão do Notifica", examples=["0.2.0"])
    timestamp: datetime = Field(..., description="Timestamp do check")
    components: dict[str, str] = Field(
        default_factory=dict,
        description="Status dos componentes internos"
    )


__all__ = ["FailureResponse", "HealthResponse", "SuccessResponse"]
