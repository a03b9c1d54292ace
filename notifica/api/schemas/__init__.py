"""
================================================================================
Schemas de Request/Response da API
================================================================================

Define os modelos Pydantic para documentação de saída.
"""

from .common import (
    FailureResponse,
    HealthResponse,
    SuccessResponse,
)
from .customers import (
    CustomerEnvelope,
    CustomerListEnvelope,
)

__all__ = [
    # Common
    "FailureResponse",
    "HealthResponse",
    "SuccessResponse",
    # Customers
    "CustomerEnvelope",
    "CustomerListEnvelope",
]
