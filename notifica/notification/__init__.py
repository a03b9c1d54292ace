"""
================================================================================
Notification Pattern — Núcleo
================================================================================

## Fluxo:

    >>> from notifica.notification import Notifier, standardize
    >>> notifier = Notifier()
    >>> notifier.add("E-mail já cadastrado", field="email")
    >>> standardize(notifier, {"id": 1}).model_dump()
    {'success': False, 'errors': ['E-mail já cadastrado']}

O `Notifier` vive exatamente uma operação (uma requisição). Nunca reaproveite
a mesma instância entre operações diferentes: mensagens antigas vazariam para
a próxima resposta.
"""

from .models import Notification
from .notifier import Notifier
from .response import (
    FailureResponse,
    StandardResponse,
    SuccessResponse,
    standardize,
    status_code_for,
)
from .adapter import (
    ExternalError,
    FieldError,
    capture_external_errors,
    external_errors_to_notifications,
    message_of,
    pydantic_errors_to_notifications,
)
from .formatting import format_notifications_for_cli

__all__ = [
    # Modelos
    "Notification",
    "Notifier",
    # Respostas
    "SuccessResponse",
    "FailureResponse",
    "StandardResponse",
    "standardize",
    "status_code_for",
    # Adaptadores
    "ExternalError",
    "FieldError",
    "message_of",
    "external_errors_to_notifications",
    "capture_external_errors",
    "pydantic_errors_to_notifications",
    # Formatação
    "format_notifications_for_cli",
]
