"""
================================================================================
Adaptadores de Validação Externa
================================================================================

Frameworks costumam validar a entrada antes do nosso código rodar (no FastAPI,
o pydantic valida o body). Estes adaptadores traduzem a lista de erros do
framework em notificações, para que TODA falha saia pelo mesmo envelope.

## Regra da mensagem:

Se o erro trouxer uma causa anexada (a exceção original) com descrição, ela
vence a mensagem genérica do framework. Caso contrário, usa-se a mensagem.

    >>> message_of(FieldError(message="Erro genérico", cause=TimeoutError("timeout")))
    'timeout'
    >>> message_of(FieldError(message="required"))
    'required'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Protocol, Sequence

from .models import Notification
from .notifier import Notifier


# Prefixos de `loc` que indicam só ONDE o dado veio na requisição
_REQUEST_LOCATIONS = {"body", "query", "path", "header", "cookie"}


class ExternalError(Protocol):
    """
    Um erro produzido por uma validação externa.

    Basta expor `message` e, opcionalmente, `cause`.
    """

    @property
    def message(self) -> str:  # pragma: no cover - Protocol
        ...

    @property
    def cause(self) -> object | None:  # pragma: no cover - Protocol
        ...


@dataclass(frozen=True)
class FieldError:
    """
    Implementação simples de ExternalError.

    ## Atributos:

    - `message`: Mensagem genérica do validador
    - `cause`: Exceção (ou texto) que originou o erro, se houver
    - `field`: Campo relacionado, se houver
    """
    message: str
    cause: object | None = None
    field: str | None = None


def message_of(record: ExternalError) -> str:
    """Descrição da causa quando existir, senão a mensagem do registro."""
    cause = record.cause
    if cause is not None:
        description = str(cause)
        if description:
            return description
    return record.message


def external_errors_to_notifications(
    records: Iterable[ExternalError],
) -> list[Notification]:
    """
    Converte erros externos em notificações, um para um, na mesma ordem.
    """
    return [
        Notification(message=message_of(record), field=getattr(record, "field", None))
        for record in records
    ]


def capture_external_errors(notifier: Notifier, records: Iterable[ExternalError]) -> None:
    """
    Registra cada erro externo no Notifier.

    ## Exemplo:

        >>> notifier = Notifier()
        >>> capture_external_errors(notifier, [
        ...     FieldError(message="x", cause=TimeoutError("timeout")),
        ...     FieldError(message="required"),
        ... ])
        >>> notifier.messages()
        ['timeout', 'required']
    """
    for notification in external_errors_to_notifications(records):
        notifier.add(notification.message, field=notification.field)


def _field_path(loc: Sequence[Any]) -> str | None:
    parts = [str(part) for part in loc]
    if parts and parts[0] in _REQUEST_LOCATIONS:
        parts = parts[1:]
    return ".".join(parts) or None


def pydantic_errors_to_notifications(
    errors: Iterable[Mapping[str, Any]],
) -> list[Notification]:
    """
    Converte a lista de `errors()` do pydantic/FastAPI em notificações.

    `ctx["error"]` (quando existe) é tratado como a causa; `msg` como a
    mensagem genérica. O campo vem de `loc`, sem o prefixo de localização
    da requisição (`body`, `query`, ...).

    ## Exemplo:

        >>> pydantic_errors_to_notifications([
        ...     {"loc": ("body", "email"), "msg": "Field required", "type": "missing"},
        ... ])
        [Notification(message='Field required', field='email')]
    """
    records = [
        FieldError(
            message=str(error.get("msg", "")),
            cause=(error.get("ctx") or {}).get("error"),
            field=_field_path(error.get("loc", ())),
        )
        for error in errors
    ]
    return external_errors_to_notifications(records)
