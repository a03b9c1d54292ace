"""
================================================================================
Notification — Registro de Falha
================================================================================

Uma notificação é só um dado: a mensagem de uma validação que falhou e,
opcionalmente, o campo a que ela se refere.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Notification:
    """
    Uma falha de validação registrada durante uma operação.

    ## Atributos:

    - `message`: Mensagem legível do erro
    - `field`: Caminho do campo relacionado (ex: "email", "address.zip"), opcional

    ## Exemplo:

        >>> Notification("Nome é obrigatório", field="name")
        Notification(message='Nome é obrigatório', field='name')
    """
    message: str
    field: str | None = None

    def __str__(self) -> str:
        if self.field:
            return f"{self.field}: {self.message}"
        return self.message
