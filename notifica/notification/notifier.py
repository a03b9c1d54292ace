"""
================================================================================
Notifier — Acumulador de Notificações
================================================================================

Guarda, em ordem de inserção, as notificações de UMA operação.

## Para todos entenderem:

Pense em um fiscal com uma prancheta. A cada irregularidade ele anota uma
linha e continua a vistoria, em vez de interromper tudo na primeira falha.
No fim, basta olhar se a prancheta tem alguma linha.

## Regras:

- Só cresce: a única mutação é acrescentar no final
- A ordem das notificações é a ordem em que as validações rodaram
- Uma instância por operação (requisição); nunca compartilhe
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from .models import Notification

logger = logging.getLogger(__name__)


class Notifier:
    """
    Acumulador de notificações de uma operação.

    ## Exemplo:

        >>> notifier = Notifier()
        >>> notifier.has_any()
        False
        >>> notifier.add("A")
        >>> notifier.add("B")
        >>> notifier.messages()
        ['A', 'B']
    """

    def __init__(self) -> None:
        self._notifications: list[Notification] = []

    def add(self, message: str, field: str | None = None) -> None:
        """
        Acrescenta uma notificação ao final da lista.

        Nunca falha. Mensagens vazias são guardadas como vieram; valores que
        não são texto são convertidos com str().
        """
        self.add_notification(Notification(message=str(message), field=field))

    def add_notification(self, notification: Notification) -> None:
        """Acrescenta uma notificação já construída."""
        self._notifications.append(notification)
        logger.debug("Notificação registrada: %s", notification)

    def extend(self, notifications: Iterable[Notification]) -> None:
        """Acrescenta várias notificações, preservando a ordem."""
        for notification in notifications:
            self.add_notification(notification)

    def has_any(self) -> bool:
        """True se ao menos uma notificação foi registrada."""
        return len(self._notifications) > 0

    def all(self) -> list[Notification]:
        """
        Retorna uma cópia das notificações, em ordem de inserção.

        Alterar a lista retornada não afeta o Notifier.
        """
        return self._notifications.copy()

    def messages(self) -> list[str]:
        """Apenas as mensagens, em ordem."""
        return [str(n.message) for n in self._notifications]

    def __len__(self) -> int:
        return len(self._notifications)

    def __iter__(self) -> Iterator[Notification]:
        return iter(self.all())

    def __repr__(self) -> str:
        return f"Notifier(notifications={self._notifications!r})"
