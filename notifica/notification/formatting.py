"""
Formatação de notificações para o terminal (markup Rich).
"""

from __future__ import annotations

from typing import Iterable

from .models import Notification


def format_notifications_for_cli(
    notifications: Iterable[Notification],
    show_fields: bool = True,
) -> str:
    """
    Formata notificações como lista com markup Rich.

    ## Parâmetros:

    - `notifications`: Notificações a formatar
    - `show_fields`: Se True, inclui o campo relacionado quando houver
    """
    lines: list[str] = []
    for notification in notifications:
        line = f"[red]• {notification.message}[/red]"
        if show_fields and notification.field:
            line += f" [dim]({notification.field})[/dim]"
        lines.append(line)

    if not lines:
        return "[green]✓ Nenhuma notificação[/green]"

    return "\n".join(lines)
