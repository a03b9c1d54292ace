"""
================================================================================
Comando: notifica check — Valida Payloads de Cadastro
================================================================================

Passa payloads de cadastro de clientes pelo mesmo caminho da API: validação
do schema, regras do CustomerService e padronização da resposta.

## Formato dos arquivos:

Um objeto JSON (um cliente) ou uma lista de objetos.

## Uso:

```bash
# Valida um arquivo
notifica check clientes.json

# Valida vários arquivos (e-mails duplicados entre eles são detectados)
notifica check lote1.json lote2.json

# Saída JSON para CI
notifica --json check clientes.json
```
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel

from ...customers import CustomerCreate, CustomerService, InMemoryCustomerRepository
from ...notification import (
    Notifier,
    format_notifications_for_cli,
    pydantic_errors_to_notifications,
    standardize,
)


def _load_payloads(path: Path, notifier: Notifier) -> list[Any]:
    """Lê o arquivo; problemas de leitura viram notificação."""
    try:
        text = path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        notifier.add(f"Erro ao ler arquivo: {e}")
        return []

    try:
        content = json.loads(text)
    except json.JSONDecodeError as e:
        notifier.add(f"JSON inválido: {e}")
        return []

    if isinstance(content, list):
        return content
    return [content]


def check_payload(
    payload: Any,
    service: CustomerService,
    notifier: Notifier,
) -> dict[str, Any]:
    """
    Valida e cadastra um payload, devolvendo o envelope padronizado.

    O Notifier deve ser exclusivo deste payload.
    """
    customer = None

    if not isinstance(payload, dict):
        notifier.add("Payload deve ser um objeto JSON")
    else:
        try:
            data = CustomerCreate.model_validate(payload)
        except ValidationError as e:
            notifier.extend(pydantic_errors_to_notifications(e.errors()))
        else:
            customer = service.register(data, notifier)

    return standardize(notifier, customer).model_dump(mode="json")


@click.command()
@click.argument(
    "files",
    nargs=-1,
    type=click.Path(exists=True, dir_okay=False),
    required=True,
)
@click.pass_context
def check(ctx: click.Context, files: tuple[str, ...]) -> None:
    """
    Valida um ou mais arquivos de cadastro de clientes.

    Cada payload é validado de forma independente e todos os problemas
    de um payload são listados de uma vez.
    """
    console: Console = ctx.obj["console"]
    verbose: bool = ctx.obj["verbose"]
    json_output: bool = ctx.obj.get("json_output", False)

    service = CustomerService(InMemoryCustomerRepository())
    results: list[dict[str, Any]] = []

    for file_path in files:
        path = Path(file_path)
        console.print(f"\n🔍 Verificando: [cyan]{path.name}[/cyan]")

        file_notifier = Notifier()
        payloads = _load_payloads(path, file_notifier)

        if file_notifier.has_any():
            results.append({
                "file": str(path),
                "index": None,
                "response": standardize(file_notifier).model_dump(mode="json"),
            })
            console.print(format_notifications_for_cli(file_notifier.all()))
            continue

        for index, payload in enumerate(payloads):
            notifier = Notifier()
            response = check_payload(payload, service, notifier)
            results.append({"file": str(path), "index": index, "response": response})

            if response["success"]:
                console.print(f"  [green]✅ [{index}] {response['data']['email']}[/green]")
            else:
                console.print(f"  [red]❌ [{index}] {len(notifier)} problema(s)[/red]")
                console.print(format_notifications_for_cli(notifier.all(), show_fields=verbose))

    failed = sum(1 for r in results if not r["response"]["success"])
    all_ok = failed == 0

    if json_output:
        output: dict[str, Any] = {
            "success": all_ok,
            "results": results,
            "summary": {
                "total": len(results),
                "valid": len(results) - failed,
                "invalid": failed,
            },
        }
        click.echo(json.dumps(output, indent=2, ensure_ascii=False))
        raise SystemExit(0 if all_ok else 1)

    console.print()
    if all_ok:
        console.print(Panel(
            f"[green]✅ {len(results)} payload(s) válido(s)[/green]",
            border_style="green",
        ))
    else:
        console.print(Panel(
            f"[red]❌ {failed} de {len(results)} payload(s) com problemas[/red]",
            border_style="red",
        ))
        raise SystemExit(1)
