"""
================================================================================
Comando: notifica serve — Inicia servidor API
================================================================================

## Uso:

```bash
# Iniciar servidor padrão
notifica serve

# Modo desenvolvimento com reload
notifica serve --reload --debug

# Bind em host específico
notifica serve --host 127.0.0.1 --port 8080
```

## Documentação interativa:

- Swagger UI: http://localhost:8000/docs
- ReDoc: http://localhost:8000/redoc
"""

from __future__ import annotations

import os

import click
import uvicorn
from rich.console import Console
from rich.panel import Panel

from ...api.config import APIConfig


@click.command()
@click.option(
    "--host",
    "-h",
    type=str,
    default=None,
    help="Host para bind do servidor (padrão: NOTIFICA_API_HOST ou 0.0.0.0)"
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Porta do servidor (padrão: NOTIFICA_API_PORT ou 8000)"
)
@click.option(
    "--reload",
    is_flag=True,
    help="Modo desenvolvimento com auto-reload"
)
@click.option(
    "--debug",
    is_flag=True,
    help="Modo debug (mostra erros detalhados)"
)
@click.option(
    "--no-docs",
    is_flag=True,
    help="Desabilitar documentação interativa (/docs, /redoc)"
)
@click.pass_context
def serve(
    ctx: click.Context,
    host: str | None,
    port: int | None,
    reload: bool,
    debug: bool,
    no_docs: bool,
) -> None:
    """
    🚀 Inicia servidor API do Notifica.

    \b
    Exemplos:
      notifica serve                    # Inicia na porta 8000
      notifica serve --port 3000        # Porta customizada
      notifica serve --reload --debug   # Modo desenvolvimento
    """
    console: Console = ctx.obj.get("console", Console())
    quiet = ctx.obj.get("quiet", False)

    config = APIConfig.from_env()
    host = host or config.host
    port = port if port is not None else config.port

    # A app é criada pela factory no processo do uvicorn, que lê o ambiente
    os.environ["NOTIFICA_API_HOST"] = host
    os.environ["NOTIFICA_API_PORT"] = str(port)
    os.environ["NOTIFICA_API_DEBUG"] = "true" if debug else "false"
    os.environ["NOTIFICA_API_DOCS"] = "false" if no_docs else "true"

    if not quiet:
        _print_banner(console, host, port, reload, debug)

    try:
        uvicorn.run(
            "notifica.api.app:get_app",
            host=host,
            port=port,
            reload=reload,
            factory=True,
            log_level="debug" if debug else "info",
            access_log=debug,
        )
    except Exception as e:
        console.print(f"[red]Erro ao iniciar servidor:[/red] {e}")
        raise SystemExit(1)


def _print_banner(
    console: Console,
    host: str,
    port: int,
    reload: bool,
    debug: bool,
) -> None:
    """Imprime banner de início do servidor."""
    mode = "🔧 Development" if reload else "🚀 Production"
    debug_str = "enabled" if debug else "disabled"

    if host == "0.0.0.0":
        access_url = f"http://localhost:{port}"
    else:
        access_url = f"http://{host}:{port}"

    banner = f"""
[bold cyan]📋 Notifica API[/bold cyan]

[bold]Mode:[/bold] {mode}
[bold]Debug:[/bold] {debug_str}

[bold green]Endpoints:[/bold green]
  • API:      {access_url}/api/v1
  • Health:   {access_url}/health
  • Docs:     {access_url}/docs

[dim]Pressione Ctrl+C para encerrar[/dim]
"""

    console.print(Panel(
        banner.strip(),
        border_style="cyan",
        padding=(0, 2),
    ))
