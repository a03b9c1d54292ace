"""
================================================================================
CLI Principal — Entry Point e Configuração
================================================================================

Este módulo define o comando `notifica` e registra os subcomandos.

## Arquitetura:

```
notifica (grupo principal)
├── serve  → Inicia a API FastAPI
└── check  → Valida payloads de cadastro de clientes
```

## Flags Globais:

- `--verbose / -v` → Modo verbose (mais detalhes)
- `--quiet / -q` → Modo silencioso (só erros)
- `--json` → Saída estruturada JSON (para CI/CD)
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from .. import __version__

# Console global para output formatado
console = Console()
error_console = Console(stderr=True)

# Console silencioso (para modo --quiet)
quiet_console = Console(quiet=True)


def setup_logging(verbose: bool, quiet: bool) -> None:
    """Configura logging baseado em flags."""
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_time=False, show_path=False)],
    )


# =============================================================================
# GRUPO PRINCIPAL
# =============================================================================


@click.group()
@click.version_option(version=__version__, prog_name="notifica")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Modo verbose (mostra mais detalhes)",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Modo silencioso (suprime banners, mostra só erros)",
)
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Saída estruturada em JSON (para CI/CD)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool, json_output: bool) -> None:
    """
    📋 Notifica — Notification Pattern

    Acumula erros de validação em vez de lançar exceções e responde
    sempre no mesmo envelope.

    \b
    Exemplos:
      notifica serve                  # Inicia a API
      notifica check clientes.json    # Valida payloads
      notifica --json check *.json    # Saída JSON

    \b
    Flags Globais:
      -v, --verbose  Mostra logs detalhados
      -q, --quiet    Suprime saída (só erros)
      --json         Saída JSON estruturada
    """
    setup_logging(verbose, quiet)

    # Armazena configuração no contexto para passar aos subcomandos
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["json_output"] = json_output

    if json_output or quiet:
        ctx.obj["console"] = quiet_console
    else:
        ctx.obj["console"] = console

    ctx.obj["error_console"] = error_console


# =============================================================================
# IMPORTA E REGISTRA SUBCOMANDOS
# =============================================================================

# Importamos os comandos aqui para evitar imports circulares
from .commands.serve_cmd import serve
from .commands.check_cmd import check

cli.add_command(serve)
cli.add_command(check)


# =============================================================================
# PONTO DE ENTRADA
# =============================================================================


def main() -> None:
    """Entry point para o comando `notifica`."""
    cli()


if __name__ == "__main__":
    main()
