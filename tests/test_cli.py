"""
================================================================================
Testes de Integração do CLI
================================================================================

Testes para os comandos do CLI `notifica`.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from notifica import __version__
from notifica.cli.main import cli


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def runner() -> CliRunner:
    """CliRunner para testar comandos Click."""
    return CliRunner()


def _write(tmp_path: Path, name: str, content: Any) -> str:
    path = tmp_path / name
    if isinstance(content, str):
        path.write_text(content, encoding="utf-8")
    else:
        path.write_text(json.dumps(content), encoding="utf-8")
    return str(path)


# =============================================================================
# TESTES DE HELP E VERSION
# =============================================================================


class TestCliHelp:
    """Testes do help e version."""

    def test_help_shows_commands(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "serve" in result.output
        assert "check" in result.output

    def test_version_shows_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output


# =============================================================================
# TESTES DO COMANDO CHECK
# =============================================================================


class TestCheckCommand:
    """Testes do comando check."""

    def test_valid_file(self, runner: CliRunner, tmp_path: Path) -> None:
        """Arquivo válido termina com exit code 0."""
        path = _write(tmp_path, "ok.json", {"name": "Maria Silva", "email": "maria@example.com"})

        result = runner.invoke(cli, ["check", path])

        assert result.exit_code == 0
        assert "maria@example.com" in result.output

    def test_invalid_payload_lists_all_problems(self, runner: CliRunner, tmp_path: Path) -> None:
        """Payload inválido mostra todos os problemas e sai com 1."""
        path = _write(tmp_path, "bad.json", {"name": "Jo", "email": "invalido"})

        result = runner.invoke(cli, ["check", path])

        assert result.exit_code == 1
        assert "Nome deve ter ao menos 3 caracteres" in result.output
        assert "E-mail inválido" in result.output

    def test_json_output(self, runner: CliRunner, tmp_path: Path) -> None:
        """--json devolve um envelope por payload."""
        path = _write(
            tmp_path,
            "batch.json",
            [
                {"name": "Maria Silva", "email": "maria@example.com"},
                {"name": "Maria Souza", "email": "MARIA@example.com"},
                "não é objeto",
            ],
        )

        result = runner.invoke(cli, ["--json", "check", path])

        assert result.exit_code == 1
        output = json.loads(result.stdout)
        assert output["success"] is False
        assert output["summary"] == {"total": 3, "valid": 1, "invalid": 2}

        responses = [r["response"] for r in output["results"]]
        assert responses[0]["success"] is True
        assert responses[1] == {"success": False, "errors": ["E-mail já cadastrado"]}
        assert responses[2] == {"success": False, "errors": ["Payload deve ser um objeto JSON"]}

    def test_duplicates_across_files(self, runner: CliRunner, tmp_path: Path) -> None:
        """Arquivos da mesma execução compartilham o cadastro."""
        first = _write(tmp_path, "a.json", {"name": "Maria Silva", "email": "maria@example.com"})
        second = _write(tmp_path, "b.json", {"name": "Maria Silva", "email": "maria@example.com"})

        result = runner.invoke(cli, ["--json", "check", first, second])

        output = json.loads(result.stdout)
        assert output["summary"]["invalid"] == 1
        assert output["results"][1]["response"]["errors"] == ["E-mail já cadastrado"]

    def test_schema_errors_use_cause_message(self, runner: CliRunner, tmp_path: Path) -> None:
        path = _write(tmp_path, "blank.json", {"name": " ", "email": "a@example.com"})

        result = runner.invoke(cli, ["--json", "check", path])

        output = json.loads(result.stdout)
        assert output["results"][0]["response"]["errors"] == ["Nome não pode ser vazio"]

    def test_invalid_json_file(self, runner: CliRunner, tmp_path: Path) -> None:
        """JSON quebrado vira notificação do arquivo, não exceção."""
        path = _write(tmp_path, "broken.json", "{ not json")

        result = runner.invoke(cli, ["--json", "check", path])

        assert result.exit_code == 1
        output = json.loads(result.stdout)
        errors = output["results"][0]["response"]["errors"]
        assert len(errors) == 1
        assert errors[0].startswith("JSON inválido")

    def test_non_utf8_file(self, runner: CliRunner, tmp_path: Path) -> None:
        """Arquivo que não é UTF-8 vira notificação, com saída JSON válida."""
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"name": "Jo\xe3o", "email": "joao@example.com"}')

        result = runner.invoke(cli, ["--json", "check", str(path)])

        assert result.exit_code == 1
        output = json.loads(result.stdout)
        errors = output["results"][0]["response"]["errors"]
        assert len(errors) == 1
        assert errors[0].startswith("Erro ao ler arquivo")

    def test_unreadable_file(self, runner: CliRunner, tmp_path: Path) -> None:
        """Falha de leitura (OSError) vira notificação do arquivo."""
        path = _write(tmp_path, "locked.json", {"name": "Maria Silva", "email": "maria@example.com"})

        with patch.object(Path, "read_bytes", side_effect=PermissionError("sem permissão")):
            result = runner.invoke(cli, ["--json", "check", path])

        assert result.exit_code == 1
        output = json.loads(result.stdout)
        assert output["results"][0]["response"]["errors"] == [
            "Erro ao ler arquivo: sem permissão"
        ]

    def test_missing_file(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["check", "nao_existe.json"])

        assert result.exit_code != 0


# =============================================================================
# TESTES DO COMANDO SERVE
# =============================================================================


class TestServeCommand:
    """Testes do comando serve (uvicorn mockado)."""

    def test_serve_calls_uvicorn_with_factory(self, runner: CliRunner) -> None:
        with patch("notifica.cli.commands.serve_cmd.uvicorn.run") as mock_run, \
                patch.dict("os.environ", {}, clear=False):
            result = runner.invoke(cli, ["-q", "serve", "--port", "9000", "--no-docs"])

            assert result.exit_code == 0
            mock_run.assert_called_once()
            args, kwargs = mock_run.call_args
            assert args[0] == "notifica.api.app:get_app"
            assert kwargs["port"] == 9000
            assert kwargs["factory"] is True
            assert os.environ["NOTIFICA_API_DOCS"] == "false"

    def test_serve_defaults_come_from_environment(self, runner: CliRunner) -> None:
        """Sem --host/--port, usa NOTIFICA_API_HOST e NOTIFICA_API_PORT."""
        env = {"NOTIFICA_API_HOST": "127.0.0.1", "NOTIFICA_API_PORT": "9100"}
        with patch("notifica.cli.commands.serve_cmd.uvicorn.run") as mock_run, \
                patch.dict("os.environ", env, clear=False):
            result = runner.invoke(cli, ["-q", "serve"])

            assert result.exit_code == 0
            _, kwargs = mock_run.call_args
            assert kwargs["host"] == "127.0.0.1"
            assert kwargs["port"] == 9100

    def test_serve_options_override_environment(self, runner: CliRunner) -> None:
        with patch("notifica.cli.commands.serve_cmd.uvicorn.run") as mock_run, \
                patch.dict("os.environ", {"NOTIFICA_API_PORT": "9100"}, clear=False):
            result = runner.invoke(cli, ["-q", "serve", "--port", "9200"])

            assert result.exit_code == 0
            assert mock_run.call_args.kwargs["port"] == 9200
