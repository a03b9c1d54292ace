"""
================================================================================
Testes: Adaptadores de Validação Externa
================================================================================
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ValidationError, field_validator

from notifica.notification import (
    FieldError,
    Notification,
    Notifier,
    capture_external_errors,
    external_errors_to_notifications,
    message_of,
    pydantic_errors_to_notifications,
)


class TestMessageOf:
    """Testes para a escolha da mensagem."""

    def test_prefers_cause_description(self) -> None:
        """Causa com descrição vence a mensagem genérica."""
        record = FieldError(message="Erro genérico", cause=TimeoutError("timeout"))

        assert message_of(record) == "timeout"

    def test_falls_back_to_message(self) -> None:
        """Sem causa, usa a mensagem."""
        assert message_of(FieldError(message="required")) == "required"

    def test_empty_cause_falls_back_to_message(self) -> None:
        """Causa sem descrição não apaga a mensagem."""
        record = FieldError(message="required", cause=ValueError())

        assert message_of(record) == "required"

    def test_accepts_any_object_with_message_and_cause(self) -> None:
        """Qualquer objeto com `message` e `cause` serve."""

        class FrameworkError:
            message = "genérico"
            cause = "detalhado"

        assert message_of(FrameworkError()) == "detalhado"


class TestExternalErrors:
    """Testes para external_errors_to_notifications e capture_external_errors."""

    def test_maps_cause_then_message_in_order(self) -> None:
        """Dois erros de campo viram ["timeout", "required"], nessa ordem."""
        records = [
            FieldError(message="The value is invalid", cause=TimeoutError("timeout")),
            FieldError(message="required"),
        ]

        notifier = Notifier()
        capture_external_errors(notifier, records)

        assert notifier.messages() == ["timeout", "required"]

    def test_one_to_one_with_fields(self) -> None:
        """Cada registro gera exatamente uma notificação, com o campo."""
        records = [
            FieldError(message="a", field="name"),
            FieldError(message="b"),
            FieldError(message="a", field="name"),
        ]

        assert external_errors_to_notifications(records) == [
            Notification("a", field="name"),
            Notification("b"),
            Notification("a", field="name"),
        ]

    def test_capture_appends_after_existing(self) -> None:
        """Captura acrescenta depois do que já havia no Notifier."""
        notifier = Notifier()
        notifier.add("anterior")

        capture_external_errors(notifier, [FieldError(message="novo")])

        assert notifier.messages() == ["anterior", "novo"]

    def test_empty_list_adds_nothing(self) -> None:
        notifier = Notifier()
        capture_external_errors(notifier, [])

        assert notifier.has_any() is False


class _Signup(BaseModel):
    name: str
    email: str

    @field_validator("name")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Nome não pode ser vazio")
        return value


class TestPydanticErrors:
    """Testes para pydantic_errors_to_notifications."""

    def test_from_request_errors(self) -> None:
        """Formato de erros do FastAPI: prefixo `body` é removido do campo."""
        errors: list[dict[str, Any]] = [
            {"loc": ("body", "email"), "msg": "Field required", "type": "missing"},
            {
                "loc": ("body", "address", "zip"),
                "msg": "Value error, CEP inválido",
                "type": "value_error",
                "ctx": {"error": ValueError("CEP inválido")},
            },
            {"loc": ("body",), "msg": "Field required", "type": "missing"},
        ]

        assert pydantic_errors_to_notifications(errors) == [
            Notification("Field required", field="email"),
            Notification("CEP inválido", field="address.zip"),
            Notification("Field required", field=None),
        ]

    def test_from_pydantic_validation_error(self) -> None:
        """Erros reais do pydantic: ValueError do validator é a causa."""
        try:
            _Signup.model_validate({"name": "   "})
        except ValidationError as e:
            notifications = pydantic_errors_to_notifications(e.errors())
        else:  # pragma: no cover
            raise AssertionError("esperava ValidationError")

        assert [n.message for n in notifications] == [
            "Nome não pode ser vazio",
            "Field required",
        ]
        assert [n.field for n in notifications] == ["name", "email"]
