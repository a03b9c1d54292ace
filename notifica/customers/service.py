"""
================================================================================
Serviço de Clientes
================================================================================

Cada regra que falha registra uma notificação e a validação CONTINUA, para
que o chamador receba todos os problemas de uma vez.

## Para todos entenderem:

Sem o padrão, o cadastro lançaria uma exceção na primeira regra quebrada e
o usuário corrigiria um erro por vez. Com o Notifier, ele recebe a lista
completa:

    {"success": false, "errors": ["Nome deve ter ao menos 3 caracteres",
                                  "E-mail inválido"]}
"""

from __future__ import annotations

import logging
import re

from ..notification import Notifier
from .models import Customer, CustomerCreate
from .repository import InMemoryCustomerRepository

logger = logging.getLogger(__name__)


MIN_NAME_LENGTH = 3
MIN_AGE = 18

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class CustomerService:
    """
    Regras de negócio do cadastro de clientes.

    ## Exemplo:

        >>> service = CustomerService(InMemoryCustomerRepository())
        >>> notifier = Notifier()
        >>> customer = service.register(data, notifier)
        >>> if notifier.has_any():
        ...     print(notifier.messages())
    """

    def __init__(self, repository: InMemoryCustomerRepository) -> None:
        self._repository = repository

    def validate(self, data: CustomerCreate, notifier: Notifier) -> bool:
        """
        Aplica as regras de cadastro.

        Retorna False se alguma regra falhou; os detalhes ficam no Notifier.
        """
        before = len(notifier)

        if len(data.name) < MIN_NAME_LENGTH:
            notifier.add(
                f"Nome deve ter ao menos {MIN_NAME_LENGTH} caracteres",
                field="name",
            )

        if not _EMAIL_PATTERN.match(data.email):
            notifier.add("E-mail inválido", field="email")
        elif self._repository.email_exists(data.email):
            notifier.add("E-mail já cadastrado", field="email")

        if data.age is not None and data.age < MIN_AGE:
            notifier.add(f"Cliente deve ter ao menos {MIN_AGE} anos", field="age")

        return len(notifier) == before

    def register(self, data: CustomerCreate, notifier: Notifier) -> Customer | None:
        """
        Cadastra o cliente se todas as regras passarem.

        Retorna None quando há notificações; nada é persistido nesse caso.
        """
        if not self.validate(data, notifier):
            logger.info("Cadastro recusado: %d problema(s)", len(notifier))
            return None

        # Outra requisição pode ter cadastrado o mesmo e-mail após validate()
        customer = self._repository.add_if_email_free(data)
        if customer is None:
            notifier.add("E-mail já cadastrado", field="email")
            logger.info("Cadastro recusado: e-mail duplicado")
            return None

        logger.info("Cliente %d cadastrado", customer.id)
        return customer

    def get(self, customer_id: int, notifier: Notifier) -> Customer | None:
        """Busca um cliente; registra notificação se não existir."""
        customer = self._repository.get(customer_id)
        if customer is None:
            notifier.add(f"Cliente {customer_id} não encontrado", field="id")
        return customer

    def list(self) -> list[Customer]:
        return self._repository.list()
