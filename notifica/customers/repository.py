"""
================================================================================
Repositório de Clientes em Memória
================================================================================

Suficiente para o exemplo: os dados vivem enquanto o processo viver.
"""

from __future__ import annotations

import threading

from .models import Customer, CustomerCreate


class InMemoryCustomerRepository:
    """
    Armazena clientes em um dict, indexado por id.

    Rotas síncronas do FastAPI rodam em threadpool; toda leitura e escrita
    passa pelo lock. O Notifier de cada requisição continua exclusivo dela.
    """

    def __init__(self) -> None:
        self._customers: dict[int, Customer] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def add_if_email_free(self, data: CustomerCreate) -> Customer | None:
        """
        Persiste o cliente se o e-mail ainda não estiver cadastrado.

        Verificação e inserção acontecem sob o mesmo lock. Retorna None
        quando o e-mail já existe.
        """
        with self._lock:
            if self._email_exists_unlocked(data.email):
                return None
            customer = Customer(
                id=self._next_id,
                name=data.name,
                email=data.email,
                age=data.age,
            )
            self._customers[customer.id] = customer
            self._next_id += 1
        return customer

    def get(self, customer_id: int) -> Customer | None:
        with self._lock:
            return self._customers.get(customer_id)

    def email_exists(self, email: str) -> bool:
        with self._lock:
            return self._email_exists_unlocked(email)

    def _email_exists_unlocked(self, email: str) -> bool:
        email = email.strip().lower()
        return any(c.email == email for c in self._customers.values())

    def list(self) -> list[Customer]:
        """Clientes em ordem de cadastro."""
        with self._lock:
            customers = list(self._customers.values())
        return sorted(customers, key=lambda c: c.id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._customers)
