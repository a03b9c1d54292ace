"""
================================================================================
Exemplo: Cadastro de Clientes
================================================================================

Domínio de exemplo que usa o Notification Pattern de ponta a ponta:

- `models`: Schemas pydantic de entrada e o cliente cadastrado
- `repository`: Armazenamento em memória
- `service`: Regras de negócio que registram notificações em vez de lançar
"""

from .models import Customer, CustomerCreate
from .repository import InMemoryCustomerRepository
from .service import CustomerService

__all__ = [
    "Customer",
    "CustomerCreate",
    "InMemoryCustomerRepository",
    "CustomerService",
]
