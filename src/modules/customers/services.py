"""Customer service layer (Use Cases)."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog

from modules.customers.dtos import CustomerDTO, UpdateCustomerAddress
from modules.customers.exceptions import CustomerNotFound
from modules.sequences.constants import CUSTOMER_SEQUENCE

if TYPE_CHECKING:
    from modules.customers.dtos import CreateCustomerDTO
    from modules.customers.repositories.interfaces import ICustomerRepository
    from modules.sequences.services import SequenceAllocator

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` and the allocator via constructor
    injection (DIP).
    """

    def __init__(
        self, repository: ICustomerRepository, allocator: SequenceAllocator
    ) -> None:
        self._repo = repository
        self._allocator = allocator

    def create_customer(self, dto: CreateCustomerDTO) -> CustomerDTO:
        customer_id = self._allocator.next(CUSTOMER_SEQUENCE)
        customer = self._repo.insert(
            CustomerDTO(customer_id=customer_id, **dto.model_dump())
        )
        logger.info("customer.created", customer_id=customer_id)
        return customer

    def get_customer(self, customer_id: int) -> CustomerDTO:
        """Raises ``CustomerNotFound`` if the customer does not exist."""
        customer = self._repo.get_by_id(customer_id)
        if not customer:
            raise CustomerNotFound(customer_id)
        return customer

    def list_customers(self) -> List[CustomerDTO]:
        return self._repo.list()

    def update_address(self, customer_id: int, address: str) -> CustomerDTO:
        customer = self._repo.apply(
            UpdateCustomerAddress(customer_id=customer_id, address=address)
        )
        if not customer:
            raise CustomerNotFound(customer_id)
        return customer
