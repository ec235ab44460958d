"""Django ORM implementation of the Customer repository."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog

from modules.customers.dtos import CustomerDTO, CustomerPatch, UpdateCustomerAddress
from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def insert(self, entity: CustomerDTO) -> CustomerDTO:
        customer = Customer.objects.create(**entity.model_dump())
        logger.info("customer.stored", customer_id=customer.customer_id)
        return CustomerDTO.from_entity(customer)

    def get_by_id(self, id: int) -> Optional[CustomerDTO]:
        customer = Customer.objects.filter(customer_id=id).first()
        return CustomerDTO.from_entity(customer) if customer else None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[CustomerDTO]:
        queryset = Customer.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return [CustomerDTO.from_entity(c) for c in queryset]

    def apply(self, patch: CustomerPatch) -> Optional[CustomerDTO]:
        if not isinstance(patch, UpdateCustomerAddress):
            raise TypeError(f"Unsupported customer patch {type(patch).__name__}.")

        customer = Customer.objects.filter(customer_id=patch.customer_id).first()
        if not customer:
            return None

        changes = patch.changes()
        for field, value in changes.items():
            setattr(customer, field, value)
        customer.save(update_fields=list(changes))
        logger.info("customer.patched", customer_id=customer.customer_id)
        return CustomerDTO.from_entity(customer)
