"""Customer domain exceptions."""

from __future__ import annotations

from modules.core.exceptions import DomainError


class CustomerNotFound(DomainError):
    """The referenced customer does not exist."""

    code = "customer_not_found"

    def __init__(self, customer_id: int) -> None:
        super().__init__(f"Customer {customer_id} not found.", customer_id=customer_id)
        self.customer_id = customer_id
