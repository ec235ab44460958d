"""Customer repository interface."""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.dtos import CustomerDTO, CustomerPatch


class ICustomerRepository(IRepository["CustomerDTO", "CustomerPatch"]):
    """Repository contract for customers."""
