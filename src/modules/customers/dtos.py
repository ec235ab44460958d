"""Customer DTOs for the Service Layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict

from pydantic import BaseModel, ConfigDict, field_validator

if TYPE_CHECKING:
    from modules.customers.models import Customer


class CreateCustomerDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    address: str = ""

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name must not be blank.")
        return v.strip()


class CustomerDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    customer_id: int
    name: str
    address: str = ""

    @classmethod
    def from_entity(cls, customer: Customer) -> CustomerDTO:
        return cls(
            customer_id=customer.customer_id,
            name=customer.name,
            address=customer.address,
        )


class UpdateCustomerAddress(BaseModel):
    """The only mutation a stored customer accepts."""

    model_config = ConfigDict(frozen=True)

    customer_id: int
    address: str

    def changes(self) -> Dict[str, Any]:
        return {"address": self.address}


CustomerPatch = UpdateCustomerAddress
