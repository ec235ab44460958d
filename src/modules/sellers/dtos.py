"""Seller DTOs for the Service Layer.

- ``CreateSellerDTO``: input for seller registration.
- ``SellerDTO``: immutable view of a stored seller.
- ``UpdateSellerAddress`` / ``UpdateSellerHours``: the only mutations a
  stored seller accepts.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any, Dict, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from modules.sellers.models import Seller

Hour = Annotated[int, Field(ge=0, le=23)]


class CreateSellerDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    address: str = ""
    phone_number: str = ""
    open_hour: Hour = 0
    closed_hour: Hour = 0

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name must not be blank.")
        return v.strip()


class SellerDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    seller_id: int
    name: str
    address: str = ""
    phone_number: str = ""
    open_hour: int = 0
    closed_hour: int = 0

    @classmethod
    def from_entity(cls, seller: Seller) -> SellerDTO:
        return cls(
            seller_id=seller.seller_id,
            name=seller.name,
            address=seller.address,
            phone_number=seller.phone_number,
            open_hour=seller.open_hour,
            closed_hour=seller.closed_hour,
        )


class UpdateSellerAddress(BaseModel):
    model_config = ConfigDict(frozen=True)

    seller_id: int
    address: str

    def changes(self) -> Dict[str, Any]:
        return {"address": self.address}


class UpdateSellerHours(BaseModel):
    model_config = ConfigDict(frozen=True)

    seller_id: int
    open_hour: Hour = 0
    closed_hour: Hour = 0

    def changes(self) -> Dict[str, Any]:
        return {"open_hour": self.open_hour, "closed_hour": self.closed_hour}


SellerPatch = Union[UpdateSellerAddress, UpdateSellerHours]
