"""Menu DTOs for the Service Layer.

- ``CreateMenuDTO``: input for publishing a menu.
- ``MenuDTO``: immutable view of a stored menu; also the snapshot that
  order lines embed.
- ``UpdateMenuPrice``: the only mutation a stored menu accepts.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from modules.menus.models import Menu


class CreateMenuDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    seller_id: int
    name: str
    description: str = ""
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    calorie: float = Field(default=0, ge=0)
    image_url: str = ""

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name must not be blank.")
        return v.strip()


class MenuDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    menu_id: int
    seller_id: int
    name: str
    description: str = ""
    price: Decimal
    calorie: float = 0
    image_url: str = ""

    @classmethod
    def from_entity(cls, menu: Menu) -> MenuDTO:
        return cls(
            menu_id=menu.menu_id,
            seller_id=menu.seller_id,
            name=menu.name,
            description=menu.description,
            price=menu.price,
            calorie=menu.calorie,
            image_url=menu.image_url,
        )


class UpdateMenuPrice(BaseModel):
    model_config = ConfigDict(frozen=True)

    menu_id: int
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)

    def changes(self) -> Dict[str, Any]:
        return {"price": self.price}


MenuPatch = UpdateMenuPrice
