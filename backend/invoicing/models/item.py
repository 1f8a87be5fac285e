"""Invoice item model."""
from decimal import Decimal
from enum import Enum
from typing import Any
from pydantic import BaseModel, Field, ValidationError, field_validator
from invoicing.config import settings
from invoicing.utils.errors import InvalidItemError


class Category(str, Enum):
    """Product category; decides which tax policy applies to an item."""
    FOOD = "Food"
    CLOTHING = "Clothing"
    ELECTRONICS = "Electronics"


class Item(BaseModel):
    """A priced, categorized line entry. Immutable once built."""
    name: str = Field(..., description="Display name")
    price: Decimal = Field(..., ge=0, description="Unit price before tax")
    category: Category = Field(..., description="Product category")
    
    class Config:
        frozen = True
        json_encoders = {
            Decimal: str
        }
    
    def __init__(self, **data: Any):
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise InvalidItemError(_describe(e)) from e
    
    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be empty")
        return value
    
    def __str__(self) -> str:
        return f"[{self.category.value}] {self.name} - {settings.currency_symbol}{self.price:.2f}"


def _describe(error: ValidationError) -> str:
    """Flatten a pydantic validation error into a one-line message."""
    parts = []
    for detail in error.errors():
        field = ".".join(str(loc) for loc in detail["loc"]) or "item"
        parts.append(f"{field}: {detail['msg']}")
    return "Invalid item: " + "; ".join(parts)
