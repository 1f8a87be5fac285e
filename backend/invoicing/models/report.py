"""Invoice report models."""
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field
from invoicing.models.item import Item


class InvoiceLine(BaseModel):
    """One item as rendered on a receipt."""
    item: Item = Field(..., description="The invoiced item")
    tax_rate: Optional[Decimal] = Field(None, description="Applied rate in percent; None when no rule exists")
    tax_amount: Decimal = Field(default=Decimal("0"), description="Tax owed for this line")
    line_total: Decimal = Field(..., description="Price plus tax")
    
    class Config:
        json_encoders = {
            Decimal: str
        }


class InvoiceSummary(BaseModel):
    """Invoice-wide totals."""
    subtotal: Decimal = Field(default=Decimal("0"), description="Sum of item prices")
    total_tax: Decimal = Field(default=Decimal("0"), description="Sum of per-item tax")
    total: Decimal = Field(default=Decimal("0"), description="Subtotal plus tax")
    item_count: int = Field(default=0, description="Number of items")
    
    class Config:
        json_encoders = {
            Decimal: str
        }
