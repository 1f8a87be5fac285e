"""Standard tax rates per product category."""
from decimal import Decimal
from invoicing.models.item import Category

FOOD_TAX_RATE = Decimal("5")
CLOTHING_TAX_RATE = Decimal("19")
ELECTRONICS_TAX_RATE = Decimal("25")

# A new category needs a Category member and one entry here
STANDARD_TAX_RATES = {
    Category.FOOD: FOOD_TAX_RATE,
    Category.CLOTHING: CLOTHING_TAX_RATE,
    Category.ELECTRONICS: ELECTRONICS_TAX_RATE,
}
