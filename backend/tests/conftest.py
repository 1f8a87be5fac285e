import pytest

from invoicing.models.invoice import Invoice
from invoicing.models.item import Category, Item
from invoicing.tax_rules.registry import build_standard_registry


@pytest.fixture
def registry():
    return build_standard_registry()


@pytest.fixture
def invoice(registry):
    return Invoice(registry)


@pytest.fixture
def grocery_items():
    return [
        Item(name="Bread", price="5000", category=Category.FOOD),
        Item(name="Milk", price="3500", category=Category.FOOD),
        Item(name="Shirt", price="25000", category=Category.CLOTHING),
        Item(name="Laptop", price="1500000", category=Category.ELECTRONICS),
    ]
