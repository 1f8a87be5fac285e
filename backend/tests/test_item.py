from decimal import Decimal

import pytest

from invoicing.models.item import Category, Item
from invoicing.utils.errors import InvalidItemError


def test_price_text_is_parsed_as_decimal():
    item = Item(name="Bread", price="12.50", category=Category.FOOD)

    assert item.price == Decimal("12.50")
    assert item.category is Category.FOOD


def test_zero_price_is_allowed():
    item = Item(name="Sample", price=0, category=Category.FOOD)

    assert item.price == Decimal("0")


@pytest.mark.parametrize("price", ["-1", -0.01, Decimal("-100")])
def test_negative_price_is_rejected(price):
    with pytest.raises(InvalidItemError, match="price"):
        Item(name="Bread", price=price, category=Category.FOOD)


@pytest.mark.parametrize("name", [None, "", "   "])
def test_missing_or_blank_name_is_rejected(name):
    with pytest.raises(InvalidItemError, match="name"):
        Item(name=name, price="1", category=Category.FOOD)


def test_unknown_category_is_rejected():
    with pytest.raises(InvalidItemError):
        Item(name="Gift card", price="10", category="Vouchers")


def test_non_numeric_price_is_rejected():
    with pytest.raises(InvalidItemError):
        Item(name="Bread", price="abc", category=Category.FOOD)


def test_invalid_item_error_is_a_value_error():
    with pytest.raises(ValueError):
        Item(name="Bread", price="-5", category=Category.FOOD)


def test_items_are_immutable():
    item = Item(name="Bread", price="5000", category=Category.FOOD)

    with pytest.raises(Exception):
        item.price = Decimal("1")

    assert item.price == Decimal("5000")


def test_equality_is_by_value():
    first = Item(name="Shirt", price="25000", category=Category.CLOTHING)
    second = Item(name="Shirt", price=25000, category=Category.CLOTHING)
    other = Item(name="Shirt", price="25001", category=Category.CLOTHING)

    assert first == second
    assert hash(first) == hash(second)
    assert first != other


def test_name_is_stripped():
    item = Item(name="  Milk ", price="3500", category=Category.FOOD)

    assert item.name == "Milk"


def test_display_string():
    item = Item(name="Bread", price="5000", category=Category.FOOD)

    assert str(item) == "[Food] Bread - $5000.00"
