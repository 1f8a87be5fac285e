from decimal import Decimal

import pytest

from invoicing.models.item import Category, Item
from invoicing.tax_rules.base import PercentageTaxPolicy, TaxPolicy
from invoicing.tax_rules.registry import (
    TaxPolicyRegistry,
    build_standard_registry,
    list_supported_categories,
)
from invoicing.utils.errors import InvalidReferenceError, MissingTaxRuleError


@pytest.mark.parametrize("category, rate", [
    (Category.FOOD, Decimal("5")),
    (Category.CLOTHING, Decimal("19")),
    (Category.ELECTRONICS, Decimal("25")),
])
def test_standard_registry_rates(category, rate):
    registry = build_standard_registry()

    assert registry.lookup(category).get_rate() == rate


def test_percentage_policy_computes_share_of_price():
    policy = PercentageTaxPolicy(19)
    item = Item(name="Shirt", price="25000", category=Category.CLOTHING)

    assert policy.compute(item) == Decimal("4750")


def test_percentage_policy_rejects_negative_rate():
    with pytest.raises(ValueError):
        PercentageTaxPolicy("-1")


def test_zero_price_has_zero_tax():
    policy = PercentageTaxPolicy(25)
    item = Item(name="Free cable", price="0", category=Category.ELECTRONICS)

    assert policy.compute(item) == Decimal("0")


def test_lookup_of_unregistered_category_returns_none():
    registry = TaxPolicyRegistry({Category.FOOD: PercentageTaxPolicy(5)})

    assert registry.lookup(Category.CLOTHING) is None
    assert Category.CLOTHING not in registry


def test_get_policy_raises_for_unregistered_category():
    registry = TaxPolicyRegistry()

    with pytest.raises(MissingTaxRuleError) as excinfo:
        registry.get_policy(Category.ELECTRONICS)

    assert excinfo.value.category is Category.ELECTRONICS
    assert "Electronics" in str(excinfo.value)


def test_with_policy_returns_new_registry():
    registry = TaxPolicyRegistry({Category.FOOD: PercentageTaxPolicy(5)})

    extended = registry.with_policy(Category.CLOTHING, PercentageTaxPolicy(19))

    assert Category.CLOTHING in extended
    assert Category.CLOTHING not in registry
    assert len(registry) == 1
    assert len(extended) == 2


def test_registry_is_not_affected_by_source_mapping_changes():
    source = {Category.FOOD: PercentageTaxPolicy(5)}
    registry = TaxPolicyRegistry(source)

    source[Category.CLOTHING] = PercentageTaxPolicy(19)

    assert Category.CLOTHING not in registry


def test_registry_rejects_non_policy_values():
    with pytest.raises(InvalidReferenceError):
        TaxPolicyRegistry({Category.FOOD: 5})


def test_registry_accepts_custom_policies():
    class FlatFee(TaxPolicy):
        def compute(self, item):
            return Decimal("1000")

        def get_rate(self):
            return Decimal("0")

    registry = TaxPolicyRegistry({Category.FOOD: FlatFee()})

    assert registry.get_policy(Category.FOOD).compute(
        Item(name="Bread", price="1", category=Category.FOOD)
    ) == Decimal("1000")


def test_list_supported_categories():
    entries = list_supported_categories()

    assert {entry["name"]: entry["rate"] for entry in entries} == {
        "Food": Decimal("5"),
        "Clothing": Decimal("19"),
        "Electronics": Decimal("25"),
    }
