"""Tax rules: policies and the category registry."""
from invoicing.tax_rules.base import PercentageTaxPolicy, TaxPolicy
from invoicing.tax_rules.registry import (
    TaxPolicyRegistry,
    build_standard_registry,
    list_supported_categories,
)

__all__ = [
    "PercentageTaxPolicy",
    "TaxPolicy",
    "TaxPolicyRegistry",
    "build_standard_registry",
    "list_supported_categories",
]
