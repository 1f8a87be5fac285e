"""Itemized invoices with per-category tax policies."""
from invoicing.models.invoice import Invoice
from invoicing.models.item import Category, Item
from invoicing.tax_rules.registry import TaxPolicyRegistry, build_standard_registry
from invoicing.utils.errors import (
    InvalidItemError,
    InvalidReferenceError,
    InvoicingError,
    MissingTaxRuleError,
)

__version__ = "1.0.0"

__all__ = [
    "Category",
    "InvalidItemError",
    "InvalidReferenceError",
    "Invoice",
    "InvoicingError",
    "Item",
    "MissingTaxRuleError",
    "TaxPolicyRegistry",
    "build_standard_registry",
]
