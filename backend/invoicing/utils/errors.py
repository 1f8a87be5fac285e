"""Custom error classes."""
from typing import Optional


class InvoicingError(Exception):
    """Base exception for the invoicing package."""
    pass


class InvalidItemError(InvoicingError, ValueError):
    """Item could not be constructed (missing name, negative price, ...)."""
    pass


class InvalidReferenceError(InvoicingError, TypeError):
    """A required collaborator (registry, item, invoice) was absent or of the wrong type."""
    pass


class MissingTaxRuleError(InvoicingError, LookupError):
    """No tax policy is registered for an item's category."""

    def __init__(self, category, message: Optional[str] = None):
        self.category = category
        label = getattr(category, "value", category)
        super().__init__(message or f"No tax rule registered for category '{label}'")
