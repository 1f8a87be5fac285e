"""Invoice aggregate."""
import logging
from decimal import Decimal
from typing import List, Tuple
from invoicing.models.item import Item
from invoicing.models.report import InvoiceSummary
from invoicing.tax_rules.registry import TaxPolicyRegistry
from invoicing.utils.errors import InvalidReferenceError, MissingTaxRuleError

logger = logging.getLogger(__name__)


class Invoice:
    """
    Ordered, append-only collection of items taxed through a shared registry.
    
    The registry is referenced, not owned: several invoices may share it.
    Subtotal never depends on the registry. Tax and total are strict: if any
    item's category has no policy the whole computation raises
    MissingTaxRuleError instead of returning a partial amount.
    """
    
    def __init__(self, registry: TaxPolicyRegistry):
        if registry is None:
            raise InvalidReferenceError("Invoice requires a tax policy registry")
        if not isinstance(registry, TaxPolicyRegistry):
            raise InvalidReferenceError(f"Expected a TaxPolicyRegistry, got {type(registry).__name__}")
        self.registry = registry
        self._items: List[Item] = []
    
    def append(self, item: Item) -> None:
        """Add an item to the end of the invoice."""
        if item is None:
            raise InvalidReferenceError("Cannot append a missing item")
        if not isinstance(item, Item):
            raise InvalidReferenceError(f"Expected an Item, got {type(item).__name__}")
        self._items.append(item)
        logger.debug("Appended %s (now %d items)", item, len(self._items))
    
    def subtotal(self) -> Decimal:
        """Sum of item prices, before tax."""
        return sum((item.price for item in self._items), Decimal("0"))
    
    def total_tax(self) -> Decimal:
        """
        Sum of per-item tax.
        
        Raises:
            MissingTaxRuleError: If any item's category has no registered policy
        """
        total = Decimal("0")
        for item in self._items:
            try:
                policy = self.registry.get_policy(item.category)
            except MissingTaxRuleError:
                logger.warning("No tax rule for category '%s' (item '%s')", item.category.value, item.name)
                raise
            total += policy.compute(item)
        return total
    
    def total(self) -> Decimal:
        """Subtotal plus tax; fails like total_tax()."""
        return self.subtotal() + self.total_tax()
    
    def items(self) -> Tuple[Item, ...]:
        """Snapshot of the items in insertion order."""
        return tuple(self._items)
    
    def count(self) -> int:
        return len(self._items)
    
    def summary(self) -> InvoiceSummary:
        """Strictly computed totals."""
        subtotal = self.subtotal()
        total_tax = self.total_tax()
        return InvoiceSummary(
            subtotal=subtotal,
            total_tax=total_tax,
            total=subtotal + total_tax,
            item_count=self.count()
        )
    
    def __len__(self) -> int:
        return len(self._items)
    
    def __repr__(self) -> str:
        return f"Invoice with {len(self._items)} item(s)"
