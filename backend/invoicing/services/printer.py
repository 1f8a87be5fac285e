"""Plain-text invoice rendering."""
import logging
import sys
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Optional, TextIO
from invoicing.config import settings
from invoicing.models.invoice import Invoice
from invoicing.models.report import InvoiceLine
from invoicing.tax_rules.registry import TaxPolicyRegistry
from invoicing.utils.errors import InvalidReferenceError

logger = logging.getLogger(__name__)

RULE = "=" * 40
THIN_RULE = "-" * 40


def invoice_lines(invoice: Invoice, registry: TaxPolicyRegistry) -> List[InvoiceLine]:
    """
    Derive the per-item amounts shown on a receipt.
    
    Items whose category has no policy are shown with zero tax. This only
    affects display: Invoice.total_tax() still fails for them.
    """
    lines = []
    for item in invoice.items():
        policy = registry.lookup(item.category)
        if policy is None:
            logger.warning("No tax rule for category '%s'; showing zero tax for '%s'", item.category.value, item.name)
            tax_rate: Optional[Decimal] = None
            tax_amount = Decimal("0")
        else:
            tax_rate = policy.get_rate()
            tax_amount = policy.compute(item)
        lines.append(InvoiceLine(
            item=item,
            tax_rate=tax_rate,
            tax_amount=tax_amount,
            line_total=item.price + tax_amount
        ))
    return lines


class InvoicePrinter(ABC):
    """Abstract base class for invoice printers."""
    
    @abstractmethod
    def print_invoice(self, invoice: Invoice, registry: TaxPolicyRegistry) -> None:
        """
        Render an invoice.
        
        Args:
            invoice: Invoice to render (not modified)
            registry: Registry used to show per-item tax
        """
        pass


class SimpleInvoicePrinter(InvoicePrinter):
    """Writes a fixed-width text receipt to a stream."""
    
    def __init__(self, output: Optional[TextIO] = None):
        self.output = output if output is not None else sys.stdout
        self.currency = settings.currency_symbol
    
    def _money(self, amount: Decimal) -> str:
        return f"{self.currency}{amount:>10.2f}"
    
    def _write(self, text: str = "") -> None:
        self.output.write(text + "\n")
    
    def print_invoice(self, invoice: Invoice, registry: TaxPolicyRegistry) -> None:
        if invoice is None:
            raise InvalidReferenceError("Cannot print a missing invoice")
        if registry is None:
            raise InvalidReferenceError("Printing requires a tax policy registry")
        
        self._write(RULE)
        self._write("          SALES INVOICE")
        self._write(RULE)
        self._write()
        self._write("ITEMS:")
        self._write(THIN_RULE)
        
        for line in invoice_lines(invoice, registry):
            self._write(f"  {str(line.item):<30} {self._money(line.item.price)}")
            if line.tax_rate is not None:
                self._write(f"    {'Tax (%.1f%%)' % line.tax_rate:<29} {self._money(line.tax_amount)}")
            self._write(f"    {'Subtotal':<29} {self._money(line.line_total)}")
            self._write()
        
        # Summary uses the strict queries; a missing rule propagates from here
        self._write(THIN_RULE)
        self._write(f"{'SUBTOTAL:':<34}{self._money(invoice.subtotal())}")
        self._write(f"{'TOTAL TAX:':<34}{self._money(invoice.total_tax())}")
        self._write(THIN_RULE)
        self._write(f"{'TOTAL:':<34}{self._money(invoice.total())}")
        self._write(RULE)
