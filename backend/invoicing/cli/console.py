"""Interactive console for building an invoice line by line."""
import logging
import sys
from decimal import Decimal, InvalidOperation
from typing import Callable, Optional, TextIO
from invoicing.config import settings
from invoicing.models.invoice import Invoice
from invoicing.models.item import Category, Item
from invoicing.services.printer import RULE, THIN_RULE, InvoicePrinter, SimpleInvoicePrinter
from invoicing.tax_rules.registry import TaxPolicyRegistry, list_supported_categories
from invoicing.utils.errors import InvalidItemError, MissingTaxRuleError

logger = logging.getLogger(__name__)

# Menu number -> category offered by "add item"
CATEGORY_CHOICES = {
    1: Category.FOOD,
    2: Category.CLOTHING,
    3: Category.ELECTRONICS,
}


class _EndOfInput(Exception):
    """Input stream closed."""


class InteractiveConsole:
    """Menu-driven session that builds one invoice at a time."""
    
    def __init__(
        self,
        registry: TaxPolicyRegistry,
        input_stream: Optional[TextIO] = None,
        output: Optional[TextIO] = None,
        printer_factory: Optional[Callable[[TextIO], InvoicePrinter]] = None
    ):
        self.registry = registry
        self.input = input_stream if input_stream is not None else sys.stdin
        self.output = output if output is not None else sys.stdout
        self.printer_factory = printer_factory or SimpleInvoicePrinter
        self.invoice = Invoice(registry)
        self._actions = {
            1: self.add_item,
            2: self.show_items,
            3: self.show_totals,
            4: self.print_invoice,
            5: self.clear_invoice,
            6: self.show_help,
        }
    
    def _say(self, text: str = "") -> None:
        self.output.write(text + "\n")
    
    def _ask(self, prompt: str) -> str:
        self.output.write(prompt)
        self.output.flush()
        line = self.input.readline()
        if not line:
            raise _EndOfInput()
        return line.strip()
    
    def _ask_number(self, prompt: str) -> int:
        try:
            return int(self._ask(prompt))
        except ValueError:
            return -1
    
    def run(self) -> None:
        """Run the menu loop until the user exits or input ends."""
        self._say(RULE)
        self._say(f"   {settings.app_title}")
        self._say("   Interactive mode")
        self._say(RULE)
        
        try:
            while True:
                self._show_menu()
                choice = self._ask_number("\nSelect an option: ")
                if choice == 0:
                    break
                action = self._actions.get(choice)
                if action is None:
                    self._say("\nInvalid option. Please choose one from the menu.")
                    continue
                action()
        except _EndOfInput:
            logger.debug("Input closed, ending session")
        self._say("\nGoodbye!")
    
    def _show_menu(self) -> None:
        self._say("\n--- MAIN MENU ---")
        self._say("1. Add item to invoice")
        self._say("2. Show items")
        self._say("3. Calculate total")
        self._say("4. Print full invoice")
        self._say("5. Clear invoice (start over)")
        self._say("6. Help")
        self._say("0. Exit")
    
    def add_item(self) -> None:
        self._say("\n--- ADD ITEM ---")
        self._say("Select the item category:")
        for number, category in CATEGORY_CHOICES.items():
            policy = self.registry.lookup(category)
            rate = f"{policy.get_rate()}%" if policy else "no tax rule"
            self._say(f"{number}. {category.value} (tax: {rate})")
        self._say("0. Cancel")
        
        choice = self._ask_number("\nOption: ")
        if choice == 0:
            self._say("Cancelled.")
            return
        category = CATEGORY_CHOICES.get(choice)
        if category is None:
            self._say("Invalid category.")
            return
        
        name = self._ask("Item name: ")
        if not name:
            self._say("Name must not be empty.")
            return
        
        raw_price = self._ask("Item price: ")
        try:
            price = Decimal(raw_price)
        except InvalidOperation:
            self._say("Error: price must be a valid number.")
            return
        
        try:
            item = Item(name=name, price=price, category=category)
        except InvalidItemError as e:
            self._say(f"Error: {e}")
            return
        
        self.invoice.append(item)
        self._say("\nItem added:")
        self._say(f"   {item}")
    
    def show_items(self) -> None:
        self._say("\n--- ITEMS ---")
        if self.invoice.count() == 0:
            self._say("The invoice has no items.")
            return
        self._say(f"Items on the invoice ({self.invoice.count()}):")
        self._say()
        for number, item in enumerate(self.invoice.items(), start=1):
            self._say(f"{number}. {item}")
        self._say()
        self._say(f"Subtotal: {settings.currency_symbol}{self.invoice.subtotal():.2f}")
    
    def show_totals(self) -> None:
        self._say("\n--- TOTAL ---")
        if self.invoice.count() == 0:
            self._say("The invoice has no items to total.")
            return
        try:
            summary = self.invoice.summary()
        except MissingTaxRuleError as e:
            self._report_missing_rule(e)
            return
        currency = settings.currency_symbol
        self._say()
        self._say(f"{'Subtotal:':<23}{currency}{summary.subtotal:>15.2f}")
        self._say(f"{'Total tax:':<23}{currency}{summary.total_tax:>15.2f}")
        self._say(THIN_RULE)
        self._say(f"{'TOTAL:':<23}{currency}{summary.total:>15.2f}")
    
    def print_invoice(self) -> None:
        self._say("\n--- PRINT INVOICE ---")
        if self.invoice.count() == 0:
            self._say("The invoice has no items to print.")
            return
        try:
            self.printer_factory(self.output).print_invoice(self.invoice, self.registry)
        except MissingTaxRuleError as e:
            self._report_missing_rule(e)
    
    def clear_invoice(self) -> None:
        self._say("\n--- CLEAR INVOICE ---")
        answer = self._ask("Clear the current invoice? (y/n): ").lower()
        if answer in settings.confirm_words:
            self.invoice = Invoice(self.registry)
            self._say("Invoice cleared. You can start adding items again.")
        else:
            self._say("Cancelled.")
    
    def show_help(self) -> None:
        self._say("\n--- HELP ---")
        self._say(f"{settings.app_title} - interactive mode")
        self._say()
        self._say("Build an invoice from items of these categories:")
        for entry in list_supported_categories():
            self._say(f"  * {entry['name']}: {entry['rate']}% tax")
        self._say()
        self._say("Options:")
        self._say("  1. Add item: adds an item to the invoice")
        self._say("  2. Show items: lists the items added so far")
        self._say("  3. Calculate total: subtotal, tax and total")
        self._say("  4. Print invoice: shows the formatted receipt")
        self._say("  5. Clear invoice: starts a new invoice")
        self._say("  6. Help: shows this text")
        self._say("  0. Exit: ends the session")
        self._say()
        self._say("Prices must be non-negative numbers.")
    
    def _report_missing_rule(self, error: MissingTaxRuleError) -> None:
        self._say(f"Error: {error}")
        self._say("Make sure every item category has a tax rule configured.")

