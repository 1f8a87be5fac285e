"""Command line entry point."""
import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO
from invoicing.config import settings
from invoicing.cli.console import InteractiveConsole
from invoicing.models.invoice import Invoice
from invoicing.models.item import Category, Item
from invoicing.services.printer import SimpleInvoicePrinter
from invoicing.tax_rules.registry import build_standard_registry

logger = logging.getLogger(__name__)

DEMO_ITEMS = [
    ("Whole Wheat Bread", "5000", Category.FOOD),
    ("Whole Milk 1L", "3500", Category.FOOD),
    ("Cotton T-Shirt", "25000", Category.CLOTHING),
    ("Denim Jeans", "80000", Category.CLOTHING),
    ('Laptop 15"', "1500000", Category.ELECTRONICS),
    ("Wireless Mouse", "45000", Category.ELECTRONICS),
]


def run_demo(output: Optional[TextIO] = None) -> Invoice:
    """Build a sample invoice, print its totals and the full receipt."""
    output = output if output is not None else sys.stdout
    registry = build_standard_registry()
    invoice = Invoice(registry)
    for name, price, category in DEMO_ITEMS:
        invoice.append(Item(name=name, price=price, category=category))
    
    currency = settings.currency_symbol
    output.write(f"=== {settings.app_title} ===\n\n")
    output.write("Items on the invoice:\n")
    for item in invoice.items():
        output.write(f"  - {item}\n")
    output.write("\nInvoice totals:\n")
    output.write(f"  Subtotal: {currency}{invoice.subtotal():.2f}\n")
    output.write(f"  Total tax: {currency}{invoice.total_tax():.2f}\n")
    output.write(f"  TOTAL: {currency}{invoice.total():.2f}\n\n")
    
    SimpleInvoicePrinter(output).print_invoice(invoice, registry)
    output.write("\n=== Demo complete ===\n")
    return invoice


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="invoicing",
        description="Itemized invoice with per-category tax"
    )
    parser.add_argument(
        "-i", "--interactive",
        action="store_true",
        help="start the interactive console instead of the demo"
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help=f"logging level (default: {settings.log_level})"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {settings.app_version}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Execute the command line interface."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )
    
    logger.debug("Starting in %s mode", "interactive" if args.interactive else "demo")
    if args.interactive:
        InteractiveConsole(build_standard_registry()).run()
    else:
        run_demo()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
