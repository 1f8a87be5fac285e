"""Services built on top of the invoice core."""
