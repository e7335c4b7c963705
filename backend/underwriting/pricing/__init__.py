"""Pure premium formulas per product family."""
