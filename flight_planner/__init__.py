"""Flight validation and profitability planning."""
