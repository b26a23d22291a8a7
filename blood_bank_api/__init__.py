"""Blood Bank API: donors, blood inventory and hospital requests over MongoDB."""

__version__ = "1.0.0"
