"""Product Aggregator: groups the store catalog by category."""

__version__ = "1.0.0"
