"""Catalog fetching and grouping module."""
from .models import RawProduct, GroupedProduct, GroupedCatalog
from .fetcher import ProductFetcher
from .grouper import ProductGrouper, UNCATEGORIZED

__all__ = [
    "RawProduct",
    "GroupedProduct",
    "GroupedCatalog",
    "ProductFetcher",
    "ProductGrouper",
    "UNCATEGORIZED"
]
