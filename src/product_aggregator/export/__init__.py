"""Output module."""
from .writer import CatalogWriter

__all__ = ["CatalogWriter"]
