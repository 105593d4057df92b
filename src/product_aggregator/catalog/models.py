"""Data models for catalog processing."""
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class RawProduct:
    """Catalog item as returned by the API."""
    id: int
    title: Optional[str]
    price: Decimal
    category: Optional[str] = None
    description: Optional[str] = None  # Not used downstream


@dataclass(frozen=True)
class GroupedProduct:
    """Product projected for the grouped output."""
    id: int
    title: Optional[str]
    price: Decimal
    
    @classmethod
    def from_raw(cls, product: RawProduct) -> "GroupedProduct":
        return cls(id=product.id, title=product.title, price=product.price)
    
    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "title": self.title, "price": self.price}


GroupedCatalog = Dict[str, List[GroupedProduct]]  # category -> products sorted by price
