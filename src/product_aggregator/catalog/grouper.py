"""Category grouping for fetched products."""
from collections import defaultdict
from typing import Dict, List, Optional, Sequence

from .models import RawProduct, GroupedProduct, GroupedCatalog
from ..utils.logger import get_logger

logger = get_logger()

UNCATEGORIZED = "Uncategorized"


class ProductGrouper:
    """Groups products by category and orders each group by price."""
    
    def group(self, products: Sequence[RawProduct]) -> GroupedCatalog:
        """
        Group products by category.
        
        Args:
            products: Products in API order
            
        Returns:
            Mapping of category to its products, cheapest first. Products
            with equal prices keep their input order.
        """
        logger.info("Grouping products by category...")
        
        groups: Dict[str, List[GroupedProduct]] = defaultdict(list)
        for product in products:
            groups[self.category_key(product.category)].append(GroupedProduct.from_raw(product))
        
        # sorted() is stable
        catalog = {
            category: sorted(items, key=lambda item: item.price)
            for category, items in groups.items()
        }
        
        logger.info(f"Grouped {len(products)} products into {len(catalog)} categories")
        return catalog
    
    @staticmethod
    def category_key(category: Optional[str]) -> str:
        """Return the group key, falling back to Uncategorized for blank values."""
        if category is None or not category.strip():
            return UNCATEGORIZED
        return category
