"""JSON writer for the grouped catalog."""
from pathlib import Path
from typing import Union

import simplejson

from ..catalog.models import GroupedCatalog
from ..utils.logger import get_logger
from ..utils.exceptions import OutputWriteError

logger = get_logger()


class CatalogWriter:
    """Writes a grouped catalog as indented JSON."""
    
    def __init__(self, indent: int = 2):
        self.indent = indent
    
    def write(self, catalog: GroupedCatalog, path: Union[str, Path]) -> None:
        """
        Save grouped products to a JSON file, replacing any existing file.
        
        Args:
            catalog: Grouped catalog
            path: Target file path
            
        Raises:
            OutputWriteError: If the file cannot be written
        """
        logger.info("Saving grouped products to JSON file...")
        
        content = self.serialize(catalog)
        path = Path(path)
        
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            logger.error(f"Failed to write grouped products to {path}: {e}")
            raise OutputWriteError(f"Failed to write grouped products to {path}: {e}") from e
        
        logger.debug(f"Wrote {len(content)} characters to {path}")
    
    def serialize(self, catalog: GroupedCatalog) -> str:
        """Render the catalog as a JSON document. Decimal prices keep their exact digits."""
        document = {
            category: [product.to_dict() for product in products]
            for category, products in catalog.items()
        }
        return simplejson.dumps(document, ensure_ascii=False, indent=self.indent, use_decimal=True)
