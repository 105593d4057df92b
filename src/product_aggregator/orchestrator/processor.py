"""Aggregation orchestrator for the end-to-end run."""
import time
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..config.settings import AppSettings, OUTPUT_FILE
from ..catalog.fetcher import ProductFetcher
from ..catalog.grouper import ProductGrouper
from ..export.writer import CatalogWriter
from ..utils.logger import get_logger, set_run_context

logger = get_logger()


@dataclass
class RunResult:
    """Result of one aggregation run."""
    run_id: str
    success: bool
    output_path: Path
    products_fetched: int = 0
    categories: int = 0
    error: Optional[str] = None
    duration_seconds: float = 0.0


class AggregationOrchestrator:
    """Runs fetch, group and write once, in order."""
    
    def __init__(
        self,
        settings: AppSettings,
        fetcher: Optional[ProductFetcher] = None,
        grouper: Optional[ProductGrouper] = None,
        writer: Optional[CatalogWriter] = None,
        output_path: Path = Path(OUTPUT_FILE)
    ):
        """
        Initialize orchestrator.
        
        Args:
            settings: Application settings
            fetcher: Catalog fetcher, built from settings when omitted
            grouper: Category grouper
            writer: JSON writer, built from settings when omitted
            output_path: Where the grouped catalog is written
        """
        self.settings = settings
        self.fetcher = fetcher or ProductFetcher(
            max_attempts=settings.fetch_max_attempts,
            retry_delay_seconds=settings.fetch_retry_delay_seconds,
            timeout_seconds=settings.fetch_timeout_seconds
        )
        self.grouper = grouper or ProductGrouper()
        self.writer = writer or CatalogWriter(indent=settings.output_indent)
        self.output_path = Path(output_path)
    
    def run(self) -> RunResult:
        """
        Run the pipeline once. Errors from any stage are logged, not raised.
        
        Returns:
            RunResult describing the outcome
        """
        run_id = uuid.uuid4().hex[:8]
        set_run_context(run_id)
        result = RunResult(run_id=run_id, success=False, output_path=self.output_path)
        start_time = time.time()
        
        logger.info("Starting product aggregation...")
        
        try:
            products = self.fetcher.fetch()
            result.products_fetched = len(products)
            
            catalog = self.grouper.group(products)
            result.categories = len(catalog)
            
            self.writer.write(catalog, self.output_path)
            result.success = True
            
            logger.info(f"Product aggregation completed. Output saved to {self.output_path}")
        except Exception as e:
            result.error = str(e)
            logger.error(f"An error occurred: {e}")
        finally:
            result.duration_seconds = time.time() - start_time
            logger.debug(f"Run {run_id} finished in {result.duration_seconds:.1f}s")
            set_run_context(None)
        
        return result
