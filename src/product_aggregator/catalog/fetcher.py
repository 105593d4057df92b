"""Product catalog fetcher for the store API."""
import json
from decimal import Decimal
from typing import Callable, List, Optional

import requests
from pydantic import BaseModel, ConfigDict, RootModel, ValidationError

from .models import RawProduct
from ..config.settings import API_URL
from ..utils.logger import get_logger
from ..utils.exceptions import (
    FetchError,
    NetworkError,
    HttpStatusError,
    ParseError,
    EmptyResultError
)
from ..utils.retry import retry_with_fixed_delay

logger = get_logger()


class ProductSchema(BaseModel):
    """Pydantic schema for one catalog item."""
    model_config = ConfigDict(extra="ignore")
    
    id: int
    title: Optional[str] = None
    price: Decimal
    category: Optional[str] = None
    description: Optional[str] = None


class CatalogResponse(RootModel[List[ProductSchema]]):
    """Pydantic schema for the catalog response."""
    pass


class ProductFetcher:
    """Fetches the product catalog with bounded, fixed-delay retries."""
    
    def __init__(
        self,
        api_url: str = API_URL,
        max_attempts: int = 3,
        retry_delay_seconds: float = 2.0,
        timeout_seconds: float = 30.0,
        session_factory: Callable[[], requests.Session] = requests.Session
    ):
        """
        Initialize fetcher.
        
        Args:
            api_url: Catalog endpoint
            max_attempts: Total attempts before giving up
            retry_delay_seconds: Pause between failed attempts
            timeout_seconds: Per-request timeout passed to requests
            session_factory: Creates the HTTP session used for one fetch
        """
        self.api_url = api_url
        self.max_attempts = max_attempts
        self.retry_delay_seconds = retry_delay_seconds
        self.timeout_seconds = timeout_seconds
        self.session_factory = session_factory
    
    def fetch(self) -> List[RawProduct]:
        """
        Fetch and parse the full catalog.
        
        Returns:
            Non-empty list of RawProduct
            
        Raises:
            FetchError: If every attempt failed; the last attempt's error
        """
        fetch_once = retry_with_fixed_delay(
            max_attempts=self.max_attempts,
            delay_seconds=self.retry_delay_seconds,
            retryable_exceptions=(FetchError,)
        )(self._fetch_products)
        
        with self.session_factory() as session:
            products = fetch_once(session)
        
        logger.info(f"Fetched {len(products)} products")
        return products
    
    def _fetch_products(self, session: requests.Session) -> List[RawProduct]:
        """Run a single fetch attempt."""
        logger.info("Fetching products from API...")
        
        try:
            response = session.get(self.api_url, timeout=self.timeout_seconds)
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Request to {self.api_url} failed: {e}") from e
        
        if not 200 <= response.status_code < 300:
            raise HttpStatusError(
                response.status_code,
                f"API returned HTTP {response.status_code} for {self.api_url}"
            )
        
        products = self._parse_response(response.text)
        if not products:
            raise EmptyResultError("No products found in API response.")
        
        return products
    
    def _parse_response(self, response_text: str) -> List[RawProduct]:
        """Parse catalog JSON into RawProduct records."""
        try:
            data = json.loads(response_text, parse_float=Decimal)
        except (ValueError, RecursionError) as e:
            # Deeply nested input raises RecursionError rather than JSONDecodeError
            logger.debug(f"Response text: {response_text[:500]}")
            raise ParseError(f"Invalid JSON response from API: {e}") from e
        
        if data is None:
            return []
        
        if isinstance(data, list):
            # Property names are matched case-insensitively
            data = [
                {str(key).lower(): value for key, value in item.items()} if isinstance(item, dict) else item
                for item in data
            ]
        
        try:
            validated = CatalogResponse.model_validate(data)
        except ValidationError as e:
            raise ParseError(f"API response does not match product schema: {e}") from e
        
        return [RawProduct(**item.model_dump()) for item in validated.root]
