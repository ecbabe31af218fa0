"""Clients API du catalogue de series, avec cache et retry."""

from chiprr.adapters.api.cache import CatalogCache
from chiprr.adapters.api.retry import RateLimitError, request_with_retry
from chiprr.adapters.api.tmdb_client import TMDBClient

__all__ = ["CatalogCache", "RateLimitError", "TMDBClient", "request_with_retry"]
