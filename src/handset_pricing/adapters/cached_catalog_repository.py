from __future__ import annotations

import logging
import threading
import time
from typing import Callable

from handset_pricing.domain.catalog import Catalog
from handset_pricing.ports.catalog_repository import CatalogRepository

logger = logging.getLogger(__name__)


class CachedCatalogRepository(CatalogRepository):
    """
    TTL cache in front of any catalog loader.

    - Serves the cached snapshot until `ttl_seconds` have passed since it was loaded
    - Reloads under a lock so concurrent callers trigger a single load
    - Load failures propagate to the caller; nothing is retried here and the
      previous snapshot is not served once it has expired
    - Snapshots are immutable, so handing the same object to many callers is safe
    """

    def __init__(
        self,
        loader: Callable[[], Catalog],
        ttl_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl_seconds < 0:
            raise ValueError("ttl_seconds must be >= 0")

        self._loader = loader
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._catalog: Catalog | None = None
        self._loaded_at = 0.0

    def load_catalog(self) -> Catalog:
        with self._lock:
            if self._catalog is not None and not self._expired():
                return self._catalog

            catalog = self._loader()
            self._catalog = catalog
            self._loaded_at = self._clock()

            logger.info("Catalog cache refreshed", extra={"ttl_seconds": self._ttl_seconds})
            return catalog

    def invalidate(self) -> None:
        """Drop the cached snapshot; the next call reloads."""
        with self._lock:
            self._catalog = None

    def _expired(self) -> bool:
        return self._clock() - self._loaded_at >= self._ttl_seconds
