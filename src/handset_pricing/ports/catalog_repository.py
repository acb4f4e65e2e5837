from __future__ import annotations

from abc import ABC, abstractmethod

from handset_pricing.domain.catalog import Catalog


class CatalogRepository(ABC):
    """
    Port for catalog data access.

    Implementations return a complete, immutable snapshot of devices, plans,
    subsidies and pricing settings. Fetching, timeouts and caching are the
    adapters' concern; the pricing engine only ever sees the snapshot.

    Contract:
        - The returned Catalog must not be mutated after it is handed out
        - Implementations raise DataIntegrityError when the source data is
          structurally unusable
    """

    @abstractmethod
    def load_catalog(self) -> Catalog:
        """
        Load the current catalog snapshot.

        Returns:
            Catalog snapshot

        Raises:
            DataIntegrityError: If the source data is missing required arrays or fields
        """
        ...
