"""products.json implementation of CatalogRepository."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from handset_pricing.adapters.catalog_json_mapper import CatalogJsonMapper
from handset_pricing.adapters.legacy_catalog_mapper import LegacyCatalogMapper
from handset_pricing.domain.catalog import Catalog
from handset_pricing.domain.errors import DataIntegrityError
from handset_pricing.ports.catalog_repository import CatalogRepository

logger = logging.getLogger(__name__)


class JsonFileCatalogRepository(CatalogRepository):
    """
    Loads the catalog from a products.json file.

    - Reads the file on every call (wrap in CachedCatalogRepository to cache)
    - Accepts the canonical layout and the legacy Korean-keyed layout
    - Unreadable or malformed files raise DataIntegrityError
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    def load_catalog(self) -> Catalog:
        try:
            with self._path.open(encoding="utf-8") as handle:
                data = json.load(handle)
        except FileNotFoundError as exc:
            raise DataIntegrityError(
                "Catalog file not found", path=str(self._path)
            ) from exc
        except UnicodeDecodeError as exc:
            raise DataIntegrityError(
                "Catalog file is not valid UTF-8", path=str(self._path), position=exc.start
            ) from exc
        except json.JSONDecodeError as exc:
            raise DataIntegrityError(
                "Catalog file is not valid JSON", path=str(self._path), position=exc.pos
            ) from exc
        except OSError as exc:
            raise DataIntegrityError(
                "Catalog file could not be read", path=str(self._path), reason=exc.strerror
            ) from exc

        if LegacyCatalogMapper.is_legacy(data):
            logger.info("Loading legacy catalog layout", extra={"path": str(self._path)})
            data = LegacyCatalogMapper.to_canonical(data)

        catalog = CatalogJsonMapper.to_domain(data)

        logger.info(
            "Catalog loaded",
            extra={
                "path": str(self._path),
                "devices": len(catalog.devices),
                "plans": len(catalog.plans),
            },
        )
        return catalog
