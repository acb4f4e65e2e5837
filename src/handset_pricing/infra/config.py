"""Environment configuration.

Pricing parameters are catalog data (GlobalSettings), not configuration;
only deployment concerns are read from the environment here.
"""

from __future__ import annotations

import os
from pathlib import Path

CATALOG_SOURCES = ("json", "postgres")


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def catalog_source() -> str:
    source = os.getenv("CATALOG_SOURCE", "json").strip().lower()

    if source not in CATALOG_SOURCES:
        raise RuntimeError(f"CATALOG_SOURCE must be one of {list(CATALOG_SOURCES)}, got '{source}'")

    return source


def catalog_json_path() -> Path:
    return Path(os.getenv("CATALOG_JSON_PATH", "data/products.json"))


def catalog_cache_ttl_seconds() -> float:
    raw = os.getenv("CATALOG_CACHE_TTL_SECONDS", "300")

    try:
        ttl = float(raw)
    except ValueError as exc:
        raise RuntimeError(f"CATALOG_CACHE_TTL_SECONDS must be a number, got '{raw}'") from exc

    if ttl < 0:
        raise RuntimeError("CATALOG_CACHE_TTL_SECONDS must be >= 0")

    return ttl


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()
