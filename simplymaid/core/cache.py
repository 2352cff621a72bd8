"""Validation des configs / entrées de cache (SchemaError en cas d'écart)."""
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import PositiveFloat

from ..base import StrictModel
from .config import SCHEMA_VERSION
from .errors import SchemaError
from .validation import safe_parse


class CacheConfig(StrictModel):
    max_size: PositiveFloat
    ttl: PositiveFloat


class CacheEntry(StrictModel):
    key: str
    value: Any = None
    expires: datetime


def validate_cache_config(config: Any) -> CacheConfig:
    result = safe_parse(CacheConfig, config)
    if not result.success:
        raise SchemaError("Invalid cache config", SCHEMA_VERSION, result.errors)
    return result.data


def validate_cache_entry(entry: Any) -> CacheEntry:
    result = safe_parse(CacheEntry, entry)
    if not result.success:
        raise SchemaError("Invalid cache entry", SCHEMA_VERSION, result.errors)
    return result.data


def is_expired(entry: CacheEntry, now: Optional[datetime] = None) -> bool:
    now = now or datetime.now(timezone.utc)
    expires = entry.expires
    if expires.tzinfo is None:
        expires = expires.replace(tzinfo=timezone.utc)
    return now > expires
