"""
Repository modules for data access layer.

get_store() picks the hosted Supabase store when it is configured and the
local SQLite store otherwise.
"""

import threading

import config
from utils.logging_config import get_logger

from .errors import (
    StoreError,
    CatalogFetchError,
    ArtistFetchError,
    ArtistUpdateError,
    CatalogWriteError,
    NotFoundError,
)
from .base import TagStore, WRITABLE_ARTIST_FIELDS
from .local_store import LocalStore

logger = get_logger('Store')

_store = None
_store_lock = threading.Lock()


def get_store() -> TagStore:
    """Return the process-wide store, creating it on first use."""
    global _store
    with _store_lock:
        if _store is None:
            if config.is_supabase_configured():
                from .supabase_store import SupabaseStore
                _store = SupabaseStore()
            else:
                logger.warning("Supabase is not configured, using local database at "
                               f"{config.DATABASE_PATH}")
                _store = LocalStore(initialize=True)
        return _store


def set_store(store: TagStore) -> None:
    """Replace the process-wide store (tests, scripts with explicit backends)."""
    global _store
    with _store_lock:
        _store = store


def reset_store() -> None:
    set_store(None)


__all__ = [
    'get_store',
    'set_store',
    'reset_store',
    'TagStore',
    'LocalStore',
    'WRITABLE_ARTIST_FIELDS',
    'StoreError',
    'CatalogFetchError',
    'ArtistFetchError',
    'ArtistUpdateError',
    'CatalogWriteError',
    'NotFoundError',
]
