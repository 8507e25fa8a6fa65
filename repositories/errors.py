"""Store error taxonomy.

Fetch errors are fatal to batch jobs; ArtistUpdateError is per-record and is
collected by the jobs rather than raised out of them.
"""


class StoreError(Exception):
    """Base exception for store access failures"""
    pass


class CatalogFetchError(StoreError):
    """Style/Motif catalog could not be read"""
    pass


class ArtistFetchError(StoreError):
    """Artist records could not be read"""
    pass


class ArtistUpdateError(StoreError):
    """A partial update of one artist failed"""
    pass


class CatalogWriteError(StoreError):
    """Creating, updating or deleting a catalog entry failed"""
    pass


class NotFoundError(StoreError, LookupError):
    """Requested record does not exist"""
    pass
