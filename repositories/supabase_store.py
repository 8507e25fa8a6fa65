"""
Store backed by the hosted Supabase (PostgREST) database.

The service role key is needed for writes because the artist and catalog
tables are protected by row-level security. With a key that lacks write
permission, PostgREST answers an update with zero rows rather than an
error, so an empty response is treated as a failed write.
"""

from typing import Any, Dict, List, Optional

from supabase import create_client

import config
from services.tagging import Artist, TagCatalogEntry, columns_for
from utils.logging_config import get_logger

from .base import TagStore, check_artist_fields
from .errors import (
    ArtistFetchError,
    ArtistUpdateError,
    CatalogFetchError,
    CatalogWriteError,
    NotFoundError,
)

logger = get_logger('SupabaseStore')

ARTISTS_TABLE = 'artists'


class SupabaseStore(TagStore):
    name = 'supabase'

    def __init__(self, client=None, url: Optional[str] = None, key: Optional[str] = None,
                 page_size: Optional[int] = None):
        """
        Args:
            client: Existing supabase client (tests pass a mock)
            url: Project URL, defaults to config.SUPABASE_URL
            key: API key, defaults to the service role key, then the anon key
            page_size: Rows per request for bulk reads
        """
        if client is None:
            client = create_client(url or config.SUPABASE_URL, key or config.get_supabase_key())
        self.client = client
        self.page_size = page_size or config.SUPABASE_PAGE_SIZE
        logger.info(f"Supabase store initialized (page size {self.page_size})")

    def _select_all(self, table: str) -> List[Dict[str, Any]]:
        rows: List[Dict[str, Any]] = []
        start = 0
        while True:
            response = (
                self.client.table(table)
                .select('*')
                .order('id')
                .range(start, start + self.page_size - 1)
                .execute()
            )
            page = response.data or []
            rows.extend(page)
            if len(page) < self.page_size:
                return rows
            start += self.page_size

    # Catalog

    def fetch_catalog(self, kind: str) -> List[TagCatalogEntry]:
        table = columns_for(kind)['table']
        try:
            rows = self._select_all(table)
        except Exception as e:
            raise CatalogFetchError(f"Could not read {table}: {e}") from e
        return [TagCatalogEntry.from_row(row, kind) for row in rows]

    def fetch_catalog_entry(self, kind: str, entry_id: int) -> TagCatalogEntry:
        table = columns_for(kind)['table']
        try:
            response = self.client.table(table).select('*').eq('id', entry_id).limit(1).execute()
        except Exception as e:
            raise CatalogFetchError(f"Could not read {table} #{entry_id}: {e}") from e
        if not response.data:
            raise NotFoundError(f"{kind.capitalize()} {entry_id} not found")
        return TagCatalogEntry.from_row(response.data[0], kind)

    def create_catalog_entry(self, kind: str, name_ja: str, name_en: str) -> TagCatalogEntry:
        cols = columns_for(kind)
        try:
            response = self.client.table(cols['table']).insert({
                cols['name_ja']: name_ja,
                cols['name_en']: name_en,
            }).execute()
        except Exception as e:
            raise CatalogWriteError(f"Could not create {kind}: {e}") from e
        if not response.data:
            raise CatalogWriteError(f"Creating {kind} returned no row (check RLS policies)")
        return TagCatalogEntry.from_row(response.data[0], kind)

    def update_catalog_entry(self, kind: str, entry_id: int, name_ja: Optional[str] = None,
                             name_en: Optional[str] = None) -> TagCatalogEntry:
        cols = columns_for(kind)
        payload = {}
        if name_ja is not None:
            payload[cols['name_ja']] = name_ja
        if name_en is not None:
            payload[cols['name_en']] = name_en
        if not payload:
            return self.fetch_catalog_entry(kind, entry_id)

        try:
            response = self.client.table(cols['table']).update(payload).eq('id', entry_id).execute()
        except Exception as e:
            raise CatalogWriteError(f"Could not update {kind} {entry_id}: {e}") from e
        if not response.data:
            raise NotFoundError(f"{kind.capitalize()} {entry_id} not found")
        return TagCatalogEntry.from_row(response.data[0], kind)

    def delete_catalog_entry(self, kind: str, entry_id: int) -> None:
        table = columns_for(kind)['table']
        try:
            response = self.client.table(table).delete().eq('id', entry_id).execute()
        except Exception as e:
            raise CatalogWriteError(f"Could not delete {kind} {entry_id}: {e}") from e
        if not response.data:
            raise NotFoundError(f"{kind.capitalize()} {entry_id} not found")

    # Artists

    def fetch_artists(self) -> List[Artist]:
        try:
            rows = self._select_all(ARTISTS_TABLE)
        except Exception as e:
            raise ArtistFetchError(f"Could not read artists: {e}") from e
        return [Artist.from_row(row) for row in rows]

    def fetch_artist(self, artist_id: str) -> Artist:
        try:
            response = self.client.table(ARTISTS_TABLE).select('*').eq('id', artist_id).limit(1).execute()
        except Exception as e:
            raise ArtistFetchError(f"Could not read artist {artist_id}: {e}") from e
        if not response.data:
            raise NotFoundError(f"Artist {artist_id} not found")
        return Artist.from_row(response.data[0])

    def update_artist(self, artist_id: str, fields: Dict[str, Any]) -> None:
        check_artist_fields(fields)
        try:
            response = self.client.table(ARTISTS_TABLE).update(fields).eq('id', artist_id).execute()
        except Exception as e:
            raise ArtistUpdateError(f"Could not update artist {artist_id}: {e}") from e
        if not response.data:
            raise ArtistUpdateError(
                f"Update of artist {artist_id} matched no row (missing, or blocked by RLS)"
            )
