"""
SQLite-backed store for local development and tests.

Behaves like the hosted store: partial updates, no cascade on catalog
deletes, arrays kept as JSON text.
"""

import json
import sqlite3
from typing import Any, Dict, List, Optional

from database import db_session, initialize_database
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

logger = get_logger('LocalStore')

JSON_COLUMNS = ('portfolio_images', 'style_ids', 'styles', 'image_styles', 'image_motifs')


def _decode_artist_row(row: sqlite3.Row) -> Dict[str, Any]:
    data = dict(row)
    for column in JSON_COLUMNS:
        raw = data.get(column)
        if raw is None:
            continue
        try:
            data[column] = json.loads(raw)
        except (TypeError, ValueError):
            logger.warning(f"Artist {data.get('id')}: column {column} is not valid JSON, ignoring")
            data[column] = None
    return data


def _encode(value: Any) -> Optional[str]:
    if value is None:
        return None
    return json.dumps(value, ensure_ascii=False)


class LocalStore(TagStore):
    name = 'local'

    def __init__(self, db_path: Optional[str] = None, initialize: bool = False):
        self.db_path = db_path
        if initialize:
            initialize_database(db_path)

    # Catalog

    def fetch_catalog(self, kind: str) -> List[TagCatalogEntry]:
        table = columns_for(kind)['table']
        try:
            with db_session(self.db_path) as conn:
                rows = conn.execute(f"SELECT * FROM {table} ORDER BY id ASC").fetchall()
        except sqlite3.Error as e:
            raise CatalogFetchError(f"Could not read {table}: {e}") from e
        return [TagCatalogEntry.from_row(dict(row), kind) for row in rows]

    def fetch_catalog_entry(self, kind: str, entry_id: int) -> TagCatalogEntry:
        table = columns_for(kind)['table']
        try:
            with db_session(self.db_path) as conn:
                row = conn.execute(f"SELECT * FROM {table} WHERE id = ?", (entry_id,)).fetchone()
        except sqlite3.Error as e:
            raise CatalogFetchError(f"Could not read {table} #{entry_id}: {e}") from e
        if row is None:
            raise NotFoundError(f"{kind.capitalize()} {entry_id} not found")
        return TagCatalogEntry.from_row(dict(row), kind)

    def create_catalog_entry(self, kind: str, name_ja: str, name_en: str) -> TagCatalogEntry:
        cols = columns_for(kind)
        try:
            with db_session(self.db_path) as conn:
                cur = conn.execute(
                    f"INSERT INTO {cols['table']} ({cols['name_ja']}, {cols['name_en']}) VALUES (?, ?)",
                    (name_ja, name_en),
                )
                entry_id = cur.lastrowid
        except sqlite3.Error as e:
            raise CatalogWriteError(f"Could not create {kind}: {e}") from e
        return self.fetch_catalog_entry(kind, entry_id)

    def update_catalog_entry(self, kind: str, entry_id: int, name_ja: Optional[str] = None,
                             name_en: Optional[str] = None) -> TagCatalogEntry:
        cols = columns_for(kind)
        assignments = []
        params: List[Any] = []
        if name_ja is not None:
            assignments.append(f"{cols['name_ja']} = ?")
            params.append(name_ja)
        if name_en is not None:
            assignments.append(f"{cols['name_en']} = ?")
            params.append(name_en)
        if not assignments:
            return self.fetch_catalog_entry(kind, entry_id)

        assignments.append("updated_at = CURRENT_TIMESTAMP")
        params.append(entry_id)
        try:
            with db_session(self.db_path) as conn:
                cur = conn.execute(
                    f"UPDATE {cols['table']} SET {', '.join(assignments)} WHERE id = ?", params
                )
                updated = cur.rowcount
        except sqlite3.Error as e:
            raise CatalogWriteError(f"Could not update {kind} {entry_id}: {e}") from e
        if not updated:
            raise NotFoundError(f"{kind.capitalize()} {entry_id} not found")
        return self.fetch_catalog_entry(kind, entry_id)

    def delete_catalog_entry(self, kind: str, entry_id: int) -> None:
        table = columns_for(kind)['table']
        try:
            with db_session(self.db_path) as conn:
                deleted = conn.execute(f"DELETE FROM {table} WHERE id = ?", (entry_id,)).rowcount
        except sqlite3.Error as e:
            raise CatalogWriteError(f"Could not delete {kind} {entry_id}: {e}") from e
        if not deleted:
            raise NotFoundError(f"{kind.capitalize()} {entry_id} not found")

    # Artists

    def fetch_artists(self) -> List[Artist]:
        try:
            with db_session(self.db_path) as conn:
                rows = conn.execute("SELECT * FROM artists ORDER BY id ASC").fetchall()
        except sqlite3.Error as e:
            raise ArtistFetchError(f"Could not read artists: {e}") from e
        return [Artist.from_row(_decode_artist_row(row)) for row in rows]

    def fetch_artist(self, artist_id: str) -> Artist:
        try:
            with db_session(self.db_path) as conn:
                row = conn.execute("SELECT * FROM artists WHERE id = ?", (artist_id,)).fetchone()
        except sqlite3.Error as e:
            raise ArtistFetchError(f"Could not read artist {artist_id}: {e}") from e
        if row is None:
            raise NotFoundError(f"Artist {artist_id} not found")
        return Artist.from_row(_decode_artist_row(row))

    def update_artist(self, artist_id: str, fields: Dict[str, Any]) -> None:
        check_artist_fields(fields)
        columns = sorted(fields)
        assignments = ', '.join(f"{column} = ?" for column in columns)
        params = [_encode(fields[column]) for column in columns] + [artist_id]
        try:
            with db_session(self.db_path) as conn:
                updated = conn.execute(
                    f"UPDATE artists SET {assignments}, last_updated = CURRENT_TIMESTAMP WHERE id = ?",
                    params,
                ).rowcount
        except sqlite3.Error as e:
            raise ArtistUpdateError(f"Could not update artist {artist_id}: {e}") from e
        if not updated:
            raise ArtistUpdateError(f"Artist {artist_id} not found")

    def insert_artist(self, row: Dict[str, Any]) -> None:
        """Insert a raw artist row (seeding and tests)."""
        columns = ['id', 'name_ja', 'name_en'] + [c for c in JSON_COLUMNS if c in row]
        values = [row.get('id'), row.get('name_ja'), row.get('name_en')]
        values += [_encode(row[c]) for c in JSON_COLUMNS if c in row]
        placeholders = ', '.join('?' for _ in columns)
        with db_session(self.db_path) as conn:
            conn.execute(f"INSERT INTO artists ({', '.join(columns)}) VALUES ({placeholders})", values)
