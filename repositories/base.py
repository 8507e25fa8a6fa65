"""
Interface shared by the hosted and local stores.

Rows cross this boundary as domain objects (TagCatalogEntry, Artist); writes
to artists take the partial-update payload produced by Artist.to_fields().
"""

from typing import Any, Dict, List, Optional

from services.tagging import Artist, TagCatalogEntry, STYLE, artist_has_tag

# Artist columns a tag job may overwrite
WRITABLE_ARTIST_FIELDS = ('style_ids', 'styles', 'image_styles', 'image_motifs')


def check_artist_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    if not fields:
        raise ValueError("Update payload is empty")
    unknown = set(fields) - set(WRITABLE_ARTIST_FIELDS)
    if unknown:
        raise ValueError(f"Fields not writable: {', '.join(sorted(unknown))}")
    return fields


class TagStore:
    """Backend for catalogs and artist tag fields."""

    name = 'base'

    # Catalog

    def fetch_catalog(self, kind: str) -> List[TagCatalogEntry]:
        """All entries of one catalog ordered by id. Raises CatalogFetchError."""
        raise NotImplementedError

    def fetch_catalog_entry(self, kind: str, entry_id: int) -> TagCatalogEntry:
        """One entry. Raises NotFoundError."""
        raise NotImplementedError

    def create_catalog_entry(self, kind: str, name_ja: str, name_en: str) -> TagCatalogEntry:
        raise NotImplementedError

    def update_catalog_entry(self, kind: str, entry_id: int, name_ja: Optional[str] = None,
                             name_en: Optional[str] = None) -> TagCatalogEntry:
        raise NotImplementedError

    def delete_catalog_entry(self, kind: str, entry_id: int) -> None:
        """Delete one entry. Artist references are left as they are."""
        raise NotImplementedError

    # Artists

    def fetch_artists(self) -> List[Artist]:
        """All artists ordered by id. Raises ArtistFetchError."""
        raise NotImplementedError

    def fetch_artist(self, artist_id: str) -> Artist:
        """One artist. Raises NotFoundError."""
        raise NotImplementedError

    def update_artist(self, artist_id: str, fields: Dict[str, Any]) -> None:
        """
        Overwrite only the given fields of one artist in a single call.
        Raises ArtistUpdateError.
        """
        raise NotImplementedError

    # Derived

    def count_artists_referencing(self, kind: str, tag_id: int) -> int:
        """How many artists still point at ``tag_id`` in any field."""
        count = 0
        for artist in self.fetch_artists():
            in_aggregate = kind == STYLE and artist.style_ids is not None and tag_id in artist.style_ids
            if in_aggregate or artist_has_tag(artist, tag_id, kind):
                count += 1
        return count
