"""
Bridges between the three generations of style data on an artist:

1. ``styles``       - free-text display names (oldest)
2. ``style_ids``    - artist-level catalog IDs
3. ``image_styles`` - per-image catalog IDs (current)

Sync only goes forward: ``styles`` is derived from the per-image index and
is never read back into IDs except by the explicit name conversion below.
"""

from typing import Any, Iterable, List, Sequence

from .aggregator import all_tag_ids_across_images, resolve_names
from .models import Artist, TagCatalogEntry, STYLE

# Values for effective_style_source()
SOURCE_STYLE_IDS = 'style_ids'
SOURCE_IMAGE_STYLES = 'image_styles'
SOURCE_STYLES = 'styles'


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def convert_legacy_names_to_ids(names: Sequence[Any], catalog: Iterable[TagCatalogEntry]) -> List[int]:
    """
    Convert free-text names to catalog IDs.

    A name matches an entry when it equals ``name_ja`` or ``name_en`` exactly
    (case-sensitive). Unmatched names are dropped; output order follows the
    input.
    """
    if not names:
        return []
    catalog = list(catalog or ())
    ids = []
    for name in names:
        if not isinstance(name, str):
            continue
        for entry in catalog:
            if entry.name_ja == name or entry.name_en == name:
                ids.append(entry.id)
                break
    return ids


def convert_legacy_styles(artist: Artist, catalog: Iterable[TagCatalogEntry]) -> List[Any]:
    """Artist-level style IDs, converting from ``styles`` names when absent."""
    if artist.style_ids is not None:
        return list(artist.style_ids)
    if artist.styles:
        return convert_legacy_names_to_ids(artist.styles, catalog)
    return []


def derive_legacy_aggregate(artist: Artist, catalog: Iterable[TagCatalogEntry],
                            language: str = 'ja') -> Artist:
    """Return a copy of ``artist`` with ``styles`` recomputed from its images."""
    names = resolve_names(all_tag_ids_across_images(artist, STYLE), catalog, language)
    return artist.replace(styles=tuple(names))


def effective_style_source(artist: Artist) -> str:
    """
    Which field an artist's displayed styles come from.

    First match wins:
      1. ``style_ids`` when it is a non-empty list of integers
      2. ``image_styles`` when it has any entry
      3. ``styles`` names as stored
    """
    if artist.style_ids and all(_is_int(tag_id) for tag_id in artist.style_ids):
        return SOURCE_STYLE_IDS
    if any(not entry.is_opaque for entry in artist.image_styles):
        return SOURCE_IMAGE_STYLES
    return SOURCE_STYLES


def effective_style_tags(artist: Artist, catalog: Iterable[TagCatalogEntry],
                         language: str = 'ja') -> List[str]:
    """Display names for an artist's styles, identical for every UI surface."""
    source = effective_style_source(artist)
    if source == SOURCE_STYLE_IDS:
        return resolve_names(artist.style_ids, catalog, language)
    if source == SOURCE_IMAGE_STYLES:
        return resolve_names(all_tag_ids_across_images(artist, STYLE), catalog, language)
    # Already display names, no ID resolution
    return [name for name in artist.styles if isinstance(name, str)]
