"""
Read-only views over an artist's per-image tag index.

Everything here is pure: no store access, no mutation of the inputs, and no
exceptions for missing or malformed data. Callers pass the catalog and the
language explicitly.
"""

from typing import Any, Dict, Iterable, List, Optional, Sequence

from .models import Artist, ImageTagEntry, TagCatalogEntry, STYLE


def entry_for_image(artist: Artist, image_url: str, kind: str = STYLE) -> Optional[ImageTagEntry]:
    """Return the index entry for ``image_url`` (exact match), or None."""
    if not image_url:
        return None
    for entry in artist.image_entries(kind):
        if entry.image_url == image_url:
            return entry
    return None


def tag_ids_for_image(artist: Artist, image_url: str, kind: str = STYLE) -> List[Any]:
    """Tag IDs assigned to one image; empty when the image has no entry."""
    entry = entry_for_image(artist, image_url, kind)
    return list(entry.tag_ids) if entry else []


def all_tag_ids_across_images(artist: Artist, kind: str = STYLE) -> List[Any]:
    """
    Union of tag IDs over every image of the artist.

    Duplicates are removed. The result keeps first-seen order so that
    derived display names are stable between calls, but callers must not
    rely on the order carrying any meaning.
    """
    seen = set()
    union = []
    for entry in artist.image_entries(kind):
        for tag_id in entry.tag_ids:
            if tag_id not in seen:
                seen.add(tag_id)
                union.append(tag_id)
    return union


def images_having_tag(artist: Artist, tag_id: Any, kind: str = STYLE) -> List[str]:
    """Image URLs whose entry contains ``tag_id``, in index order."""
    return [entry.image_url for entry in artist.image_entries(kind) if tag_id in entry.tag_ids]


def artist_has_tag(artist: Artist, tag_id: Any, kind: str = STYLE) -> bool:
    return any(tag_id in entry.tag_ids for entry in artist.image_entries(kind))


def catalog_by_id(catalog: Iterable[TagCatalogEntry]) -> Dict[Any, TagCatalogEntry]:
    # First entry wins if the catalog somehow repeats an id
    lookup: Dict[Any, TagCatalogEntry] = {}
    for entry in catalog or ():
        lookup.setdefault(entry.id, entry)
    return lookup


def resolve_names(tag_ids: Sequence[Any], catalog: Iterable[TagCatalogEntry],
                  language: str = 'ja') -> List[str]:
    """
    Map tag IDs to localized catalog names.

    IDs with no catalog entry are dropped, never reported as an error or
    replaced with a placeholder. The order of the matched IDs is kept.
    An empty catalog therefore yields an empty list.
    """
    if not tag_ids:
        return []
    lookup = catalog_by_id(catalog)
    names = []
    for tag_id in tag_ids:
        entry = lookup.get(tag_id)
        if entry is None:
            continue
        name = entry.name_for(language)
        if name:
            names.append(name)
    return names


def describe_image_tags(artist: Artist, catalog: Iterable[TagCatalogEntry],
                        language: str = 'ja', kind: str = STYLE) -> List[Dict[str, Any]]:
    """Per-image tag IDs with their resolved names, for API output."""
    catalog = list(catalog or ())
    return [
        {
            'image_url': entry.image_url,
            'tag_ids': list(entry.tag_ids),
            'names': resolve_names(entry.tag_ids, catalog, language),
        }
        for entry in artist.image_entries(kind)
        if not entry.is_opaque
    ]
