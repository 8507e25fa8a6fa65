"""
Copy-on-write updates to an artist's per-image tag index.

The index holds at most one entry per image URL and never holds an entry
with no tags. Both properties are kept by construction: these functions are
the only writers of the index.
"""

from typing import Any, Iterable, List

from .models import Artist, ImageTagEntry, STYLE


def _dedupe(tag_ids: Iterable[Any]) -> List[Any]:
    result = []
    for tag_id in tag_ids or ():
        if tag_id not in result:
            result.append(tag_id)
    return result


def set_tags_for_image(artist: Artist, image_url: str, tag_ids: Iterable[Any],
                       kind: str = STYLE) -> Artist:
    """
    Return a new Artist with the tags of one image replaced.

    - Empty ``tag_ids`` removes the image's entry.
    - An existing entry is replaced in place, other entries keep their order.
    - Otherwise the new entry is appended.

    Any pre-existing duplicate entries for ``image_url`` collapse into the
    first one.
    """
    tag_ids = _dedupe(tag_ids)
    entries = artist.image_entries(kind)

    if not tag_ids:
        return artist.with_image_entries(
            kind, [entry for entry in entries if entry.image_url != image_url]
        )

    updated = []
    replaced = False
    for entry in entries:
        if entry.image_url != image_url:
            updated.append(entry)
        elif not replaced:
            updated.append(entry.with_tag_ids(tag_ids))
            replaced = True

    if not replaced:
        updated.append(ImageTagEntry(image_url, tag_ids))

    return artist.with_image_entries(kind, updated)


def remove_tags_for_image(artist: Artist, image_url: str, kind: str = STYLE) -> Artist:
    return set_tags_for_image(artist, image_url, [], kind)


def prune_unlisted_images(artist: Artist, image_urls: Iterable[str], kind: str = STYLE) -> Artist:
    """Drop entries for images no longer in the artist's portfolio."""
    keep = {url for url in image_urls if url and url.strip()}
    return artist.with_image_entries(
        kind, [entry for entry in artist.image_entries(kind) if entry.image_url in keep]
    )
