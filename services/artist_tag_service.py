"""
Reading and editing the style/motif tags of one artist.

An edit replaces one image's tags in the per-image index. For styles the
legacy ``styles`` names are re-derived in the same write so older readers
stay in step. Only changed fields are sent to the store.
"""

from typing import Any, Dict

import config
from repositories import get_store
from services.tagging import (
    MOTIF,
    STYLE,
    TAG_KINDS,
    describe_image_tags,
    derive_legacy_aggregate,
    effective_style_source,
    effective_style_tags,
    set_tags_for_image,
)
from utils.logging_config import get_logger
from utils.validation import validate_enum, validate_string, validate_tag_ids

logger = get_logger('ArtistTags')


def get_artist_tags(artist_id: str, language: str = None, store=None) -> Dict[str, Any]:
    language = validate_enum(language or config.DEFAULT_LANGUAGE, 'lang', config.SUPPORTED_LANGUAGES)
    store = store or get_store()
    artist = store.fetch_artist(artist_id)
    styles = store.fetch_catalog(STYLE)
    motifs = store.fetch_catalog(MOTIF)

    return {
        'artist_id': artist.id,
        'language': language,
        'style_source': effective_style_source(artist),
        'styles': effective_style_tags(artist, styles, language),
        'image_styles': describe_image_tags(artist, styles, language, STYLE),
        'image_motifs': describe_image_tags(artist, motifs, language, MOTIF),
    }


def update_image_tags(artist_id: str, kind: str, data: Dict[str, Any], store=None) -> Dict[str, Any]:
    """
    Replace the tags of one image.

    Body fields: ``image_url`` (required) and ``tag_ids`` (list, empty
    clears the image). Unknown catalog IDs are accepted as-is; cleaning them
    is the repair job's responsibility.
    """
    kind = validate_enum(kind, 'kind', TAG_KINDS)
    image_url = validate_string(data.get('image_url'), 'image_url', strip=False)
    tag_ids = validate_tag_ids(data.get('tag_ids'))
    language = validate_enum(data.get('lang') or config.DEFAULT_LANGUAGE, 'lang',
                             config.SUPPORTED_LANGUAGES)

    store = store or get_store()
    artist = store.fetch_artist(artist_id)
    updated = set_tags_for_image(artist, image_url, tag_ids, kind)

    image_field = 'image_motifs' if kind == MOTIF else 'image_styles'
    changed = []
    if updated.image_entries(kind) != artist.image_entries(kind):
        changed.append(image_field)

    if kind == STYLE:
        updated = derive_legacy_aggregate(updated, store.fetch_catalog(STYLE), language)
        if updated.styles != artist.styles:
            changed.append('styles')

    if changed:
        store.update_artist(artist.id, updated.to_fields(changed))
        logger.info(f"Artist {artist.id}: {kind} tags for {image_url} set to {tag_ids}")

    return {
        'artist_id': artist.id,
        'image_url': image_url,
        'tag_ids': tag_ids,
        'updated_fields': changed,
        'styles': list(updated.styles),
    }
