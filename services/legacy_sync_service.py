"""
Batch jobs that keep the legacy style fields usable during the schema move.

- backfill_style_ids: artists that only have free-text ``styles`` get
  ``style_ids`` resolved from the catalog
- resync_legacy_styles: ``styles`` is recomputed from ``image_styles`` for
  artists that use the per-image index

Both follow the repair job's failure policy: fetch errors propagate, write
errors are recorded per artist.
"""

from tqdm import tqdm

import config
from repositories import get_store
from services.batch_report import BatchReport
from services.tagging import (
    STYLE,
    convert_legacy_names_to_ids,
    derive_legacy_aggregate,
)
from utils.logging_config import get_logger

logger = get_logger('LegacySync')


def _write(store, artist, payload, report: BatchReport, dry_run: bool) -> None:
    report.record_staged({
        'artist_id': artist.id,
        'artist_name': artist.display_name,
        'changed_fields': sorted(payload),
        'payload': payload,
    })
    if dry_run:
        return
    try:
        store.update_artist(artist.id, payload)
    except Exception as e:
        logger.error(f"Failed to update artist {artist.id}: {e}")
        report.record_failure(artist.id, str(e))
        return
    report.record_updated()


def backfill_style_ids(store=None, dry_run: bool = False, show_progress: bool = False) -> BatchReport:
    """
    Populate empty ``style_ids`` from the artist's ``styles`` names.

    Names that match no catalog entry are skipped; an artist whose names
    all fail to match is left untouched.
    """
    store = store or get_store()
    catalog = store.fetch_catalog(STYLE)
    artists = store.fetch_artists()
    report = BatchReport('backfill_style_ids', kind=STYLE, dry_run=dry_run)

    for artist in tqdm(artists, desc="Backfilling style_ids", disable=not show_progress):
        report.record_scanned()
        if artist.style_ids or not artist.styles:
            continue

        style_ids = []
        for style_id in convert_legacy_names_to_ids(artist.styles, catalog):
            if style_id not in style_ids:
                style_ids.append(style_id)
        if not style_ids:
            logger.debug(f"Artist {artist.id}: no catalog match for {list(artist.styles)}")
            continue

        logger.info(f"Artist \"{artist.display_name}\": {list(artist.styles)} -> {style_ids}")
        _write(store, artist, {'style_ids': style_ids}, report, dry_run)

    logger.info(report.summary())
    return report


def resync_legacy_styles(store=None, language: str = None, dry_run: bool = False,
                         show_progress: bool = False) -> BatchReport:
    """Recompute ``styles`` display names from each artist's image index."""
    store = store or get_store()
    language = language or config.DEFAULT_LANGUAGE
    catalog = store.fetch_catalog(STYLE)
    artists = store.fetch_artists()
    report = BatchReport('resync_legacy_styles', kind=STYLE, dry_run=dry_run)

    for artist in tqdm(artists, desc="Resyncing styles", disable=not show_progress):
        report.record_scanned()
        if all(entry.is_opaque for entry in artist.image_styles):
            continue

        derived = derive_legacy_aggregate(artist, catalog, language)
        if derived.styles == artist.styles:
            continue

        _write(store, artist, derived.to_fields(['styles']), report, dry_run)

    logger.info(report.summary())
    return report
