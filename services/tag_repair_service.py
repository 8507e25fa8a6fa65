"""
Tag repair job: strip references to deleted Style/Motif catalog entries.

Deleting a catalog entry does not cascade to artists, so IDs can linger in
``style_ids`` and in the per-image index. This job reads the whole catalog
and every artist, and rewrites only the artists that hold dangling IDs.

Failure policy:
- catalog or artist list unreadable: the exception propagates, nothing is
  written
- one artist's update fails: recorded in the report, the batch continues
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Optional

from tqdm import tqdm

import config
from repositories import get_store
from services.batch_report import BatchReport
from services.tagging import STYLE, Artist, columns_for, plan_artist_repair
from utils.logging_config import get_logger

logger = get_logger('TagRepair')


def _repair_artist(store, artist: Artist, valid_ids, kind: str, report: BatchReport,
                   dry_run: bool, prune_empty: bool) -> None:
    plan = plan_artist_repair(artist, valid_ids, kind, prune_empty=prune_empty)
    report.record_scanned()
    if not plan.needs_update:
        return

    report.record_invalid_ids(plan.removed_ids)
    report.record_staged(plan.to_dict())
    logger.info(
        f"Artist \"{artist.display_name}\" ({artist.id}) has invalid {kind} IDs "
        f"{sorted(set(plan.removed_ids), key=str)} in {', '.join(plan.changed_fields)}"
    )

    if dry_run:
        report.record_removed(len(plan.removed_ids))
        return

    try:
        store.update_artist(artist.id, plan.payload)
    except Exception as e:
        logger.error(f"Failed to update artist {artist.id}: {e}")
        report.record_failure(artist.id, str(e))
        return

    report.record_updated()
    report.record_removed(len(plan.removed_ids))


def run_tag_repair(store=None, kind: str = STYLE, dry_run: bool = False,
                   prune_empty: bool = False, max_workers: Optional[int] = None,
                   show_progress: bool = False) -> BatchReport:
    """
    Remove tag IDs that no longer exist in the ``kind`` catalog.

    Args:
        store: TagStore to use, defaults to get_store()
        kind: 'style' (aggregate + per-image) or 'motif' (per-image only)
        dry_run: Compute and report changes without writing
        prune_empty: Drop per-image entries left with no tags
        max_workers: Artists repaired in parallel; 1 is sequential
        show_progress: Draw a tqdm progress bar (CLI use)

    Returns:
        BatchReport with counters, dangling IDs and per-artist failures

    Raises:
        CatalogFetchError, ArtistFetchError: nothing has been written
    """
    columns_for(kind)
    store = store or get_store()
    max_workers = max_workers or config.REPAIR_MAX_WORKERS

    logger.info(f"Fetching {kind} catalog...")
    catalog = store.fetch_catalog(kind)
    valid_ids = {entry.id for entry in catalog}
    logger.info(f"Valid {kind} IDs: {sorted(valid_ids)}")

    logger.info("Fetching all artists...")
    artists = store.fetch_artists()
    logger.info(f"Found {len(artists)} artists")

    report = BatchReport('tag_repair', kind=kind, dry_run=dry_run)

    if max_workers <= 1:
        for artist in tqdm(artists, desc=f"Repairing {kind} tags", disable=not show_progress):
            _repair_artist(store, artist, valid_ids, kind, report, dry_run, prune_empty)
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = {
                executor.submit(_repair_artist, store, artist, valid_ids, kind,
                                report, dry_run, prune_empty): artist
                for artist in artists
            }
            for future in tqdm(as_completed(futures), total=len(futures),
                               desc=f"Repairing {kind} tags", disable=not show_progress):
                artist = futures[future]
                try:
                    future.result()
                except Exception as e:
                    logger.error(f"Unexpected error repairing artist {artist.id}: {e}")
                    report.record_failure(artist.id, str(e))

    if report.invalid_ids:
        logger.info(f"Invalid {kind} IDs found: {sorted(report.invalid_ids, key=str)}")
    logger.info(report.summary())
    return report
