#!/usr/bin/env python3
"""
Fix Invalid Tag IDs on Artists

Deleting a style or motif from the catalog leaves its ID behind on every
artist that used it. This script reads the current catalog, finds artists
that still reference IDs that no longer exist, and rewrites only the
affected fields.

Checked fields:
    - style_ids (styles only)
    - image_styles[*].style_ids / image_motifs[*].motif_ids

Exit codes:
    0  every artist is clean (or was cleaned)
    1  some artist updates failed, the rest were written
    2  the catalog or artist list could not be read, nothing was written

Usage:
    # Preview what would change
    python scripts/fix_invalid_tags.py --dry-run

    # Clean style references
    python scripts/fix_invalid_tags.py

    # Clean motif references, dropping images left with no motifs
    python scripts/fix_invalid_tags.py --kind motif --prune-empty
"""

import os
import sys
import argparse

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import config
from repositories import StoreError
from services.batch_report import EXIT_FATAL
from services.tag_repair_service import run_tag_repair
from services.tagging import TAG_KINDS
from utils.logging_config import setup_logging, get_logger

logger = get_logger('FixInvalidTags')


def build_parser():
    parser = argparse.ArgumentParser(
        description="Remove deleted style/motif IDs from artist records."
    )
    parser.add_argument(
        '--kind', choices=TAG_KINDS, default='style',
        help='Which catalog to check against (default: style)'
    )
    parser.add_argument(
        '--dry-run', action='store_true',
        help='Report what would change without writing'
    )
    parser.add_argument(
        '--prune-empty', action='store_true',
        help='Drop per-image entries left with no tags after cleaning'
    )
    parser.add_argument(
        '--workers', type=int, default=config.REPAIR_MAX_WORKERS,
        help=f'Artists processed in parallel (default: {config.REPAIR_MAX_WORKERS})'
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(level=config.LOG_LEVEL, log_file=config.LOG_FILE)

    print("=" * 70)
    print(f"  Fix Invalid {args.kind.capitalize()} IDs")
    print("=" * 70)

    try:
        report = run_tag_repair(
            kind=args.kind,
            dry_run=args.dry_run,
            prune_empty=args.prune_empty,
            max_workers=args.workers,
            show_progress=True,
        )
    except StoreError as e:
        logger.error(f"Aborted, no artist was modified: {e}")
        return EXIT_FATAL

    print(f"\n  Artists scanned:         {report.artists_scanned}")
    print(f"  Artists needing update:  {report.artists_needing_update}")
    if args.dry_run:
        print(f"  References to remove:    {report.invalid_ids_removed}")
    else:
        print(f"  Artists updated:         {report.artists_updated}")
        print(f"  References removed:      {report.invalid_ids_removed}")
    if report.invalid_ids:
        print(f"  Invalid IDs:             {sorted(report.invalid_ids, key=str)}")

    if report.failures:
        print(f"\n  Failed updates ({len(report.failures)}):")
        for artist_id, error in report.failures:
            print(f"    {artist_id}: {error}")

    if args.dry_run:
        print("\n  [DRY RUN] No changes written.")
    print("=" * 70)
    return report.exit_code


if __name__ == '__main__':
    sys.exit(main())
