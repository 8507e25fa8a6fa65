#!/usr/bin/env python3
"""
Keep the legacy style fields in step with the catalog IDs.

Subcommands:
    backfill  fill empty style_ids from the free-text styles names
    resync    recompute styles names from the per-image image_styles index

Usage:
    python scripts/sync_legacy_styles.py backfill --dry-run
    python scripts/sync_legacy_styles.py resync --lang en
"""

import os
import sys
import argparse

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import config
from repositories import StoreError
from services.batch_report import EXIT_FATAL
from services.legacy_sync_service import backfill_style_ids, resync_legacy_styles
from utils.logging_config import setup_logging, get_logger

logger = get_logger('SyncLegacyStyles')


def build_parser():
    parser = argparse.ArgumentParser(description="Sync legacy artist style fields.")
    subparsers = parser.add_subparsers(dest='command', required=True)

    backfill = subparsers.add_parser('backfill', help='Fill style_ids from styles names')
    backfill.add_argument('--dry-run', action='store_true', help='Report without writing')

    resync = subparsers.add_parser('resync', help='Recompute styles from image_styles')
    resync.add_argument('--dry-run', action='store_true', help='Report without writing')
    resync.add_argument(
        '--lang', choices=config.SUPPORTED_LANGUAGES, default=config.DEFAULT_LANGUAGE,
        help=f'Language of the derived names (default: {config.DEFAULT_LANGUAGE})'
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(level=config.LOG_LEVEL, log_file=config.LOG_FILE)

    try:
        if args.command == 'backfill':
            report = backfill_style_ids(dry_run=args.dry_run, show_progress=True)
        else:
            report = resync_legacy_styles(language=args.lang, dry_run=args.dry_run,
                                          show_progress=True)
    except StoreError as e:
        logger.error(f"Aborted, no artist was modified: {e}")
        return EXIT_FATAL

    print(report.summary())
    for artist_id, error in report.failures:
        print(f"  FAILED {artist_id}: {error}")
    return report.exit_code


if __name__ == '__main__':
    sys.exit(main())
