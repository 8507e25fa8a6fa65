"""Counters and failure log shared by the artist batch jobs."""

import threading
from typing import Any, Dict, List, Tuple

EXIT_OK = 0
EXIT_PARTIAL_FAILURE = 1
EXIT_FATAL = 2


class BatchReport:
    """
    Outcome of one pass over all artists.

    Safe to update from worker threads: every mutation takes the lock.
    """

    def __init__(self, job: str, kind: str = None, dry_run: bool = False):
        self.job = job
        self.kind = kind
        self.dry_run = dry_run
        self.artists_scanned = 0
        self.artists_needing_update = 0
        self.artists_updated = 0
        self.invalid_ids_removed = 0
        self.invalid_ids = set()
        self.failures: List[Tuple[str, str]] = []
        self.changes: List[Dict[str, Any]] = []
        self._lock = threading.Lock()

    def record_scanned(self):
        with self._lock:
            self.artists_scanned += 1

    def record_invalid_ids(self, ids):
        with self._lock:
            self.invalid_ids.update(ids)

    def record_staged(self, change: Dict[str, Any]):
        with self._lock:
            self.artists_needing_update += 1
            self.changes.append(change)

    def record_updated(self):
        with self._lock:
            self.artists_updated += 1

    def record_removed(self, count: int):
        with self._lock:
            self.invalid_ids_removed += count

    def record_failure(self, artist_id: str, error: str):
        with self._lock:
            self.failures.append((artist_id, error))

    @property
    def has_failures(self) -> bool:
        return bool(self.failures)

    @property
    def exit_code(self) -> int:
        return EXIT_PARTIAL_FAILURE if self.failures else EXIT_OK

    def summary(self) -> str:
        verb = "would update" if self.dry_run else "updated"
        count = self.artists_needing_update if self.dry_run else self.artists_updated
        text = f"{self.job}: scanned {self.artists_scanned} artists, {verb} {count}"
        if self.invalid_ids_removed or self.invalid_ids:
            text += f", removed {self.invalid_ids_removed} invalid references"
        if self.failures:
            text += f", {len(self.failures)} failed"
        return text

    def to_dict(self) -> Dict[str, Any]:
        return {
            'job': self.job,
            'kind': self.kind,
            'dry_run': self.dry_run,
            'artists_scanned': self.artists_scanned,
            'artists_needing_update': self.artists_needing_update,
            'artists_updated': self.artists_updated,
            'invalid_ids_removed': self.invalid_ids_removed,
            'invalid_ids': sorted(self.invalid_ids, key=str),
            'failures': [{'artist_id': a, 'error': e} for a, e in self.failures],
            'changes': sorted(self.changes, key=lambda c: str(c.get('artist_id'))),
            'message': self.summary(),
        }
