"""
Tests for batch job reporting
"""
import pytest

from services.batch_report import EXIT_OK, EXIT_PARTIAL_FAILURE, BatchReport


@pytest.mark.unit
def test_summary_and_dict():
    report = BatchReport('tag_repair', kind='style')
    report.record_scanned()
    report.record_scanned()
    report.record_invalid_ids([6, 5, 5])
    report.record_staged({'artist_id': 'b'})
    report.record_staged({'artist_id': 'a'})
    report.record_updated()
    report.record_removed(3)
    report.record_failure('b', 'write rejected')

    data = report.to_dict()
    assert data['invalid_ids'] == [5, 6]
    assert [c['artist_id'] for c in data['changes']] == ['a', 'b']
    assert data['failures'] == [{'artist_id': 'b', 'error': 'write rejected'}]
    assert data['message'] == 'tag_repair: scanned 2 artists, updated 1, removed 3 invalid references, 1 failed'
    assert report.exit_code == EXIT_PARTIAL_FAILURE


@pytest.mark.unit
def test_dry_run_summary():
    report = BatchReport('tag_repair', dry_run=True)
    report.record_scanned()
    report.record_staged({'artist_id': 'a'})
    assert report.summary() == 'tag_repair: scanned 1 artists, would update 1'
    assert report.exit_code == EXIT_OK
