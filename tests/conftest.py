"""
Pytest fixtures and test configuration
"""
import pytest
import os
import sys

# Set testing environment variables BEFORE importing app modules
os.environ['TESTING'] = 'true'
os.environ['SUPABASE_URL'] = ''
os.environ['NEXT_PUBLIC_SUPABASE_URL'] = ''
os.environ['RELOAD_SECRET'] = 'test-secret'

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import config
import repositories
from repositories import ArtistFetchError, ArtistUpdateError, CatalogFetchError, NotFoundError
from repositories.base import TagStore, check_artist_fields
from repositories.local_store import LocalStore
from services.tagging import Artist, ImageTagEntry, TagCatalogEntry, STYLE, MOTIF

TEST_SECRET = 'test-secret'


def make_catalog(names, kind=STYLE):
    """[(id, ja, en), ...] -> [TagCatalogEntry]"""
    return [TagCatalogEntry(tag_id, ja, en, kind=kind) for tag_id, ja, en in names]


def make_artist(artist_id='a1', image_styles=None, image_motifs=None, **kwargs):
    """Build an Artist from {url: [ids]} mappings."""
    return Artist(
        id=artist_id,
        image_styles=[ImageTagEntry(url, ids) for url, ids in (image_styles or {}).items()],
        image_motifs=[ImageTagEntry(url, ids) for url, ids in (image_motifs or {}).items()],
        **kwargs
    )


class FakeStore(TagStore):
    """In-memory store that records every write."""

    name = 'fake'

    def __init__(self, styles=None, motifs=None, artists=None):
        self.catalogs = {STYLE: list(styles or []), MOTIF: list(motifs or [])}
        self.artists = {artist.id: artist for artist in (artists or [])}
        self.updates = []
        self.fail_updates_for = set()
        self.fail_catalog_fetch = False
        self.fail_artist_fetch = False

    def fetch_catalog(self, kind):
        if self.fail_catalog_fetch:
            raise CatalogFetchError("catalog unavailable")
        return list(self.catalogs[kind])

    def fetch_catalog_entry(self, kind, entry_id):
        for entry in self.catalogs[kind]:
            if entry.id == entry_id:
                return entry
        raise NotFoundError(f"{kind} {entry_id} not found")

    def create_catalog_entry(self, kind, name_ja, name_en):
        next_id = max([e.id for e in self.catalogs[kind]] or [0]) + 1
        entry = TagCatalogEntry(next_id, name_ja, name_en, kind=kind)
        self.catalogs[kind].append(entry)
        return entry

    def update_catalog_entry(self, kind, entry_id, name_ja=None, name_en=None):
        entry = self.fetch_catalog_entry(kind, entry_id)
        if name_ja is not None:
            entry.name_ja = name_ja
        if name_en is not None:
            entry.name_en = name_en
        return entry

    def delete_catalog_entry(self, kind, entry_id):
        entry = self.fetch_catalog_entry(kind, entry_id)
        self.catalogs[kind].remove(entry)

    def fetch_artists(self):
        if self.fail_artist_fetch:
            raise ArtistFetchError("artists unavailable")
        return [self.artists[key] for key in sorted(self.artists)]

    def fetch_artist(self, artist_id):
        if artist_id not in self.artists:
            raise NotFoundError(f"Artist {artist_id} not found")
        return self.artists[artist_id]

    def update_artist(self, artist_id, fields):
        check_artist_fields(fields)
        if artist_id in self.fail_updates_for:
            raise ArtistUpdateError(f"write rejected for {artist_id}")
        self.updates.append((artist_id, fields))
        row = {'id': artist_id}
        current = self.artists[artist_id]
        row.update(current.to_fields(['style_ids', 'styles', 'image_styles', 'image_motifs']))
        row['name_ja'] = current.name_ja
        row['name_en'] = current.name_en
        row['portfolio_images'] = list(current.images)
        row.update(fields)
        self.artists[artist_id] = Artist.from_row(row)


@pytest.fixture
def style_catalog():
    return make_catalog([
        (1, '和彫り', 'Japanese Traditional'),
        (2, 'ブラックワーク', 'Blackwork'),
        (3, 'リアリズム', 'Realism'),
    ])


@pytest.fixture
def motif_catalog():
    return make_catalog([
        (1, '龍', 'Dragon'),
        (2, '虎', 'Tiger'),
    ], kind=MOTIF)


@pytest.fixture
def fake_store(style_catalog, motif_catalog):
    return FakeStore(styles=style_catalog, motifs=motif_catalog)


@pytest.fixture
def test_db_path(tmp_path):
    """Path to test database file."""
    return str(tmp_path / 'test_inkfinder.db')


@pytest.fixture
def local_store(test_db_path, monkeypatch):
    """LocalStore on a fresh, seeded database file."""
    import database.core
    monkeypatch.setattr(database.core, 'DB_FILE', test_db_path)
    return LocalStore(test_db_path, initialize=True)


@pytest.fixture(autouse=True)
def isolated_store():
    """Never leak a process-wide store between tests."""
    repositories.reset_store()
    yield
    repositories.reset_store()


@pytest.fixture
def app(fake_store, monkeypatch):
    """Quart app wired to the in-memory store."""
    from app import create_app
    monkeypatch.setattr(config, 'RELOAD_SECRET', TEST_SECRET)
    monkeypatch.setattr(config, 'LOG_FILE', None)
    app = create_app(store=fake_store)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    """Quart test client."""
    return app.test_client()
