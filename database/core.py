# database/core.py
import sqlite3
from contextlib import contextmanager
from typing import Generator, Optional

import config
from utils.logging_config import get_logger

logger = get_logger('Database')

DB_FILE = config.DATABASE_PATH

# Catalog shipped with the site; used to seed an empty local database
DEFAULT_STYLES = [
    (1, '和彫り', 'Japanese Traditional'),
    (2, 'ブラックワーク', 'Blackwork'),
    (3, 'リアリズム', 'Realism'),
    (4, 'トライバル', 'Tribal'),
    (5, 'ドットワーク', 'Dotwork'),
    (6, '水彩画', 'Watercolor'),
    (7, 'ファインライン', 'Fine Line'),
    (8, 'オールドスクール', 'Old School'),
    (9, 'ニュースクール', 'New School'),
    (10, '幾何学模様', 'Geometric'),
    (11, 'チカーノ', 'Chicano'),
    (12, 'カラータトゥー', 'Color Tattoo'),
    (13, 'ブラック＆グレー', 'Black & Grey'),
    (14, 'ポートレート', 'Portrait'),
    (15, 'ミニマル', 'Minimal'),
]

DEFAULT_MOTIFS = [
    (1, '龍', 'Dragon'),
    (2, '虎', 'Tiger'),
    (3, '鯉', 'Koi'),
    (4, '桜', 'Cherry Blossom'),
    (5, '菊', 'Chrysanthemum'),
    (6, '牡丹', 'Peony'),
    (7, '蓮', 'Lotus'),
    (8, '鳳凰', 'Phoenix'),
    (9, '般若', 'Hannya'),
    (10, '髑髏', 'Skull'),
    (11, '蛇', 'Snake'),
    (12, '鷹', 'Eagle'),
    (13, '狼', 'Wolf'),
    (14, '獅子', 'Lion'),
    (15, '薔薇', 'Rose'),
    (16, '蝶', 'Butterfly'),
    (17, '観音', 'Kannon'),
    (18, '不動明王', 'Fudo Myoo'),
    (19, '鬼', 'Oni'),
    (20, '侍', 'Samurai'),
]


def get_db_connection(db_file: Optional[str] = None):
    """Create a database connection with dict-like rows."""
    # Wait for locks instead of failing immediately
    conn = sqlite3.connect(db_file or DB_FILE, check_same_thread=False, timeout=config.DB_TIMEOUT)
    conn.execute("PRAGMA foreign_keys = ON")
    conn.execute("PRAGMA journal_mode = WAL")
    conn.execute("PRAGMA synchronous = NORMAL")
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def db_session(db_file: Optional[str] = None) -> Generator[sqlite3.Connection, None, None]:
    """
    Connection that commits on success, rolls back on error, and always closes.

    Usage:
        with db_session() as conn:
            conn.execute("UPDATE artists SET ...")
    """
    conn = get_db_connection(db_file)
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def _seed_catalog(cur, table: str, name_prefix: str, rows) -> int:
    cur.execute(f"SELECT COUNT(*) FROM {table}")
    if cur.fetchone()[0] > 0:
        return 0
    cur.executemany(
        f"INSERT INTO {table} (id, {name_prefix}_name_ja, {name_prefix}_name_en) VALUES (?, ?, ?)",
        rows,
    )
    return len(rows)


def initialize_database(db_file: Optional[str] = None, seed: bool = True):
    """Create the local tables if they don't exist and seed empty catalogs."""
    with db_session(db_file) as conn:
        cur = conn.cursor()

        cur.execute("""
        CREATE TABLE IF NOT EXISTS styles (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            style_name_ja TEXT NOT NULL,
            style_name_en TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
        """)

        cur.execute("""
        CREATE TABLE IF NOT EXISTS motifs (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            motif_name_ja TEXT NOT NULL,
            motif_name_en TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
        """)

        # Array columns hold JSON text, mirroring the hosted JSONB columns
        cur.execute("""
        CREATE TABLE IF NOT EXISTS artists (
            id TEXT PRIMARY KEY,
            name_ja TEXT,
            name_en TEXT,
            portfolio_images TEXT DEFAULT '[]',
            style_ids TEXT,
            styles TEXT DEFAULT '[]',
            image_styles TEXT DEFAULT '[]',
            image_motifs TEXT DEFAULT '[]',
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            last_updated TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
        """)

        if seed:
            seeded = _seed_catalog(cur, 'styles', 'style', DEFAULT_STYLES)
            seeded += _seed_catalog(cur, 'motifs', 'motif', DEFAULT_MOTIFS)
            if seeded:
                logger.info(f"Seeded {seeded} default catalog entries")

    logger.debug("Local database initialized.")
