"""Local SQLite storage used when the hosted store is not configured."""

from .core import (
    get_db_connection,
    db_session,
    initialize_database,
    DEFAULT_STYLES,
    DEFAULT_MOTIFS,
)

__all__ = [
    'get_db_connection',
    'db_session',
    'initialize_database',
    'DEFAULT_STYLES',
    'DEFAULT_MOTIFS',
]
