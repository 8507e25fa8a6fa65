"""
Centralized configuration for all modules
"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Application name (used in log output and the API root)
APP_NAME = os.environ.get('APP_NAME', 'InkFinder')

# ==================== HOSTED STORE (SUPABASE) ====================

SUPABASE_URL = os.environ.get('SUPABASE_URL', os.environ.get('NEXT_PUBLIC_SUPABASE_URL', ''))

# Service role key bypasses row-level security; required for the repair job
SUPABASE_SERVICE_ROLE_KEY = os.environ.get('SUPABASE_SERVICE_ROLE_KEY', '')

# Anon key is enough for read-only access
SUPABASE_ANON_KEY = os.environ.get('SUPABASE_ANON_KEY', os.environ.get('NEXT_PUBLIC_SUPABASE_ANON_KEY', ''))

# PostgREST caps responses at 1000 rows by default, so bulk reads are paged
SUPABASE_PAGE_SIZE = int(os.environ.get('SUPABASE_PAGE_SIZE', 1000))

# Values shipped in .env.example that mean "not configured yet"
PLACEHOLDER_SUPABASE_URL = 'your_supabase_url'
PLACEHOLDER_SUPABASE_KEY = 'your_supabase_anon_key'


def get_supabase_key():
    """Prefer the service role key, fall back to the anon key."""
    return SUPABASE_SERVICE_ROLE_KEY or SUPABASE_ANON_KEY


def is_supabase_configured():
    """True when a usable hosted store URL and key are present."""
    key = get_supabase_key()
    return bool(
        SUPABASE_URL
        and key
        and SUPABASE_URL != PLACEHOLDER_SUPABASE_URL
        and key != PLACEHOLDER_SUPABASE_KEY
        and SUPABASE_URL.startswith('https://')
    )

# ==================== LOCAL STORE (SQLITE) ====================

# Used when the hosted store is not configured (local development)
DATABASE_PATH = os.environ.get('DATABASE_PATH', './inkfinder.db')

# SQLite lock wait in seconds
DB_TIMEOUT = float(os.environ.get('DB_TIMEOUT', 30.0))

# ==================== TAGGING ====================

# Language used when deriving the legacy `styles` display names
DEFAULT_LANGUAGE = os.environ.get('DEFAULT_LANGUAGE', 'ja')

SUPPORTED_LANGUAGES = ['ja', 'en']

# Max length accepted for catalog names in the admin API
CATALOG_NAME_MAX_LENGTH = 100

# ==================== REPAIR JOB ====================

# Artists are independent, so they may be repaired in parallel.
# 1 means sequential processing.
REPAIR_MAX_WORKERS = int(os.environ.get('REPAIR_MAX_WORKERS', 1))

# ==================== APP SECURITY ====================

# System control secret (admin writes and the repair endpoint)
RELOAD_SECRET = os.environ.get('RELOAD_SECRET', 'change-this-secret')

# Secret key for Quart sessions
SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-key-change-for-production')

# ==================== LOGGING ====================

# Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

# Optional log file in addition to stdout
LOG_FILE = os.environ.get('LOG_FILE') or None

# ==================== WEB APP ====================

FLASK_HOST = os.environ.get('FLASK_HOST', '0.0.0.0')
FLASK_PORT = int(os.environ.get('FLASK_PORT', 5000))
