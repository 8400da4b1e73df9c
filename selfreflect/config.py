import logging
import os

# Get DATABASE_URL, but validate it; fallback to SQLite if invalid
_raw_db_url = os.getenv("DATABASE_URL", "sqlite:///selfreflect.db")

# If DATABASE_URL looks malformed, use SQLite instead
if _raw_db_url and not _raw_db_url.startswith(("sqlite://", "postgresql://", "postgres://")):
    logging.getLogger(__name__).warning("Invalid DATABASE_URL detected. Using SQLite fallback.")
    DATABASE_URL = "sqlite:///selfreflect.db"
else:
    DATABASE_URL = _raw_db_url

STORAGE_KEY = os.getenv("STORAGE_KEY", "journal_entries")
DICTIONARY_API_URL = os.getenv("DICTIONARY_API_URL", "https://api.dictionaryapi.dev/api/v2/entries/en")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging():
    level = getattr(logging, LOG_LEVEL, logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)


def get_diagnostics():
    return {
        "Database": "SQLite (Default)" if "sqlite" in DATABASE_URL else "Postgres",
        "Storage key": STORAGE_KEY,
        "Dictionary API": DICTIONARY_API_URL,
        "Log level": LOG_LEVEL,
    }
