"""Runtime configuration for the address book codecs and API."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

PACKAGE_DIR = Path(__file__).resolve().parent

# Avro schema shared by the schema binary and encoded codecs
SCHEMA_PATH = Path(
    os.getenv("ADDRESSBOOK_SCHEMA_PATH", str(PACKAGE_DIR / "schemas" / "entry-schema.avsc"))
)

# Directory holding codec default output-data.* / input-data.* files
DATA_DIR = Path(os.getenv("ADDRESSBOOK_DATA_DIR", "."))

# JSON export used by the conversion CLI
EXPORT_FILE = os.getenv("ADDRESSBOOK_EXPORT_FILE", "export-data.json")

LOG_LEVEL = os.getenv("ADDRESSBOOK_LOG_LEVEL", "INFO").upper()

# Document store (stub) location
MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
MONGODB_DATABASE = os.getenv("MONGODB_DATABASE", "addressbook")
MONGODB_COLLECTION = os.getenv("MONGODB_COLLECTION", "entries")

# Validation
if LOG_LEVEL not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
    raise ValueError(
        f"ADDRESSBOOK_LOG_LEVEL={LOG_LEVEL!r} is not a logging level name."
    )
