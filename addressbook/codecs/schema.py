"""Loading of the Avro entry schema shared by the schema binary codecs."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from fastavro import parse_schema
from fastavro.schema import SchemaParseException

from .. import config
from ..core import SchemaError

logger = logging.getLogger("addressbook.codecs.schema")

# Top-level fields every entry schema must declare, in wire order.
ENTRY_FIELDS = ("entryId", "person", "address", "notes")


@dataclass(frozen=True)
class EntrySchema:
    """Parsed schema; read-only once loaded and safe to share between codecs."""

    path: Path
    parsed: Any


def load_entry_schema(path: str | Path | None = None) -> EntrySchema:
    """Read and parse the schema at ``path`` (defaults to ``config.SCHEMA_PATH``)."""

    schema_path = Path(path) if path is not None else config.SCHEMA_PATH
    try:
        raw = json.loads(schema_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise SchemaError(f"Schema file not found: {schema_path}") from exc
    except (OSError, ValueError) as exc:
        logger.error("Failed to load Avro schema %s", schema_path, exc_info=True)
        raise SchemaError(f"Failed to load Avro schema: {schema_path}") from exc

    if not isinstance(raw, dict) or raw.get("type") != "record":
        raise SchemaError(f"Schema {schema_path} is not an Avro record schema")
    names = tuple(field.get("name") for field in raw.get("fields", []))
    if names != ENTRY_FIELDS:
        raise SchemaError(
            f"Schema {schema_path} declares fields {names}, expected {ENTRY_FIELDS}"
        )

    try:
        parsed = parse_schema(raw)
    except (SchemaParseException, ValueError) as exc:
        logger.error("Invalid Avro schema %s", schema_path, exc_info=True)
        raise SchemaError(f"Invalid Avro schema: {schema_path}") from exc

    logger.debug("Loaded Avro schema from %s", schema_path)
    return EntrySchema(path=schema_path, parsed=parsed)
