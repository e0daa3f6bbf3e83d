"""Convert a JSON export into one codec's format and verify it reads back.

Usage:
    python -m addressbook.codecs.convert <avro|bson|addr|gz> [export.json]

Writes ``output-data.<ext>`` and then reads ``input-data.<ext>`` (a copy
of an earlier output, if one was placed there) or, failing that, the file
just written, and reports whether the entries match.
"""

from __future__ import annotations

import sys

from .. import config
from ..core import CodecError
from ..logging_setup import configure_logging
from ..services import FileDataUtil
from . import CODECS, get_codec


def convert(codec_name: str, export_file: str) -> bool:
    logger = configure_logging()
    codec = get_codec(codec_name)

    entries = FileDataUtil(export_file).read_data()
    if not entries:
        logger.error("No entries found in %s", export_file)
        return False

    output_file = codec.default_output_file
    codec.write_entries(entries, output_file)
    logger.info(
        "Successfully converted %d entries from JSON to %s format", len(entries), codec.name
    )
    logger.info("Output file: %s", output_file.resolve())

    input_file = codec.default_input_file
    if not input_file.exists():
        input_file = output_file
    read_back = codec.read_entries(input_file)
    logger.info("Read %d entries from %s", len(read_back), input_file)

    if read_back == entries:
        logger.info("Verification successful: entries match between output and input files")
        return True
    logger.info("Verification failed: entries do not match")
    logger.info("  Written entries: %d", len(entries))
    logger.info("  Read entries: %d", len(read_back))
    return False


def main(argv: list[str]) -> int:
    if not argv or argv[0] not in CODECS:
        print(f"usage: convert <{'|'.join(CODECS)}> [export.json]", file=sys.stderr)
        return 2
    export_file = argv[1] if len(argv) > 1 else config.EXPORT_FILE
    try:
        return 0 if convert(argv[0], export_file) else 1
    except (CodecError, OSError, ValueError) as exc:
        configure_logging().error("Error during %s conversion: %s", argv[0], exc)
        return 1


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
