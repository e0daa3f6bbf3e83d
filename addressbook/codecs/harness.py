"""Codec-agnostic write -> copy -> read check.

Every codec is driven through the same steps: write the entries to an
output file, replace any stale input file with a copy of that output, read
the copy back and compare it with the original list.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from ..core import Entry
from ..services.file_data import FileDataUtil
from .base import EntryCodec

logger = logging.getLogger("addressbook.codecs.harness")


@dataclass
class RoundTripResult:
    codec: str
    output_file: Path
    input_file: Path
    written: list[Entry]
    read: list[Entry]
    elapsed: float

    @property
    def matches(self) -> bool:
        return self.read == self.written


def output_file(codec: EntryCodec, directory: Path, prefix: str) -> Path:
    return directory / f"{prefix}.{codec.extension}"


def copy_output_to_input(output_path: Path, input_path: Path) -> None:
    if FileDataUtil.delete(input_path):
        logger.info("Deleted old input file: %s", input_path)
    if not FileDataUtil.copy(output_path, input_path):
        raise RuntimeError(f"copy failed, cannot proceed: {output_path} -> {input_path}")


def run_round_trip(
    codec: EntryCodec,
    entries: Sequence[Entry],
    directory: str | Path,
    output_prefix: str = "test-binary-output",
    input_prefix: str = "test-binary-input",
) -> RoundTripResult:
    directory = Path(directory)
    output_path = output_file(codec, directory, output_prefix)
    input_path = output_file(codec, directory, input_prefix)

    started = time.perf_counter()
    codec.write_entries(entries, output_path)
    copy_output_to_input(output_path, input_path)
    read_back = codec.read_entries(input_path)
    elapsed = time.perf_counter() - started

    result = RoundTripResult(
        codec=codec.name,
        output_file=output_path,
        input_file=input_path,
        written=list(entries),
        read=read_back,
        elapsed=elapsed,
    )
    if result.matches:
        logger.info("%s: %d entries match", codec.name, len(read_back))
    else:
        logger.error(
            "%s: ENTRIES DO NOT MATCH (wrote %d, read %d)",
            codec.name,
            len(entries),
            len(read_back),
        )
    return result
