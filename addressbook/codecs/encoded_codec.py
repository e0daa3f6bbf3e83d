"""Obfuscated schema binary codec (``.addr`` files).

Same wire shape as :mod:`addressbook.codecs.avro_codec`, but every string
value is Base64 encoded and then run through the cipher before it is
written. Reading reverses the steps: cipher first, then Base64 decode.
Integers are stored as is.
"""

from __future__ import annotations

import base64
from typing import Any

from ..core import Entry
from .avro_codec import AvroCodec
from .cipher import clarify, obfuscate


def encode_string(value: str | None) -> str | None:
    if value is None:
        return None
    return obfuscate(base64.b64encode(value.encode("utf-8")).decode("ascii"))


def decode_string(value: str | None) -> str | None:
    if value is None:
        return None
    return base64.b64decode(clarify(value), validate=True).decode("utf-8")


class EncodedCodec(AvroCodec):
    name = "addr"
    extension = "addr"

    def to_record(self, entry: Entry) -> dict[str, Any]:
        return _map_strings(entry.to_document(), encode_string)

    def from_record(self, record: dict[str, Any]) -> Entry:
        return self._to_entry(_map_strings(record, self._decode_string))

    def _decode_string(self, value: str | None) -> str | None:
        if value is None:
            return None
        try:
            return decode_string(value)
        except ValueError:
            clarified = clarify(value)
            self.logger.warning("Failed to decode Base64 string: %s", clarified)
            return clarified


def _map_strings(document: dict[str, Any], transform) -> dict[str, Any]:
    mapped: dict[str, Any] = {}
    for key, value in document.items():
        if isinstance(value, dict):
            mapped[key] = _map_strings(value, transform)
        elif isinstance(value, str):
            mapped[key] = transform(value)
        else:
            mapped[key] = value
    return mapped
