"""Entry codecs: four interchangeable file formats for a list of entries."""

from __future__ import annotations

from pathlib import Path

from .avro_codec import AvroCodec
from .base import EntryCodec
from .bson_codec import BsonCodec
from .encoded_codec import EncodedCodec
from .gzip_codec import GzipCodec
from .schema import EntrySchema, load_entry_schema

CODECS: dict[str, type[EntryCodec]] = {
    AvroCodec.name: AvroCodec,
    BsonCodec.name: BsonCodec,
    EncodedCodec.name: EncodedCodec,
    GzipCodec.name: GzipCodec,
}


def get_codec(
    name: str,
    schema: EntrySchema | None = None,
    data_dir: str | Path | None = None,
) -> EntryCodec:
    """Build the codec registered under ``name``; unknown names raise ``KeyError``."""

    codec_cls = CODECS[name]
    if issubclass(codec_cls, AvroCodec):
        return codec_cls(schema=schema, data_dir=data_dir)
    return codec_cls(data_dir=data_dir)


__all__ = [
    "CODECS",
    "AvroCodec",
    "BsonCodec",
    "EncodedCodec",
    "EntryCodec",
    "EntrySchema",
    "GzipCodec",
    "get_codec",
    "load_entry_schema",
]
