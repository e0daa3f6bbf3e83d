"""Obfuscated schema binary codec (.addr)."""

import pytest
from fastavro import schemaless_reader, schemaless_writer

from addressbook.codecs import EncodedCodec
from addressbook.codecs.encoded_codec import decode_string, encode_string
from addressbook.core import DecodeError, EncodeError


@pytest.fixture
def codec(entry_schema, tmp_path):
    return EncodedCodec(schema=entry_schema, data_dir=tmp_path)


def _raw_record(path, entry_schema):
    with open(path, "rb") as fo:
        return schemaless_reader(fo, entry_schema.parsed, None)


def test_strings_are_obfuscated_on_disk(codec, sample_entry, tmp_path):
    path = tmp_path / "one.addr"
    codec.write_entries([sample_entry], path)
    raw = path.read_bytes()
    for plain in (b"Lee", b"1 Elm", b"jo@x.com", b"MALE", b"SINGLE"):
        assert plain not in raw


def test_each_string_is_cipher_of_base64(codec, entry_schema, sample_entry, tmp_path):
    path = tmp_path / "one.addr"
    codec.write_entries([sample_entry], path)
    record = _raw_record(path, entry_schema)
    assert record["person"]["lastName"] == encode_string("Lee")
    assert record["person"]["gender"] == encode_string("MALE")
    assert record["address"]["zip"] == encode_string("45810")
    assert decode_string(record["notes"]) == "hi"


def test_integers_are_stored_plain(codec, entry_schema, sample_entry, tmp_path):
    path = tmp_path / "one.addr"
    codec.write_entries([sample_entry], path)
    record = _raw_record(path, entry_schema)
    assert record["entryId"] == 1
    assert record["person"]["age"] == 40


def test_nulls_stay_null(codec, entry_schema, sparse_entry, tmp_path):
    path = tmp_path / "sparse.addr"
    codec.write_entries([sparse_entry], path)
    record = _raw_record(path, entry_schema)
    assert record["notes"] is None
    assert record["person"]["gender"] is None
    assert codec.read_entries(path) == [sparse_entry]


def test_same_wire_shape_as_schema_binary(codec, entry_schema, sample_entry, tmp_path):
    first = tmp_path / "a.addr"
    both = tmp_path / "b.addr"
    codec.write_entries([sample_entry], first)
    codec.write_entries([sample_entry, sample_entry], both)
    assert both.read_bytes() == first.read_bytes() * 2


def test_unknown_enum_name_is_a_decode_error(codec, entry_schema, sample_entry, tmp_path):
    record = codec.to_record(sample_entry)
    record["person"]["maritalStatus"] = encode_string("ENGAGED")
    path = tmp_path / "bad.addr"
    with open(path, "wb") as fo:
        schemaless_writer(fo, entry_schema.parsed, record)
    with pytest.raises(DecodeError):
        codec.read_entries(path)


def test_invalid_base64_falls_back_to_clarified_text(codec, entry_schema, sample_entry, tmp_path):
    record = codec.to_record(sample_entry)
    record["notes"] = "not*base64"
    path = tmp_path / "odd.addr"
    with open(path, "wb") as fo:
        schemaless_writer(fo, entry_schema.parsed, record)
    assert codec.read_entries(path)[0].notes == "abg*onfr19"


def test_out_of_range_id_cannot_be_written(codec, sample_entry, tmp_path):
    with pytest.raises(EncodeError):
        codec.write_entries([sample_entry.model_copy(update={"entry_id": 2**40})], tmp_path / "big.addr")


def test_codec_decoder_matches_shared_helper(codec, unicode_entry):
    record = codec.to_record(unicode_entry)
    assert codec._decode_string(record["notes"]) == decode_string(record["notes"]) == unicode_entry.notes
    assert codec.from_record(record) == unicode_entry
