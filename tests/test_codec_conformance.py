"""Round-trip behaviour every codec must share.

Each test runs once per registered codec through the same
write -> copy -> read harness.
"""

import pytest

from addressbook.codecs import CODECS, get_codec
from addressbook.codecs.harness import run_round_trip
from addressbook.core import CodecError, CodecIOError, MalformedInputError

CODEC_NAMES = sorted(CODECS)


@pytest.fixture(params=CODEC_NAMES)
def codec(request, entry_schema, tmp_path):
    return get_codec(request.param, schema=entry_schema, data_dir=tmp_path)


def test_round_trip_generated_entries(codec, generated_entries, tmp_path):
    result = run_round_trip(codec, generated_entries, tmp_path)
    assert result.matches
    assert len(result.read) == 200
    assert result.input_file.exists()


def test_round_trip_single_entry(codec, sample_entry, tmp_path):
    result = run_round_trip(codec, [sample_entry], tmp_path)
    assert result.read == [sample_entry]


def test_round_trip_preserves_nulls_and_unicode(codec, sparse_entry, unicode_entry, tmp_path):
    entries = [sparse_entry, unicode_entry]
    result = run_round_trip(codec, entries, tmp_path)
    assert result.read == entries
    assert result.read[0].notes is None
    assert result.read[0].person.gender is None


def test_round_trip_keeps_order_and_duplicate_ids(codec, sample_entry, tmp_path):
    later = sample_entry.model_copy(update={"notes": "second"})
    entries = [later, sample_entry, later]
    assert run_round_trip(codec, entries, tmp_path).read == entries


def test_empty_list(codec, tmp_path):
    path = tmp_path / f"empty.{codec.extension}"
    codec.write_entries([], path)
    assert codec.read_entries(path) == []


def test_missing_input_file(codec, tmp_path):
    missing = tmp_path / f"nonexistent.{codec.extension}"
    with pytest.raises(CodecIOError) as excinfo:
        codec.read_entries(missing)
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_unwritable_output_path(codec, sample_entry, tmp_path):
    with pytest.raises(CodecIOError):
        codec.write_entries([sample_entry], tmp_path / "no-such-dir" / "out")


def test_write_string_uses_default_output(codec, sample_entry, tmp_path):
    json_text = "[" + sample_entry.model_dump_json(by_alias=True) + "]"
    path = codec.write_string(json_text)
    assert path == tmp_path / f"output-data.{codec.extension}"
    assert codec.read_entries(path) == [sample_entry]


def test_write_string_rejects_malformed_json_before_io(codec, tmp_path):
    with pytest.raises(MalformedInputError):
        codec.write_string('[{"entryId": 1, "person": ')
    with pytest.raises(MalformedInputError):
        codec.write_string('[{"entryId": 1, "person": {"gender": "male"}, "address": {}}]')
    assert not codec.default_output_file.exists()


def test_errors_share_one_base(codec, tmp_path):
    with pytest.raises(CodecError):
        codec.read_entries(tmp_path / "missing")


def test_codec_does_not_mutate_input(codec, sample_entry, tmp_path):
    entries = [sample_entry]
    before = sample_entry.model_dump()
    codec.write_entries(entries, tmp_path / "out")
    assert entries == [sample_entry]
    assert sample_entry.model_dump() == before


def test_codecs_compared_on_timing(entry_schema, generated_entries, tmp_path):
    timings = {}
    for name in CODEC_NAMES:
        codec = get_codec(name, schema=entry_schema, data_dir=tmp_path)
        result = run_round_trip(codec, generated_entries, tmp_path)
        assert result.matches
        timings[name] = result.elapsed
    assert set(timings) == {"addr", "avro", "bson", "gz"}
    assert all(elapsed >= 0 for elapsed in timings.values())
