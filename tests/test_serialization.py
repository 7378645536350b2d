"""JSON payloads for packed accumulators."""

import json

import pytest

from linacc import LinaccParams, ParameterError, accumulate, read_packed_json, write_packed_json
from linacc.serialization import packed_to_payload, parse_int, parse_words, payload_to_packed, words_to_hex


def test_parse_int_accepts_hex_and_decimal() -> None:
    assert parse_int("0xDEADBEEF") == 0xDEADBEEF
    assert parse_int("42") == 42
    assert parse_int(" 0xFFFF_FFFF ") == 0xFFFFFFFF
    assert parse_int(7) == 7


def test_parse_words_splits_on_commas_and_spaces() -> None:
    assert parse_words("1, 0x2,3 4") == [1, 2, 3, 4]
    with pytest.raises(ParameterError):
        parse_words("1,2,3")


def test_words_to_hex_is_fixed_width() -> None:
    out = words_to_hex([0, 1, 0xFFFF, 1 << 255])

    assert all(len(w) == 66 for w in out)
    assert out[1] == "0x" + "0" * 63 + "1"


def test_payload_carries_metadata(seed: bytes) -> None:
    words = accumulate(0xDEADBEEF, 3, 64, seed)
    payload = packed_to_payload(words, LinaccParams(), step_index=3)

    assert payload["linacc_metadata"] == {"num_rows": 64, "q": 65521, "hash": "keccak256", "step_index": 3}
    assert payload_to_packed(payload) == (words, payload["linacc_metadata"])


def test_payload_without_words_is_rejected() -> None:
    with pytest.raises(ValueError):
        payload_to_packed({"linacc_metadata": {}})


def test_payload_with_three_words_is_rejected() -> None:
    with pytest.raises(ParameterError):
        payload_to_packed({"words": ["0x1", "0x2", "0x3"]})


def test_file_round_trip(tmp_path, seed: bytes) -> None:
    words = accumulate(0xABC, 0, 16, seed, 257)
    path = tmp_path / "acc.json"

    write_packed_json(str(path), words, LinaccParams(num_rows=16, q=257))
    loaded, metadata = read_packed_json(str(path))

    assert loaded == words
    assert metadata["num_rows"] == 16
    assert json.loads(path.read_text())["words"][1:] == ["0x" + "0" * 64] * 3
