"""Command-line entry point."""

import json

import pytest

from linacc import accumulate, seed_from_text, update_many, xor_all
from linacc.cli import main
from linacc.serialization import words_to_hex


def _words_from_output(out: str) -> list:
    return [int(line.split()[-1], 16) for line in out.splitlines() if "word[" in line]


def test_accumulate_prints_packed_words(capsys) -> None:
    main(["accumulate", "--input", "0xDEADBEEF", "--step", "0", "--seed_text", "test-seed"])

    out = capsys.readouterr().out
    assert _words_from_output(out) == accumulate(0xDEADBEEF, 0, 64, seed_from_text("test-seed"))


def test_accumulate_accepts_hex_seed(capsys) -> None:
    seed = seed_from_text("test-seed")
    main(["accumulate", "--input", "5", "--step", "1", "--rows", "8", "--q", "97", "--seed", seed.hex()])

    assert _words_from_output(capsys.readouterr().out) == accumulate(5, 1, 8, seed, 97)


def test_fold_then_update_through_file(tmp_path, capsys) -> None:
    seed = seed_from_text("trace")
    path = tmp_path / "acc.json"

    main(["fold", "--inputs", "1,2,3", "--start_step", "0", "--seed_text", "trace", "--out_file", str(path)])
    payload = json.loads(path.read_text())
    assert payload["words"] == words_to_hex(update_many([1, 2, 3], 0, 64, seed))
    assert payload["linacc_metadata"]["step_index"] == 2

    capsys.readouterr()
    main(["update", "--acc_file", str(path), "--input", "4", "--step", "3", "--seed_text", "trace"])
    assert _words_from_output(capsys.readouterr().out) == update_many([1, 2, 3, 4], 0, 64, seed)


def test_xor_command(capsys) -> None:
    main(["xor", "--acc", "1,2,4,8"])

    assert int(capsys.readouterr().out.strip(), 16) == xor_all([1, 2, 4, 8]) == 15


def test_row_command_prints_coefficients(capsys) -> None:
    main(["row", "--step", "0", "--row", "0", "--rows", "4", "--q", "2", "--seed_text", "test-seed"])

    values = [int(v) for v in capsys.readouterr().out.split()]
    assert len(values) == 4
    assert set(values) <= {0, 1}


def test_rank_command(capsys) -> None:
    main(["rank", "--step", "0", "--rows", "6", "--seed_text", "test-seed"])

    assert "rank 6 / 6" in capsys.readouterr().out


@pytest.mark.parametrize(
    "argv",
    [
        ["accumulate", "--input", "1", "--step", "0", "--rows", "65", "--seed_text", "s"],
        ["accumulate", "--input", "1", "--step", "0", "--q", "1", "--seed_text", "s"],
        ["accumulate", "--input", "1", "--step", "0", "--seed", "abcd"],
        ["xor", "--acc", "1,2"],
        ["xor"],
    ],
)
def test_invalid_parameters_exit_with_error(argv, capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        main(argv)

    assert exc.value.code == 1
    assert "ERROR" in capsys.readouterr().out
