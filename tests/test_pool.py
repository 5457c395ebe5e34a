import pytest

from raffle_pool.pool import build_pool, render_pool, tally_pool_file, write_pool


def test_build_pool_repeats_each_owner():
    assert build_pool({"0xA": 3, "0xB": 1}) == ["0xA", "0xA", "0xA", "0xB"]


def test_build_pool_empty():
    assert build_pool({}) == []
    assert render_pool([]) == ""


def test_line_count_equals_sum_of_balances(tmp_path):
    entries = {"0xA": 3, "0xB": 2, "0xC": 7}
    path = tmp_path / "participants"
    write_pool(str(path), render_pool(build_pool(entries)))

    lines = path.read_text(encoding="utf-8").split("\n")
    assert len(lines) == 12
    assert lines.count("0xC") == 7


def test_write_pool_overwrites(tmp_path):
    path = tmp_path / "participants"
    path.write_text("stale\nstale\nstale\n", encoding="utf-8")
    write_pool(str(path), "0xA")
    assert path.read_text(encoding="utf-8") == "0xA"


def test_write_pool_errors_raise(tmp_path):
    missing = tmp_path / "nope" / "participants"
    with pytest.raises(FileNotFoundError):
        write_pool(str(missing), "0xA")


def test_tally_pool_file(tmp_path):
    path = tmp_path / "participants"
    path.write_text("0xB\n0xA\n0xB\n\n", encoding="utf-8")
    assert tally_pool_file(str(path)) == {"0xB": 2, "0xA": 1}
