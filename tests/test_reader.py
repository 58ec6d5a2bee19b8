import io

import pytest

from berlint.reader import count_lines, iter_lines, join, read_map_lines


def test_iter_lines_keeps_newlines():
    assert list(iter_lines(io.StringIO("ab\ncd\n"))) == ["ab\n", "cd\n"]


def test_iter_lines_last_line_without_newline():
    assert list(iter_lines(io.StringIO("ab\ncd"))) == ["ab\n", "cd"]


def test_iter_lines_empty_stream():
    assert list(iter_lines(io.StringIO(""))) == []


@pytest.mark.parametrize("size", [1, 2, 3, 5, 42, 1000])
def test_iter_lines_rejoin_for_any_buffer_size(size):
    text = "1111111\n1P0C0E1\n\n1111111\nno newline at end"
    lines = list(iter_lines(io.StringIO(text), size))
    assert "".join(lines) == text
    assert all(line.endswith("\n") for line in lines[:-1])
    assert all(line.count("\n") <= 1 for line in lines)


def test_iter_lines_bad_buffer_size():
    with pytest.raises(ValueError):
        iter_lines(io.StringIO("x"), 0)


def test_join_concatenates():
    assert join(["ab", "cd", ""]) == "abcd"


def test_join_stops_each_part_at_nul():
    assert join(["a\0b", "c"]) == "ac"


def test_read_map_lines_drops_blank_lines():
    stream = io.StringIO("111\n1P1\n\n111\n")
    assert read_map_lines(stream) == ["111", "1P1", "111"]


def test_read_map_lines_empty():
    assert read_map_lines(io.StringIO("")) == []


def test_count_lines(tmp_path):
    path = tmp_path / "map.ber"
    path.write_text("111\n1P1\n111")
    assert count_lines(path) == 3


def test_count_lines_counts_blank_lines(tmp_path):
    path = tmp_path / "map.ber"
    path.write_text("111\n\n111\n")
    assert count_lines(path) == 3


def test_count_lines_creates_missing_file(tmp_path):
    path = tmp_path / "missing.ber"
    assert count_lines(path) == 0
    assert path.exists()