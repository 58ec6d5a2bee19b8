import pytest

from berlint.validate import (
    check_map_file,
    components_correct,
    count_char,
    ends_with_wall,
    has_foreign_chars,
    has_only_walls,
    is_component_missing,
    is_map_valid,
    is_surrounded_by_walls,
    lines_same_length,
)

VALID = ["111111", "1P0C01", "100E01", "111111"]


@pytest.mark.parametrize(
    "line, expected", [("111", True), ("101", False), ("", True), ("1E1", False)]
)
def test_has_only_walls(line, expected):
    assert has_only_walls(line) is expected


@pytest.mark.parametrize(
    "line, expected", [("101", True), ("110", False), ("", False), ("1", True)]
)
def test_ends_with_wall(line, expected):
    assert ends_with_wall(line) is expected


def test_surrounded_valid_map():
    assert is_surrounded_by_walls(VALID, len(VALID)) is True


def test_surrounded_hole_in_top():
    lines = ["110111"] + VALID[1:]
    assert is_surrounded_by_walls(lines, len(lines)) is False


def test_surrounded_hole_in_bottom():
    lines = VALID[:-1] + ["111101"]
    assert is_surrounded_by_walls(lines, len(lines)) is False


def test_surrounded_middle_line_open_left():
    lines = [VALID[0], "0P0C01", VALID[2], VALID[3]]
    assert is_surrounded_by_walls(lines, len(lines)) is False


def test_surrounded_middle_line_open_right():
    lines = [VALID[0], VALID[1], "100E00", VALID[3]]
    assert is_surrounded_by_walls(lines, len(lines)) is False


def test_surrounded_single_line():
    assert is_surrounded_by_walls(["111"], 1) is True


def test_surrounded_count_beyond_lines_is_false():
    assert is_surrounded_by_walls(VALID, len(VALID) + 1) is False


def test_surrounded_zero_count_is_false():
    assert is_surrounded_by_walls(VALID, 0) is False


def test_has_foreign_chars():
    assert has_foreign_chars(VALID) is False
    assert has_foreign_chars(VALID + ["10X1"]) is True
    assert has_foreign_chars(["1 1"]) is True


def test_lines_same_length():
    assert lines_same_length(VALID) is True
    assert lines_same_length(VALID + ["11"]) is False
    assert lines_same_length([]) is True


def test_is_component_missing_player():
    assert is_component_missing(VALID) is False
    assert is_component_missing([line.replace("P", "0") for line in VALID]) is True
    assert is_component_missing([]) is True


def test_is_component_missing_decided_by_player_only():
    lines = [line.replace("E", "0") for line in VALID]
    assert is_component_missing(lines) is False


def test_count_char():
    assert count_char(VALID, "P") == 1
    assert count_char(VALID, "Z") == 0
    assert count_char(["CC", "1C"], "C") == 3


def test_components_correct_valid():
    assert components_correct(VALID) is True


def test_components_two_exits():
    lines = [VALID[0], "1PEC01", "100E01", VALID[3]]
    assert components_correct(lines) is False


def test_components_no_collectible():
    lines = [line.replace("C", "0") for line in VALID]
    assert components_correct(lines) is False


def test_components_two_players():
    lines = [VALID[0], "1P0C01", "1P0E01", VALID[3]]
    assert components_correct(lines) is False


def test_is_map_valid():
    assert is_map_valid(VALID, len(VALID)) is True
    assert is_map_valid(VALID + ["1111"], len(VALID) + 1) is False
    assert is_map_valid([], 0) is False


def test_check_map_file_valid(tmp_path):
    path = tmp_path / "map.ber"
    path.write_text("\n".join(VALID) + "\n")
    assert check_map_file(path) is True


def test_check_map_file_invalid(tmp_path):
    path = tmp_path / "map.ber"
    path.write_text("111111\n1P0C01\n100E00\n111111\n")
    assert check_map_file(path) is False


def test_check_map_file_trailing_blank_line(tmp_path):
    path = tmp_path / "map.ber"
    path.write_text("\n".join(VALID) + "\n\n")
    assert check_map_file(path) is False


def test_check_map_file_missing_is_created(tmp_path):
    path = tmp_path / "map.ber"
    assert check_map_file(path) is False
    assert path.exists()
    assert path.read_text() == ""