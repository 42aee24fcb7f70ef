import pytest

from solong.mapfile import (
    GameMap,
    MapError,
    check_reachable,
    load_map,
    read_map_lines,
    validate_map,
)

VALID = "1111111\n1P0C0E1\n1111111\n"


def lines_of(text):
    return text.splitlines(keepends=True)


def write(tmp_path, text, name="map.ber"):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_read_map_lines_keeps_line_endings(tmp_path):
    lines = read_map_lines(write(tmp_path, VALID))
    assert lines == lines_of(VALID)
    assert "".join(lines) == VALID


def test_read_map_lines_missing_file(tmp_path):
    with pytest.raises(MapError, match="No map found."):
        read_map_lines(tmp_path / "absent.ber")


def test_read_map_lines_empty_file(tmp_path):
    with pytest.raises(MapError, match="Invalid map."):
        read_map_lines(write(tmp_path, ""))


def test_validate_map_reads_layout():
    lines = lines_of(VALID)
    game_map = validate_map(lines)
    assert game_map.rows == len(lines)
    assert game_map.cols == len(lines[0]) - 1
    assert ["".join(row) for row in game_map.grid] == [line.rstrip("\n") for line in lines]
    assert game_map.player == (1, lines[1].index("P"))
    assert game_map.coins == VALID.count("C")


def test_last_line_without_newline_is_accepted():
    with_newline = validate_map(lines_of(VALID))
    without = validate_map(lines_of(VALID.rstrip("\n")))
    assert without.grid == with_newline.grid


def test_bug_tiles_are_allowed():
    text = "11111111\n1P0CB0E1\n11111111\n"
    game_map = validate_map(lines_of(text))
    assert "".join(game_map.grid[1]) == text.splitlines()[1]


@pytest.mark.parametrize(
    "text",
    [
        "11111\n1PCE1\n10001\n10001\n11111\n",
        "1111011\n1P0C0E1\n1111111\n",
        "1111111\n0P0C0E1\n1111111\n",
        "1111111\n1P0C0E0\n1111111\n",
        "11111111\n1P0CXE01\n11111111\n",
        "1111111\n1PPC0E1\n1111111\n",
        "1111111\n1P000E1\n1111111\n",
        "1111111\n1PEC0E1\n1111111\n",
        "1111111\n1P0C001\n1111111\n",
        "1111111\n1P0C0E11\n1111111\n",
        "1111111\n1P0C0E1\n11111111\n",
        "1111111\n1111111\n",
        "11\n11\n11\n11\n",
    ],
)
def test_invalid_maps_are_rejected(text):
    with pytest.raises(MapError, match="Invalid map."):
        validate_map(lines_of(text))


def test_validate_map_rejects_no_lines():
    with pytest.raises(MapError):
        validate_map([])


def test_check_reachable_covers_items():
    game_map = validate_map(lines_of(VALID))
    reached = check_reachable(game_map)
    lines = VALID.splitlines()
    assert game_map.player in reached
    assert (1, lines[1].index("C")) in reached
    assert (1, lines[1].index("E")) in reached
    assert all(game_map.tile(row, col) != "1" for row, col in reached)


@pytest.mark.parametrize(
    "text",
    [
        "1111111\n1P0E1C1\n1111111\n",
        "1111111\n1P0EBC1\n1111111\n",
        "1111111\n1PC01E1\n1111111\n",
    ],
)
def test_check_reachable_rejects_unreachable_items(text):
    game_map = validate_map(lines_of(text))
    with pytest.raises(MapError, match="Invalid map."):
        check_reachable(game_map)


def test_load_map_round_trip(tmp_path):
    game_map = load_map(write(tmp_path, VALID))
    assert ["".join(row) for row in game_map.grid] == VALID.splitlines()


def test_load_map_rejects_unreachable(tmp_path):
    with pytest.raises(MapError):
        load_map(write(tmp_path, "1111111\n1P0E1C1\n1111111\n"))


def test_tile_and_bounds():
    game_map = validate_map(lines_of(VALID))
    row, col = game_map.player
    assert game_map.tile(row, col) == "P"
    with pytest.raises(IndexError):
        game_map.tile(game_map.rows, 0)
    with pytest.raises(IndexError):
        game_map.tile(-1, 0)


def test_copy_is_independent():
    game_map = validate_map(lines_of(VALID))
    duplicate = game_map.copy()
    assert isinstance(duplicate, GameMap)
    assert duplicate == game_map
    duplicate.grid[1][2] = "1"
    assert game_map.tile(1, 2) == "0"
    assert duplicate != game_map