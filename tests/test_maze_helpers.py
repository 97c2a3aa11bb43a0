"""Tests for maze connectivity, movement and rendering helpers."""

import pytest

from labyrinth.errors import InvalidArguments, MoveFailed, MultipleEmptyAreas
from labyrinth.maze import (
    MazeGrid,
    count_open_regions,
    find_duplicate_players,
    find_player,
    flood_fill,
    is_open_cell,
    move_player,
    move_player_steps,
    place_player,
    render_lines,
    render_map,
    validate_connectivity,
)


def grid_of(*rows: str) -> MazeGrid:
    return MazeGrid.from_lines(list(rows))


def test_open_cells_are_floor_and_digits():
    assert is_open_cell(".")
    assert is_open_cell("0")
    assert is_open_cell("9")
    assert not is_open_cell("#")


def test_single_open_cell_is_one_region():
    grid = grid_of("###", "#.#", "###")
    assert count_open_regions(grid) == 1
    validate_connectivity(grid)


def test_vertical_corridor_is_connected():
    validate_connectivity(grid_of("#.#", "#.#", "#.#"))


def test_disjoint_corners_raise_multiple_empty_areas():
    grid = grid_of(".#.", "###", ".#.")
    with pytest.raises(MultipleEmptyAreas):
        validate_connectivity(grid)


def test_all_walls_is_accepted():
    grid = grid_of("###", "###")
    assert count_open_regions(grid) == 0
    validate_connectivity(grid)


def test_player_digits_join_regions():
    # "0" bridges the two floor cells
    grid = grid_of(".0.", "###")
    assert count_open_regions(grid) == 1


def test_diagonal_cells_are_not_connected():
    grid = grid_of(".#", "#.")
    assert count_open_regions(grid) == 2


def test_count_open_regions_stops_early():
    grid = grid_of(".#.#.#.", "#######")
    assert count_open_regions(grid) == 4
    assert count_open_regions(grid, stop_after=2) == 2


def test_validation_does_not_modify_grid():
    grid = grid_of("#1.#", "#..#")
    before = grid.lines()
    validate_connectivity(grid)
    assert grid.lines() == before


def test_flood_fill_handles_large_open_map():
    # Fully open 100x100 map would exceed the default recursion limit with a recursive fill
    grid = grid_of(*(["." * 100] * 100))
    visited = set()
    assert flood_fill(grid, (0, 0), visited) == 10_000
    assert count_open_regions(grid) == 1


def test_flood_fill_ignores_wall_start():
    grid = grid_of("#.")
    visited = set()
    assert flood_fill(grid, (0, 0), visited) == 0
    assert visited == set()


def test_find_duplicate_players():
    grid = grid_of("1.1", ".2.")
    assert find_duplicate_players(grid) == {"1": [(0, 0), (0, 2)]}


def test_find_player_returns_first_row_major_match():
    grid = grid_of("..3", "3..")
    assert find_player(grid, 3) == (0, 2)
    assert find_player(grid, 4) is None


def test_place_player_uses_first_floor_cell():
    grid = grid_of("##.", "...")
    assert place_player(grid, 7) == (0, 2)
    assert grid.lines() == ["##7", "..."]


def test_place_player_without_floor_fails():
    grid = grid_of("#1#")
    with pytest.raises(MoveFailed):
        place_player(grid, 2)
    assert grid.lines() == ["#1#"]


def test_move_absent_player_places_it():
    grid = grid_of("###", "#.#", "###")
    outcome = move_player(grid, 1, "up")
    assert outcome.placed is True
    assert outcome.origin is None
    assert outcome.target == (1, 1)
    assert render_lines(grid) == ["###", "#1#", "###"]


def test_move_onto_floor():
    grid = grid_of("#...#", "#.2.#")
    outcome = move_player(grid, 2, "up")
    assert outcome.origin == (1, 2)
    assert outcome.target == (0, 2)
    assert grid.lines() == ["#.2.#", "#...#"]
    assert grid.count("2") == 1


@pytest.mark.parametrize(
    "direction, expected",
    [
        ("up", [".5.", "...", "..."]),
        ("down", ["...", "...", ".5."]),
        ("left", ["...", "5..", "..."]),
        ("right", ["...", "..5", "..."]),
    ],
)
def test_move_each_direction(direction, expected):
    grid = grid_of("...", ".5.", "...")
    move_player(grid, 5, direction)
    assert grid.lines() == expected


@pytest.mark.parametrize(
    "rows, direction",
    [
        (("#1#", "#.#"), "up"),  # off-grid
        (("1..",), "left"),  # off-grid
        (("..1",), "right"),  # off-grid
        (("#.#", "#1#"), "down"),  # off-grid
        (("#1#", "#.#"), "left"),  # wall
        ((".12",), "right"),  # another player
    ],
)
def test_failed_move_leaves_grid_unchanged(rows, direction):
    grid = grid_of(*rows)
    before = render_map(grid)
    with pytest.raises(MoveFailed):
        move_player(grid, 1, direction)
    assert render_map(grid) == before


def test_unknown_direction_fails_before_placement():
    grid = grid_of("...")
    with pytest.raises(MoveFailed):
        move_player(grid, 1, "north")
    assert grid.lines() == ["..."]


def test_direction_is_case_sensitive():
    grid = grid_of(".1.")
    with pytest.raises(MoveFailed):
        move_player(grid, 1, "LEFT")


def test_move_steps_applies_each_step():
    grid = grid_of("1...")
    outcomes = move_player_steps(grid, 1, "right", steps=3)
    assert [o.target for o in outcomes] == [(0, 1), (0, 2), (0, 3)]
    assert grid.lines() == ["...1"]


def test_move_steps_is_all_or_nothing():
    grid = grid_of("1..#")
    with pytest.raises(MoveFailed):
        move_player_steps(grid, 1, "right", steps=3)
    assert grid.lines() == ["1..#"]


def test_move_steps_rejects_zero():
    grid = grid_of("1..")
    with pytest.raises(InvalidArguments):
        move_player_steps(grid, 1, "right", steps=0)
    assert grid.lines() == ["1.."]


def test_render_map_terminates_every_line():
    grid = grid_of("#.#", "#1#")
    assert render_map(grid) == "#.#\n#1#\n"
