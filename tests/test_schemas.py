"""Unit tests for the maze schema models."""

import pytest
from pydantic import ValidationError

from labyrinth.maze import MazeGrid, MazeState, MoveOutcome


def test_maze_state_basic_fields():
    state = MazeState(rows=["#.#", "#1#"])
    assert state.row_count == 2
    assert state.col_count == 3
    assert state.max_dim == 100


@pytest.mark.parametrize(
    "rows",
    [
        [],
        [""],
        ["#.#", "#."],
        ["#?#"],
    ],
)
def test_maze_state_rejects_bad_shapes(rows):
    with pytest.raises(ValidationError):
        MazeState(rows=rows)


def test_maze_state_respects_max_dim():
    with pytest.raises(ValidationError):
        MazeState(rows=["...", "...", "..."], max_dim=2)


def test_maze_state_json_snapshot():
    state = MazeState(rows=["#.#", "#2#"])
    restored = MazeState.model_validate_json(state.model_dump_json())
    assert restored == state


def test_grid_state_snapshot_and_restore():
    grid = MazeGrid.from_lines(["1..", "..."])
    snapshot = grid.to_state()

    grid.set(0, 0, ".")
    grid.set(1, 2, "1")
    assert grid.lines() == ["...", "..1"]

    grid.restore(snapshot)
    assert grid.lines() == ["1..", "..."]
    assert MazeGrid.from_state(snapshot) == grid


def test_grid_set_rejects_bad_values():
    grid = MazeGrid.from_lines(["..."])
    with pytest.raises(ValueError):
        grid.set(0, 0, "x")
    with pytest.raises(IndexError):
        grid.set(1, 0, ".")


def test_move_outcome_player_range():
    outcome = MoveOutcome(player=3, direction="up", origin=(1, 1), target=(0, 1))
    assert outcome.placed is False
    with pytest.raises(ValidationError):
        MoveOutcome(player=10, direction="up", target=(0, 0))
