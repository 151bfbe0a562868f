import numpy as np

from snakegame.board import EMPTY, FOOD, SNAKE, Snapshot, cell_at, encode_board, snapshot
from snakegame.game import new_session


def make_snapshot(snake, food):
    return Snapshot(
        grid_size=3,
        snake=tuple(snake),
        food=food,
        score=len(snake) - 1,
        high_score=0,
        alive=True,
        game_over=False,
    )


def test_encode_board_marks_cells():
    board = encode_board(make_snapshot([(1, 0), (0, 0)], (2, 1)))
    assert board.shape == (3, 3)
    assert board[0, 0] == SNAKE
    assert board[0, 1] == SNAKE
    assert board[1, 2] == FOOD
    assert np.count_nonzero(board == EMPTY) == 6


def test_snake_drawn_over_food():
    board = encode_board(make_snapshot([(2, 1)], (2, 1)))
    assert board[1, 2] == SNAKE
    assert np.count_nonzero(board == FOOD) == 0


def test_cell_at():
    snap = make_snapshot([(1, 0), (0, 0)], (2, 1))
    assert cell_at(snap, (0, 0)) == "snake"
    assert cell_at(snap, (2, 1)) == "food"
    assert cell_at(snap, (2, 2)) == "empty"


def test_snapshot_of_initial_session():
    snap = snapshot(new_session(high_score=3))
    assert snap.grid_size == 18
    assert snap.snake == ((2, 2),)
    assert snap.high_score == 3
    assert encode_board(snap)[5, 5] == FOOD
