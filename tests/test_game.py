import random

import pytest

from snakegame.config import DOWN, LEFT, RIGHT, UP
from snakegame.game import (
    BoardFullError,
    GameSession,
    new_session,
    place_food,
    step,
    wrap_pos,
)


class ScriptedRandom:
    """Replays fixed ``randrange`` results; ``choice`` takes the first item."""

    def __init__(self, values):
        self.values = list(values)

    def randrange(self, stop):
        return self.values.pop(0) if self.values else 0

    def choice(self, seq):
        return seq[0]


def make_session(snake, direction=RIGHT, food=(9, 9), grid_size=18, **kwargs):
    return GameSession(
        grid_size=grid_size,
        snake=tuple(snake),
        direction=direction,
        food=food,
        **kwargs,
    )


def test_initial_session_is_canonical():
    session = new_session(high_score=4)
    assert session.snake == ((2, 2),)
    assert session.direction == DOWN
    assert session.food == (5, 5)
    assert session.score == 0
    assert session.high_score == 4
    assert session.alive and not session.game_over
    assert session.tick_ms == 80


def test_snake_moves_straight_without_food():
    session = new_session()
    for _ in range(3):
        session = step(session, session.direction)
    assert session.head == (2, 5)
    assert len(session.snake) == 1
    assert session.score == 0
    assert session.alive


@pytest.mark.parametrize(
    "head,direction,expected",
    [
        ((17, 5), RIGHT, (0, 5)),
        ((0, 3), LEFT, (17, 3)),
        ((4, 0), UP, (4, 17)),
        ((4, 17), DOWN, (4, 0)),
    ],
)
def test_head_wraps_around_edges(head, direction, expected):
    session = step(make_session([head], direction), direction)
    assert session.head == expected
    assert session.alive


def test_wrap_pos_is_per_axis():
    assert wrap_pos((-1, 18), 18) == (17, 0)
    assert wrap_pos((5, 5), 18) == (5, 5)


def test_eating_food_grows_and_scores():
    session = make_session([(2, 2)], DOWN, food=(2, 3))
    after = step(session, DOWN, random.Random(0))
    assert after.score == 1
    assert len(after.snake) == 2
    assert after.snake == ((2, 3), (2, 2))
    assert after.food not in after.snake


def test_length_tracks_food_eaten():
    rng = ScriptedRandom([2, 0, 3, 0, 4, 0, 5, 0, 6, 0])
    session = make_session([(0, 0)], RIGHT, food=(1, 0))
    for _ in range(5):
        session = step(session, RIGHT, rng)
    assert session.score == 5
    assert len(session.snake) == 1 + 5
    assert session.head == (5, 0)
    assert session.food == (6, 0)


def test_reversing_into_second_segment_ends_game():
    session = make_session([(3, 3), (3, 4)], UP, score=2, high_score=1)
    after = step(session, DOWN)
    assert not after.alive
    assert after.game_over
    assert after.snake == session.snake
    assert after.score == 2
    assert after.high_score == 2
    assert after.direction == UP


def test_moving_into_tail_counts_as_collision():
    session = make_session([(1, 1), (2, 1), (2, 2), (1, 2)], LEFT)
    after = step(session, DOWN)
    assert not after.alive


def test_high_score_kept_when_not_beaten():
    session = make_session([(3, 3), (3, 4)], UP, score=1, high_score=3)
    assert step(session, DOWN).high_score == 3


def test_terminated_session_is_not_advanced():
    dead = step(make_session([(3, 3), (3, 4)], UP), DOWN)
    for direction in (UP, DOWN, LEFT, RIGHT):
        assert step(dead, direction) is dead


def test_step_does_not_mutate_input():
    session = new_session()
    step(session, DOWN)
    assert session.snake == ((2, 2),)


def test_place_food_skips_occupied_cells():
    rng = ScriptedRandom([0, 0, 1, 1, 2, 3])
    assert place_food({(0, 0), (1, 1)}, 18, rng) == (2, 3)


def test_place_food_never_returns_occupied_cell():
    rng = random.Random(42)
    occupied = {(x, y) for x in range(5) for y in range(5) if (x + y) % 3}
    for _ in range(200):
        assert place_food(occupied, 5, rng) not in occupied


def test_place_food_falls_back_to_free_cell_scan():
    occupied = [(0, 0), (1, 0), (0, 1)]
    assert place_food(occupied, 2, ScriptedRandom([])) == (1, 1)


def test_place_food_on_full_board_raises():
    occupied = [(0, 0), (1, 0), (0, 1), (1, 1)]
    with pytest.raises(BoardFullError):
        place_food(occupied, 2, ScriptedRandom([]))


def test_filling_the_board_ends_the_session():
    session = make_session([(0, 0), (1, 0), (1, 1)], UP, food=(0, 1), grid_size=2)
    after = step(session, DOWN, ScriptedRandom([]))
    assert after.board_full
    assert after.game_over and not after.alive
    assert after.score == 1
    assert len(after.snake) == 4

