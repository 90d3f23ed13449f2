import io

import pytest

from solong.board import validate
from solong.game import (
    CLOSE_MESSAGE,
    WIN_MESSAGE,
    Direction,
    Game,
    MoveOutcome,
    direction_for_key,
)

MAP = [
    "1111111",
    "1P0C0E1",
    "1000001",
    "1111111",
]


def make_game(rows=MAP):
    out = io.StringIO()
    return Game(validate(rows), output=out), out


@pytest.mark.parametrize(
    "keycode, direction",
    [
        (13, Direction.UP),
        (126, Direction.UP),
        (0, Direction.LEFT),
        (123, Direction.LEFT),
        (2, Direction.RIGHT),
        (124, Direction.RIGHT),
        (1, Direction.DOWN),
        (125, Direction.DOWN),
    ],
)
def test_direction_for_key(keycode, direction):
    assert direction_for_key(keycode) is direction


def test_direction_for_unknown_key():
    assert direction_for_key(99) is None


def test_move_into_wall_is_blocked():
    game, out = make_game()
    assert game.move(Direction.UP) is MoveOutcome.BLOCKED
    assert game.moves == 0
    assert game.player == (1, 1)
    assert out.getvalue() == ""


def test_move_updates_tiles_and_prints_count():
    game, out = make_game()
    assert game.move(Direction.RIGHT) is MoveOutcome.MOVED
    assert game.player == (2, 1)
    assert game.tile_at(1, 1) == "0"
    assert game.tile_at(2, 1) == "P"
    assert out.getvalue() == "Step count: 1\n"


def test_collect_item():
    game, _ = make_game()
    game.move(Direction.RIGHT)
    assert game.move(Direction.RIGHT) is MoveOutcome.COLLECTED
    assert game.collected == game.collectibles
    assert game.tile_at(3, 1) == "P"


def test_exit_without_items_keeps_exit_tile():
    rows = [
        "1111111",
        "1PE0C01",
        "1111111",
    ]
    game, _ = make_game(rows)
    assert game.move(Direction.RIGHT) is MoveOutcome.MOVED
    assert game.player_on_exit()
    assert game.tile_at(2, 1) == "E"
    game.move(Direction.RIGHT)
    assert not game.player_on_exit()
    assert game.tile_at(2, 1) == "E"
    assert game.tile_at(3, 1) == "P"


def test_win_after_collecting():
    game, out = make_game()
    outcomes = [game.move(Direction.RIGHT) for _ in range(4)]
    assert outcomes[-1] is MoveOutcome.WON
    assert game.won and game.finished
    assert game.moves == len(outcomes)
    assert out.getvalue().endswith(WIN_MESSAGE)


def test_move_after_win_raises():
    game, _ = make_game()
    for _ in range(4):
        game.move(Direction.RIGHT)
    with pytest.raises(RuntimeError):
        game.move(Direction.LEFT)


def test_handle_key_escape_closes():
    game, out = make_game()
    assert game.handle_key(53) is MoveOutcome.CLOSED
    assert game.closed
    assert out.getvalue() == CLOSE_MESSAGE


def test_handle_key_ignores_other_keys():
    game, _ = make_game()
    assert game.handle_key(99) is MoveOutcome.IGNORED
    assert game.player == (1, 1)


def test_handle_key_moves():
    game, _ = make_game()
    assert game.handle_key(125) is MoveOutcome.MOVED
    assert game.player == (1, 2)


def test_tile_at_out_of_range():
    game, _ = make_game()
    with pytest.raises(IndexError):
        game.tile_at(game.width, 0)


def test_game_does_not_mutate_board():
    board = validate(MAP)
    game = Game(board, output=io.StringIO())
    game.move(Direction.RIGHT)
    assert board.rows[1][1] == "P"
    assert game.tile_at(1, 1) == "0"