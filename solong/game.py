"""Game state and movement rules for the collect-and-escape puzzle."""

from __future__ import annotations

import sys
from enum import Enum
from typing import TextIO

from .board import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL, Board

WIN_MESSAGE = "Congratulations, you won."
CLOSE_MESSAGE = "Game closed."

_KEY_UP = (13, 126)
_KEY_LEFT = (0, 123)
_KEY_RIGHT = (2, 124)
_KEY_DOWN = (1, 125)
KEY_ESCAPE = 53


class Direction(Enum):
    """A step direction, valued as its (dx, dy) offset."""

    UP = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    DOWN = (0, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class MoveOutcome(Enum):
    """What a move or key press did."""

    BLOCKED = "blocked"
    MOVED = "moved"
    COLLECTED = "collected"
    WON = "won"
    CLOSED = "closed"
    IGNORED = "ignored"


_KEYMAP: dict[int, Direction] = {
    **{code: Direction.UP for code in _KEY_UP},
    **{code: Direction.LEFT for code in _KEY_LEFT},
    **{code: Direction.RIGHT for code in _KEY_RIGHT},
    **{code: Direction.DOWN for code in _KEY_DOWN},
}


def direction_for_key(keycode: int) -> Direction | None:
    """Map a WASD or arrow keycode to a direction; None for other keys."""
    return _KEYMAP.get(keycode)


class Game:
    """A running game on a validated board.

    Messages (step counts, the win and close notices) are written to
    ``output``, which defaults to standard output.
    """

    def __init__(self, board: Board, output: TextIO | None = None) -> None:
        self.rows: list[list[str]] = [list(row) for row in board.rows]
        self.width = board.width
        self.height = board.height
        self.player: tuple[int, int] = board.player
        self.exit: tuple[int, int] = board.exit
        self.collectibles = board.collectibles
        self.collected = 0
        self.moves = 0
        self.won = False
        self.closed = False
        self._output = output

    @property
    def finished(self) -> bool:
        """True once the game has been won or closed."""
        return self.won or self.closed

    def _say(self, text: str, end: str = "") -> None:
        stream = self._output if self._output is not None else sys.stdout
        stream.write(text + end)
        stream.flush()

    def tile_at(self, x: int, y: int) -> str:
        """Return the tile character at column ``x``, row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"position ({x}, {y}) is outside the map")
        return self.rows[y][x]

    def player_on_exit(self) -> bool:
        """True when the player stands on the exit tile."""
        return self.player == self.exit

    def move(self, direction: Direction) -> MoveOutcome:
        """Try to step the player one tile in ``direction``."""
        if self.finished:
            raise RuntimeError("the game is over")
        x, y = self.player
        nx, ny = x + direction.dx, y + direction.dy
        try:
            target = self.tile_at(nx, ny)
        except IndexError:
            return MoveOutcome.BLOCKED
        if target == WALL:
            return MoveOutcome.BLOCKED

        self.moves += 1
        self._say(f"Step count: {self.moves}", end="\n")

        outcome = MoveOutcome.MOVED
        if target == COLLECTIBLE:
            self.collected += 1
            outcome = MoveOutcome.COLLECTED
        elif target == EXIT and self.collected == self.collectibles:
            self.won = True
            self._say(WIN_MESSAGE)
            return MoveOutcome.WON

        self.rows[y][x] = FLOOR
        self.player = (nx, ny)
        self.rows[ny][nx] = PLAYER
        ex, ey = self.exit
        if self.rows[ey][ex] != EXIT:
            self.rows[ey][ex] = EXIT
        return outcome

    def handle_key(self, keycode: int) -> MoveOutcome:
        """React to a key press: move, close on Escape, ignore the rest."""
        if keycode == KEY_ESCAPE:
            self.closed = True
            self._say(CLOSE_MESSAGE)
            return MoveOutcome.CLOSED
        direction = direction_for_key(keycode)
        if direction is None:
            return MoveOutcome.IGNORED
        return self.move(direction)