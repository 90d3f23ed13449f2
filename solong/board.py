"""Map loading and validation for the collect-and-escape puzzle."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from os import PathLike
from typing import Iterable, Sequence, Union

StrPath = Union[str, "PathLike[str]"]

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"

VALID_TILES = frozenset({PLAYER, EXIT, COLLECTIBLE, WALL, FLOOR})
MAX_WIDTH = 40
MAX_HEIGHT = 22


class MapError(Exception):
    """Raised when a map file cannot be read or describes an invalid map."""


@dataclass
class Board:
    """A validated map: tile rows plus the positions found in them."""

    rows: list[list[str]]
    width: int
    height: int
    player: tuple[int, int]
    exit: tuple[int, int]
    collectibles: int


def line_width(line: str | None) -> int:
    """Return the length of ``line`` up to its first newline; 0 for None."""
    if not line:
        return 0
    end = line.find("\n")
    return len(line) if end < 0 else end


def _split_lines(text: str) -> list[str]:
    """Split text into lines, each keeping its newline; no empty tail line."""
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def _read_text(path: StrPath, message: str) -> str:
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            return handle.read()
    except OSError as exc:
        raise MapError(message) from exc


def count_lines(path: StrPath) -> int:
    """Count the lines of a map file; a final line without newline counts."""
    return len(_split_lines(_read_text(path, "File not opened.")))


def read_map(path: StrPath) -> list[str]:
    """Read a map file and return its rows without line endings."""
    lines = _split_lines(_read_text(path, "File not open."))
    return [line[: line_width(line)] for line in lines]


def _check_size(rows: Sequence[str], width: int) -> None:
    if any(line_width(row) != width for row in rows):
        raise MapError("Map size.")
    if width > MAX_WIDTH or len(rows) > MAX_HEIGHT:
        raise MapError("The map is too big.")


def _check_walls(rows: Sequence[str], width: int) -> None:
    for row in rows:
        if not row or row[0] != WALL or row[width - 1] != WALL:
            raise MapError("There is gap in walls.")
    if rows and (set(rows[0]) - {WALL} or set(rows[-1]) - {WALL}):
        raise MapError("There is gap in walls.")


def _check_characters(rows: Iterable[str]) -> None:
    for row in rows:
        if set(row) - VALID_TILES:
            raise MapError("Invalid character found")


def validate(rows: Sequence[str]) -> Board:
    """Check shape, walls, tiles and counts of ``rows`` and build a Board."""
    rows = [row[: line_width(row)] for row in rows]
    width = line_width(rows[0]) if rows else 0
    _check_size(rows, width)
    _check_walls(rows, width)
    _check_characters(rows)

    players = exits = collectibles = 0
    player = exit_pos = (0, 0)
    for y, row in enumerate(rows):
        for x, tile in enumerate(row):
            if tile == PLAYER:
                players += 1
                player = (x, y)
            elif tile == EXIT:
                exits += 1
                exit_pos = (x, y)
            elif tile == COLLECTIBLE:
                collectibles += 1

    if exits != 1:
        raise MapError("There is more than one exit.")
    if collectibles < 1:
        raise MapError("No items to collect")
    if players != 1:
        raise MapError("There is more than one player.")

    return Board(
        rows=[list(row) for row in rows],
        width=width,
        height=len(rows),
        player=player,
        exit=exit_pos,
        collectibles=collectibles,
    )


def check_reachable(board: Board) -> None:
    """Raise MapError unless every player, exit and item tile is reachable."""
    seen: set[tuple[int, int]] = set()
    queue = deque([board.player])
    while queue:
        x, y = queue.popleft()
        if (x, y) in seen or not (0 <= x < board.width and 0 <= y < board.height):
            continue
        if board.rows[y][x] == WALL:
            continue
        seen.add((x, y))
        queue.extend(((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)))

    targets = {PLAYER, EXIT, COLLECTIBLE}
    for y, row in enumerate(board.rows):
        for x, tile in enumerate(row):
            if tile in targets and (x, y) not in seen:
                raise MapError("For flood fill")


def load_board(path: StrPath) -> Board:
    """Read, validate and reachability-check the map at ``path``."""
    board = validate(read_map(path))
    check_reachable(board)
    return board