"""Window, drawing and the event loop that run the puzzle."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Mapping, Sequence, Union

import pygame

from .board import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL, MapError, load_board
from .game import KEY_ESCAPE, Game
from .xpm import XpmError, load_xpm

StrPath = Union[str, "PathLike[str]"]

TILE_SIZE = 64
WINDOW_TITLE = "so_long"
MAP_SUFFIX = ".ber"
TEXTURE_DIR = "textures"

TEXTURE_FILES: Mapping[str, str] = {
    WALL: "rock1.xpm",
    FLOOR: "road.xpm",
    PLAYER: "lightningmq.xpm",
    COLLECTIBLE: "collectable.xpm",
    EXIT: "exit.xpm",
}

# Keyboard keys translated to the keycodes the game logic understands.
_KEYCODES: Mapping[int, int] = {
    pygame.K_w: 13,
    pygame.K_a: 0,
    pygame.K_s: 1,
    pygame.K_d: 2,
    pygame.K_UP: 126,
    pygame.K_LEFT: 123,
    pygame.K_RIGHT: 124,
    pygame.K_DOWN: 125,
    pygame.K_ESCAPE: KEY_ESCAPE,
}


def check_map_name(name: str) -> bool:
    """True when ``name`` ends with the map file suffix ".ber"."""
    return name.endswith(MAP_SUFFIX)


def load_textures(directory: StrPath) -> dict[str, pygame.Surface]:
    """Load the five tile textures from ``directory``, keyed by tile character.

    Raises XpmError if any image is missing or cannot be decoded.
    """
    base = Path(directory)
    textures: dict[str, pygame.Surface] = {}
    for tile, filename in TEXTURE_FILES.items():
        try:
            image = load_xpm(base / filename)
        except XpmError as exc:
            raise XpmError("Missing image.") from exc
        surface = pygame.image.frombuffer(
            image.to_rgba(), (image.width, image.height), "RGBA"
        )
        textures[tile] = surface.copy()
    return textures


@dataclass
class Renderer:
    """Draws a game's tiles onto a surface, one texture per tile."""

    surface: pygame.Surface
    textures: Mapping[str, pygame.Surface]

    def draw(self, game: Game) -> None:
        """Draw every tile of ``game``: floor first, then what stands on it."""
        floor = self.textures[FLOOR]
        on_exit = game.player_on_exit()
        for y, row in enumerate(game.rows):
            for x, tile in enumerate(row):
                spot = (x * TILE_SIZE, y * TILE_SIZE)
                self.surface.blit(floor, spot)
                if tile in (WALL, EXIT, COLLECTIBLE, PLAYER):
                    self.surface.blit(self.textures[tile], spot)
                if tile == EXIT and on_exit:
                    self.surface.blit(self.textures[PLAYER], spot)


def _run(game: Game, renderer: Renderer) -> int:
    clock = pygame.time.Clock()
    renderer.draw(game)
    pygame.display.flip()
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                game.handle_key(KEY_ESCAPE)
            elif event.type == pygame.KEYDOWN:
                keycode = _KEYCODES.get(event.key)
                if keycode is not None:
                    game.handle_key(keycode)
            else:
                continue
            if game.finished:
                return 1
            renderer.draw(game)
            pygame.display.flip()
        clock.tick(60)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game on the map file named by the single argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1 or not check_map_name(args[0]):
        print("Error: Number or name of arguments incorrect")
        return 0
    try:
        board = load_board(args[0])
    except MapError as exc:
        print(f"Error: {exc}")
        return 1

    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (board.width * TILE_SIZE, board.height * TILE_SIZE)
        )
        pygame.display.set_caption(WINDOW_TITLE)
        try:
            textures = load_textures(TEXTURE_DIR)
        except XpmError:
            print("Error: Missing image.")
            return 1
        return _run(Game(board), Renderer(screen, textures))
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())