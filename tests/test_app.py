import io

import pygame
import pytest

from solong.app import (
    TEXTURE_FILES,
    TILE_SIZE,
    Renderer,
    check_map_name,
    load_textures,
    main,
)
from solong.board import validate
from solong.game import Direction, Game
from solong.xpm import XpmError

COLORS = {
    "1": (10, 20, 30, 255),
    "0": (40, 50, 60, 255),
    "P": (70, 80, 90, 255),
    "C": (100, 110, 120, 255),
    "E": (130, 140, 150, 255),
}


def _textures():
    result = {}
    for tile, color in COLORS.items():
        surface = pygame.Surface((TILE_SIZE, TILE_SIZE))
        surface.fill(color)
        result[tile] = surface
    return result


def _color_at(surface, x, y):
    value = surface.get_at((x * TILE_SIZE + 5, y * TILE_SIZE + 5))
    return (value.r, value.g, value.b, value.a)


def _write_textures(directory, color="#FF0000"):
    text = (
        "/* XPM */\n"
        "static char *img[] = {\n"
        '"2 2 1 1",\n'
        f'". c {color}",\n'
        '"..",\n'
        '".."\n'
        "};\n"
    )
    for filename in TEXTURE_FILES.values():
        (directory / filename).write_text(text)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("maps/level.ber", True),
        ("a.ber", True),
        ("level.txt", False),
        ("level.ber.txt", False),
        ("levelber", False),
    ],
)
def test_check_map_name(name, expected):
    assert check_map_name(name) is expected


def test_load_textures_reads_all_tiles(tmp_path):
    _write_textures(tmp_path)
    textures = load_textures(tmp_path)
    assert set(textures) == set(TEXTURE_FILES)
    for surface in textures.values():
        assert surface.get_size() == (2, 2)
        color = surface.get_at((1, 1))
        assert (color.r, color.g, color.b, color.a) == (255, 0, 0, 255)


def test_load_textures_missing_file(tmp_path):
    _write_textures(tmp_path)
    (tmp_path / TEXTURE_FILES["P"]).unlink()
    with pytest.raises(XpmError):
        load_textures(tmp_path)


def test_renderer_draws_each_tile():
    game = Game(validate(["111111", "1PCE01", "111111"]), output=io.StringIO())
    surface = pygame.Surface((6 * TILE_SIZE, 3 * TILE_SIZE))
    Renderer(surface, _textures()).draw(game)
    assert _color_at(surface, 0, 0) == COLORS["1"]
    assert _color_at(surface, 1, 1) == COLORS["P"]
    assert _color_at(surface, 2, 1) == COLORS["C"]
    assert _color_at(surface, 3, 1) == COLORS["E"]
    assert _color_at(surface, 4, 1) == COLORS["0"]


def test_renderer_shows_player_standing_on_exit():
    game = Game(validate(["111111", "1PEC01", "111111"]), output=io.StringIO())
    game.move(Direction.RIGHT)
    assert game.player_on_exit()
    surface = pygame.Surface((6 * TILE_SIZE, 3 * TILE_SIZE))
    Renderer(surface, _textures()).draw(game)
    assert _color_at(surface, 2, 1) == COLORS["P"]
    assert _color_at(surface, 1, 1) == COLORS["0"]


def test_renderer_reflects_moves():
    game = Game(validate(["111111", "1P0CE1", "111111"]), output=io.StringIO())
    surface = pygame.Surface((6 * TILE_SIZE, 3 * TILE_SIZE))
    renderer = Renderer(surface, _textures())
    game.move(Direction.RIGHT)
    renderer.draw(game)
    assert _color_at(surface, 2, 1) == COLORS["P"]
    assert _color_at(surface, 1, 1) == COLORS["0"]


@pytest.mark.parametrize("argv", [[], ["level.txt"], ["a.ber", "b.ber"]])
def test_main_rejects_bad_arguments(argv, capsys):
    assert main(argv) == 0
    assert "Error: Number or name of arguments incorrect" in capsys.readouterr().out


def test_main_reports_missing_map(tmp_path, capsys):
    assert main([str(tmp_path / "absent.ber")]) == 1
    assert capsys.readouterr().out.startswith("Error:")


def test_main_reports_invalid_map(tmp_path, capsys):
    path = tmp_path / "bad.ber"
    path.write_text("11111\n1PCE1\n1111\n")
    assert main([str(path)]) == 1
    assert "Error: Map size." in capsys.readouterr().out


def test_main_reports_unreachable_item(tmp_path, capsys):
    path = tmp_path / "walled.ber"
    path.write_text("1111111\n1PE1C01\n1111111\n")
    assert main([str(path)]) == 1
    assert "Error: For flood fill" in capsys.readouterr().out