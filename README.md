# solong

A small puzzle game. You walk the player across a tile map and pick up
every collectable, then step onto the exit. The game counts every step
and prints the count to the terminal.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
solong maps/level.ber
```

The single argument must be a map file whose name ends in `.ber`.

The game reads the tile textures as XPM images from a `textures/`
directory under the current working directory. It needs five files:

- `rock1.xpm` for walls
- `road.xpm` for floor
- `lightningmq.xpm` for the player
- `collectable.xpm` for collectables
- `exit.xpm` for the exit

Each tile is drawn 64×64 pixels. The window is sized from the map.

Controls:

| Key | Action |
| --- | --- |
| `W` or Up arrow | move up |
| `A` or Left arrow | move left |
| `D` or Right arrow | move right |
| `S` or Down arrow | move down |
| `Esc` or closing the window | quit ("Game closed.") |

Each step that is not blocked by a wall prints `Step count: N`. The exit
only ends the game once every collectable has been picked up. Until then
the player walks over it. When you reach it with everything collected,
the game prints "Congratulations, you won." and ends.

Exit status:

| Status | When |
| --- | --- |
| `0` | the arguments are wrong ("Error: Number or name of arguments incorrect") |
| `1` | the map is rejected, a texture is missing, or the game is won or closed |

## Map format

A map is a rectangle of characters, one row per line:

| Character | Meaning |
| --- | --- |
| `1` | wall |
| `0` | floor |
| `P` | player start (exactly one) |
| `E` | exit (exactly one) |
| `C` | collectable (at least one) |

A map is rejected, with a message printed as `Error: ...`, if any of
these rules is broken:

- every row has the same width;
- it is at most 40 columns wide and 22 rows high;
- the border is made entirely of walls;
- it holds no other characters;
- it has exactly one exit, at least one collectable and exactly one player;
- every collectable and the exit can be reached from the player's start.

Example:

```
1111111111
1P0C000001
1011110101
1C0000E001
1111111111
```

## Using it as a library

- `solong.board`
  - `load_board(path)` reads and checks a map and returns a `Board`.
  - If anything is wrong it raises `MapError`, whose message says what.
  - `read_map`, `validate` and `check_reachable` are the individual steps.
- `solong.game`
  - `Game(board, output=None)` holds the state of a game in progress. Its messages go to `output`, or to standard output when none is given.
  - `Game.move(direction)` takes a `Direction` and returns a `MoveOutcome`. The outcome is one of `BLOCKED`, `MOVED`, `COLLECTED` or `WON`.
  - `Game.handle_key(keycode)` does the same for a key code. It can also return `CLOSED` for Escape (53) or `IGNORED` for other keys.
  - `direction_for_key(keycode)` maps a key code to a `Direction`.
  - `Game.tile_at(x, y)` and `Game.player_on_exit()` let you inspect the board.
- `solong.xpm`
  - `load_xpm(path)` and `parse_xpm_text(text)` decode an XPM image into an `XpmImage`. Malformed data raises `XpmError`.
  - A pixel is `0xAARRGGBB`, with `AA` as transparency.
  - `XpmImage.to_rgba()` returns RGBA bytes.
  - Colours may be given as `#hex` or as X11 colour names. `None` gives a transparent pixel.
- `solong.colors`
  - `lookup_color(name)` returns the RGB value of an X11 colour name.
  - Case is ignored.
  - Unknown names give `None`.
- `solong.app`
  - `main(argv=None)` runs the game.
  - `check_map_name`, `load_textures` and `Renderer` are the pieces it uses.

## What is not included

No textures or maps ship with the package. You need to provide a
`textures/` directory with the five XPM files listed above, and a `.ber`
map. Textures can only be read from XPM files.