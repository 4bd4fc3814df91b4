# wolfmaze

A small tile-based escape game. You are a spy locked in a castle: pick up
every golden key, slip past the sleeping guards and walk out through the
exit. The map is drawn in a window with a move counter in its top left
corner, and mirrored in the terminal together with the map name and the
number of moves.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the window.

## Playing

```
wolfmaze level1.ber
```

The game looks for the map under `maps/` and for its textures under
`textures/`, both relative to the current directory. The map name must be
at least five characters long and end in `.ber`.

Controls:

| Key             | Action     |
|-----------------|------------|
| `W` / Up        | move up    |
| `S` / Down      | move down  |
| `A` / Left      | move left  |
| `D` / Right     | move right |
| `Q` / Escape    | quit       |

Closing the window also quits. Once you stand on the open exit a black
curtain closes over the map; if you step onto a guard a red one does, and
the game ends when the curtain is down. Leaving with the player still alive
prints a farewell line in the terminal.

## Map files

A map is a plain text file of equally wide lines built from these pieces.
Every line, the last one included, must end with a newline.

| Char | Meaning                  |
|------|--------------------------|
| `1`  | wall                     |
| `0`  | floor                    |
| `P`  | player start (exactly 1) |
| `E`  | exit (exactly 1)         |
| `C`  | key (at least 1)         |
| `X`  | sleeping guard           |

The map must be a rectangle, surrounded by walls, at most 30 columns by
16 rows, and every key and the exit must be reachable from the start.
Stepping onto a guard ends the game. The exit only opens once every key has
been collected.

Example:

```
1111111
1P0C0E1
1111111
```

When a map is rejected the game prints `Error` followed by the reason, such
as `Map is not surrounded by walls` or `Player can not get all collectibles
and/or to exit`.

## Textures

The `textures/` directory needs these XPM images: `floor1`, `wall1` to
`wall4`, `exit1`, `exit2`, `player1` to `player4`, `enemy1` to `enemy3` and
`key1` to `key4`, each with the `.xpm` extension. Colours may be given as
`#RRGGBB` values, X11 colour names or `None` for transparency.

## Using the pieces as a library

- `wolfmaze.mapfile`: `load_map`, `scan_map`, `check_reachable` and the
  other map checks, returning a `MapInfo`; failures raise
  `wolfmaze.errors.MapError`, whose `code` is an `ErrorCode`.
- `wolfmaze.game.Game`: the game rules (`handle_key`, `move`, `can_move`).
- `wolfmaze.xpm`: the XPM reader (`read_xpm`, `parse_xpm`) returning an
  `XpmImage`; `wolfmaze.colors.lookup_color` resolves colour names.
- `wolfmaze.render`: `Textures` and `Renderer` for drawing onto a pygame
  surface.
- `wolfmaze.console.render`: the terminal screen as a string.

## What is not included

The package ships no maps and no textures; both have to be supplied in
`maps/` and `textures/`. There is no sound.

## Running the tests

```
pip install .[test]
pytest
```