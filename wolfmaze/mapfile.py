"""Reading map files and checking that a map can be played.

A map is a text file of equal-width lines, each ending in a newline, made of
walls ``1``, floor ``0``, collectibles ``C``, exits ``E``, enemies ``X`` and
one player start ``P``. The map must be closed in by walls, and the player
must be able to reach every collectible and the exit.
"""

from __future__ import annotations

import os
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from wolfmaze.errors import ErrorCode, MapError

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"
ENEMY = "X"

MAP_SUFFIX = ".ber"
MIN_NAME_LENGTH = 5
MAX_WIDTH = 30
MAX_HEIGHT = 16

_ALLOWED = frozenset({WALL, FLOOR, COLLECTIBLE, EXIT, PLAYER, ENEMY, "\n"})

TEXTURE_FILES = (
    "enemy1.xpm",
    "enemy2.xpm",
    "enemy3.xpm",
    "exit1.xpm",
    "exit2.xpm",
    "wall1.xpm",
    "wall2.xpm",
    "wall3.xpm",
    "wall4.xpm",
    "floor1.xpm",
    "player1.xpm",
    "player2.xpm",
    "player3.xpm",
    "player4.xpm",
    "key1.xpm",
    "key2.xpm",
    "key3.xpm",
    "key4.xpm",
)


@dataclass(frozen=True)
class MapInfo:
    """A scanned map: its rows (without newlines), size and piece counts.

    ``start`` is the (row, column) of the last player start seen.
    """

    rows: tuple[str, ...] = ()
    width: int = 0
    height: int = 0
    collectibles: int = 0
    exits: int = 0
    players: int = 0
    start: tuple[int, int] = (0, 0)


def check_file_name(name: str, maps_dir: str | os.PathLike[str] = "maps") -> Path:
    """Validate a map file name and return its path inside ``maps_dir``."""
    if len(name) < MIN_NAME_LENGTH:
        raise MapError(ErrorCode.NAME_TOO_SHORT)
    if not name.endswith(MAP_SUFFIX):
        raise MapError(ErrorCode.BAD_FILE_NAME)
    return Path(f"{os.fspath(maps_dir)}/{name}")


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Read a map file into lines, each keeping its trailing newline."""
    try:
        handle = open(path, encoding="latin-1", newline="\n")
    except IsADirectoryError as exc:
        raise MapError(ErrorCode.READ_ERROR) from exc
    except OSError as exc:
        raise MapError(ErrorCode.OPEN_ERROR) from exc
    with handle:
        try:
            return list(handle)
        except OSError as exc:
            raise MapError(ErrorCode.READ_ERROR) from exc


def _wall_kind(line: str) -> int:
    """1 if the line is all walls, 2 if only its ends are walls, else 0."""
    content = line.removesuffix("\n")
    if not content.lstrip(WALL):
        return 1
    if content[0] == WALL and content[-1] == WALL:
        return 2
    return 0


def scan_map(lines: Iterable[str]) -> MapInfo:
    """Check pieces, shape and outer walls of map lines and count the pieces."""
    rows: list[str] = []
    width: int | None = None
    collectibles = exits = players = 0
    start = (0, 0)
    last_kind = 0
    for line in lines:
        for col, piece in enumerate(line):
            if piece == COLLECTIBLE:
                collectibles += 1
            elif piece == EXIT:
                exits += 1
            elif piece == PLAYER:
                players += 1
                start = (len(rows), col)
            if piece not in _ALLOWED:
                raise MapError(ErrorCode.BAD_PIECE)
        line_width = len(line) - 1
        if width is None:
            width = line_width
        elif line_width != width:
            raise MapError(ErrorCode.NOT_RECTANGLE)
        rows.append(line.removesuffix("\n"))
        last_kind = _wall_kind(line)
        if last_kind == 0 or (len(rows) == 1 and last_kind != 1):
            raise MapError(ErrorCode.NOT_SURROUNDED)
    if last_kind != 1:
        raise MapError(ErrorCode.NOT_SURROUNDED)
    return MapInfo(
        rows=tuple(rows),
        width=width if width is not None else 0,
        height=len(rows),
        collectibles=collectibles,
        exits=exits,
        players=players,
        start=start,
    )


def check_dimensions(info: MapInfo) -> None:
    """Reject maps wider than 30 or taller than 16 pieces."""
    if info.width > MAX_WIDTH or info.height > MAX_HEIGHT:
        raise MapError(ErrorCode.MAP_TOO_BIG)


def check_piece_counts(info: MapInfo) -> None:
    """Require collectibles, exactly one exit and exactly one player start."""
    if info.collectibles < 1:
        raise MapError(ErrorCode.NO_COLLECTIBLES)
    if info.exits == 0:
        raise MapError(ErrorCode.NO_EXIT)
    if info.exits > 1:
        raise MapError(ErrorCode.TOO_MANY_EXITS)
    if info.players == 0:
        raise MapError(ErrorCode.NO_PLAYER)
    if info.players > 1:
        raise MapError(ErrorCode.TOO_MANY_STARTS)


def check_reachable(info: MapInfo) -> None:
    """Require every collectible and exit to be reachable from the start.

    Only walls block the way; enemies and the exit can be walked through.
    """
    grid = [list(row) for row in info.rows]

    def passable(row: int, col: int) -> bool:
        return 0 <= row < len(grid) and 0 <= col < len(grid[row]) and grid[row][col] != WALL

    pending = deque([info.start])
    while pending:
        row, col = pending.popleft()
        if not passable(row, col):
            continue
        grid[row][col] = WALL
        pending.extend(((row + 1, col), (row - 1, col), (row, col + 1), (row, col - 1)))
    if any(piece in (EXIT, COLLECTIBLE) for row in grid for piece in row):
        raise MapError(ErrorCode.UNREACHABLE)


def check_textures(textures_dir: str | os.PathLike[str] = "textures") -> tuple[Path, ...]:
    """Make sure every texture file can be opened; return their paths."""
    found = []
    for name in TEXTURE_FILES:
        path = Path(textures_dir) / name
        try:
            with open(path, "rb"):
                pass
        except OSError as exc:
            raise MapError(ErrorCode.TEXTURE_NOT_FOUND) from exc
        found.append(path)
    return tuple(found)


def load_map(
    name: str,
    maps_dir: str | os.PathLike[str] = "maps",
    textures_dir: str | os.PathLike[str] = "textures",
) -> MapInfo:
    """Run every check on the named map and return it when it is playable."""
    path = check_file_name(name, maps_dir)
    lines = read_lines(path)
    check_textures(textures_dir)
    info = scan_map(lines)
    check_dimensions(info)
    check_piece_counts(info)
    check_reachable(info)
    return info