"""Game state and the rules for moving the player around a map."""

from __future__ import annotations

from enum import Enum, IntEnum

from wolfmaze.mapfile import COLLECTIBLE, ENEMY, EXIT, FLOOR, PLAYER, WALL, MapInfo

KEY_ESCAPE = 65307
KEY_Q = 113
KEY_UP = 65362
KEY_DOWN = 65364
KEY_LEFT = 65361
KEY_RIGHT = 65363
KEY_W = 119
KEY_S = 115
KEY_A = 97
KEY_D = 100

QUIT_KEYS = frozenset({KEY_ESCAPE, KEY_Q})


class Direction(IntEnum):
    """The way the player faces, which picks the player's sprite."""

    UP = 1
    RIGHT = 2
    DOWN = 3
    LEFT = 4


class Outcome(Enum):
    """What a key press or move attempt did."""

    IGNORED = "ignored"
    BLOCKED = "blocked"
    MOVED = "moved"
    CAUGHT = "caught"
    QUIT = "quit"


_KEY_MOVES: dict[int, tuple[Direction, int, int]] = {
    KEY_UP: (Direction.UP, -1, 0),
    KEY_W: (Direction.UP, -1, 0),
    KEY_DOWN: (Direction.DOWN, 1, 0),
    KEY_S: (Direction.DOWN, 1, 0),
    KEY_LEFT: (Direction.LEFT, 0, -1),
    KEY_A: (Direction.LEFT, 0, -1),
    KEY_RIGHT: (Direction.RIGHT, 0, 1),
    KEY_D: (Direction.RIGHT, 0, 1),
}


class Game:
    """A map being played: the grid, the player and the running counts."""

    def __init__(self, info: MapInfo, map_name: str = "") -> None:
        self.map_name = map_name
        self.grid = [list(row) for row in info.rows]
        self.row, self.col = info.start
        self.collectibles = info.collectibles
        self.players = info.players
        self.standing_on = FLOOR
        self.direction = Direction.UP
        self.moves = 0
        # The piece last looked at as a move target, even if the move failed.
        self.target = ""

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def position(self) -> tuple[int, int]:
        """The player's (row, column)."""
        return self.row, self.col

    @property
    def exit_open(self) -> bool:
        return self.collectibles == 0

    @property
    def won(self) -> bool:
        return self.exit_open and self.standing_on == EXIT

    @property
    def lost(self) -> bool:
        return self.players < 1

    @property
    def finished(self) -> bool:
        return self.won or self.lost

    def can_move(self, drow: int, dcol: int) -> bool:
        """Look at the target piece and tell whether the player may go there."""
        self.target = self.grid[self.row + drow][self.col + dcol]
        return not (
            self.target == WALL
            or self.players < 1
            or (self.standing_on == EXIT and self.collectibles == 0)
        )

    def move(self, drow: int, dcol: int) -> Outcome:
        """Move the player by one step if the rules allow it."""
        if not self.can_move(drow, dcol):
            return Outcome.BLOCKED
        self.moves += 1
        self.grid[self.row][self.col] = self.standing_on
        target = self.target
        if target == FLOOR:
            self.standing_on = FLOOR
        elif target == EXIT:
            self.standing_on = EXIT
        elif target == ENEMY:
            self.players -= 1
        elif target == COLLECTIBLE:
            self.standing_on = FLOOR
            self.collectibles -= 1
        if self.players != 1:
            return Outcome.CAUGHT
        self.row += drow
        self.col += dcol
        self.grid[self.row][self.col] = PLAYER
        return Outcome.MOVED

    def handle_key(self, code: int) -> Outcome:
        """Act on a key code: quit, or try a step in the key's direction."""
        if code in QUIT_KEYS:
            return Outcome.QUIT
        entry = _KEY_MOVES.get(code)
        if entry is None:
            return Outcome.IGNORED
        direction, drow, dcol = entry
        if not self.can_move(drow, dcol):
            return Outcome.BLOCKED
        self.direction = direction
        return self.move(drow, dcol)

    def row_text(self, row: int) -> str:
        """Return one row of the grid as text."""
        return "".join(self.grid[row])