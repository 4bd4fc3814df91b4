"""Drawing a game onto a pygame surface with its XPM textures."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from wolfmaze.errors import ErrorCode, MapError  # noqa: E402
from wolfmaze.game import Direction, Game  # noqa: E402
from wolfmaze.mapfile import COLLECTIBLE, ENEMY, EXIT, FLOOR, PLAYER, WALL  # noqa: E402
from wolfmaze.xpm import TRANSPARENT, XpmError, XpmImage, read_xpm  # noqa: E402

# Colour of the move counter text, as the 0xRRGGBB value 11111111.
TEXT_COLOR = 11111111
# Area cleared behind the move counter: x from 1 to 100, y from 1 to 15.
_COUNTER_AREA = pygame.Rect(1, 1, 100, 15)
_ANIMATION_LOOP_MS = 1000


def _rgb(color: int) -> tuple[int, int, int]:
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def wall_variant(row: int, col: int) -> int:
    """Pick one of the four wall textures from a cell's position."""
    total = row + col
    if total % 5 == 1:
        return 0
    if total % 6 == 2:
        return 1
    if total % 7 == 3:
        return 2
    return 3


def collectible_frame(time_ms: int) -> int:
    """Index of the collectible texture shown at a given time."""
    phase = time_ms % _ANIMATION_LOOP_MS
    if phase < 50:
        return 1
    if phase < 100:
        return 2
    if phase < 150:
        return 3
    return 0


def enemy_frame(time_ms: int) -> int:
    """Index of the enemy texture shown at a given time."""
    phase = time_ms % _ANIMATION_LOOP_MS
    if phase < 333:
        return 0
    if phase < 667:
        return 1
    return 2


def image_to_surface(image: XpmImage) -> pygame.Surface:
    """Turn a decoded XPM image into a surface; transparent pixels get alpha 0."""
    surface = pygame.Surface((image.width, image.height), pygame.SRCALPHA)
    for y, row in enumerate(image.pixels):
        for x, value in enumerate(row):
            if value == TRANSPARENT:
                surface.set_at((x, y), (0, 0, 0, 0))
            else:
                surface.set_at((x, y), (*_rgb(value), 255))
    return surface


@dataclass(frozen=True)
class Textures:
    """Every sprite the game draws.

    ``exits`` holds the closed then the open exit; ``players`` is ordered by
    :class:`Direction` value.
    """

    floor: pygame.Surface
    walls: tuple[pygame.Surface, ...]
    exits: tuple[pygame.Surface, ...]
    players: tuple[pygame.Surface, ...]
    collectibles: tuple[pygame.Surface, ...]
    enemies: tuple[pygame.Surface, ...]

    @property
    def size(self) -> int:
        """Side of one map tile in pixels."""
        return self.floor.get_width()

    @classmethod
    def load(cls, directory: str | os.PathLike[str] = "textures") -> Textures:
        """Load all textures from a directory of XPM files."""
        base = Path(directory)

        def surface(name: str) -> pygame.Surface:
            try:
                return image_to_surface(read_xpm(base / name))
            except XpmError as exc:
                raise MapError(ErrorCode.TEXTURE_LOAD_ERROR) from exc

        def series(stem: str, count: int) -> tuple[pygame.Surface, ...]:
            return tuple(surface(f"{stem}{n}.xpm") for n in range(1, count + 1))

        return cls(
            floor=surface("floor1.xpm"),
            exits=series("exit", 2),
            walls=series("wall", 4),
            players=series("player", 4),
            enemies=series("enemy", 3),
            collectibles=series("key", 4),
        )

    def for_cell(
        self,
        piece: str,
        row: int,
        col: int,
        time_ms: int,
        direction: Direction,
        exit_open: bool,
    ) -> pygame.Surface | None:
        """Return the sprite for a piece, or None for pieces drawn as nothing."""
        if piece == FLOOR:
            return self.floor
        if piece == WALL:
            return self.walls[wall_variant(row, col)]
        if piece == COLLECTIBLE:
            return self.collectibles[collectible_frame(time_ms)]
        if piece == ENEMY:
            return self.enemies[enemy_frame(time_ms)]
        if piece == EXIT:
            return self.exits[1 if exit_open else 0]
        if piece == PLAYER:
            return self.players[int(direction) - 1]
        return None


class Renderer:
    """Draws the state of a game with a set of textures."""

    def __init__(self, game: Game, textures: Textures) -> None:
        self.game = game
        self.textures = textures
        self._curtain_row = 0

    @property
    def size(self) -> int:
        return self.textures.size

    @property
    def pixel_size(self) -> tuple[int, int]:
        """Width and height of the whole map in pixels."""
        return self.game.width * self.size, self.game.height * self.size

    def draw_cell(self, surface: pygame.Surface, row: int, col: int, time_ms: int) -> None:
        """Draw the piece at one grid position."""
        game = self.game
        sprite = self.textures.for_cell(
            game.grid[row][col], row, col, time_ms, game.direction, game.exit_open
        )
        if sprite is not None:
            surface.blit(sprite, (col * self.size, row * self.size))

    def draw_all(self, surface: pygame.Surface, time_ms: int) -> None:
        """Draw every cell of the map."""
        for row in range(self.game.height):
            for col in range(self.game.width):
                self.draw_cell(surface, row, col, time_ms)

    def draw_type(self, surface: pygame.Surface, piece: str, time_ms: int) -> None:
        """Redraw only the cells holding a given piece."""
        for row, cells in enumerate(self.game.grid):
            for col, cell in enumerate(cells):
                if cell == piece:
                    self.draw_cell(surface, row, col, time_ms)

    def draw_moves(self, surface: pygame.Surface) -> None:
        """Draw the move counter in the top left corner."""
        surface.fill((0, 0, 0), _COUNTER_AREA)
        if not pygame.font.get_init():
            pygame.font.init()
        font = pygame.font.Font(None, 18)
        text = font.render(f"Moves: {self.game.moves}", True, _rgb(TEXT_COLOR))
        surface.blit(text, (10, 1))

    def draw_curtain(self, surface: pygame.Surface, color: int) -> bool:
        """Draw the next line of the closing curtain.

        Returns True once the curtain has covered the whole map.
        """
        self._curtain_row += 1
        width, height = self.pixel_size
        surface.fill(_rgb(color), pygame.Rect(1, self._curtain_row, width, 1))
        return self._curtain_row >= height