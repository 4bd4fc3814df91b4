import pygame
import pytest

from wolfmaze.errors import ErrorCode, MapError
from wolfmaze.game import Direction, Game
from wolfmaze.mapfile import TEXTURE_FILES, scan_map
from wolfmaze.render import (
    Renderer,
    Textures,
    collectible_frame,
    enemy_frame,
    image_to_surface,
    wall_variant,
)
from wolfmaze.xpm import TRANSPARENT, XpmImage

SIZE = 4
COLORS = {name: 0x010000 * (i + 1) + 0x20 for i, name in enumerate(TEXTURE_FILES)}


def _write_xpm(path, color, size=SIZE):
    rows = ",\n".join('"' + "a" * size + '"' for _ in range(size))
    path.write_text(
        "static char *img[] = {\n"
        f'"{size} {size} 1 1",\n'
        f'"a c #{color:06x}",\n'
        f"{rows}\n}};\n"
    )


def _rgb(color):
    return ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)


def _pixel(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


@pytest.fixture
def textures(tmp_path):
    for name, color in COLORS.items():
        _write_xpm(tmp_path / name, color)
    return Textures.load(tmp_path)


@pytest.fixture
def game():
    return Game(scan_map(["11111\n", "1PCE1\n", "11111\n"]), "maps/test.ber")


def test_image_to_surface_colours_and_transparency():
    image = XpmImage(2, 1, ((0x112233, TRANSPARENT),))
    surface = image_to_surface(image)
    assert surface.get_size() == (2, 1)
    assert tuple(surface.get_at((0, 0))) == (0x11, 0x22, 0x33, 255)
    assert surface.get_at((1, 0)).a == 0


def test_load_missing_textures_raises(tmp_path):
    with pytest.raises(MapError) as info:
        Textures.load(tmp_path)
    assert info.value.code == ErrorCode.TEXTURE_LOAD_ERROR


def test_load_reads_size_and_colours(textures):
    assert textures.size == SIZE
    assert _pixel(textures.floor, 0, 0) == _rgb(COLORS["floor1.xpm"])
    assert _pixel(textures.exits[1], 1, 1) == _rgb(COLORS["exit2.xpm"])
    assert _pixel(textures.players[3], 2, 2) == _rgb(COLORS["player4.xpm"])


def test_for_cell_picks_sprites(textures):
    assert textures.for_cell("0", 1, 1, 0, Direction.UP, False) is textures.floor
    assert textures.for_cell("E", 1, 1, 0, Direction.UP, False) is textures.exits[0]
    assert textures.for_cell("E", 1, 1, 0, Direction.UP, True) is textures.exits[1]
    players = {id(textures.for_cell("P", 0, 0, 0, d, False)) for d in Direction}
    assert players == {id(s) for s in textures.players}
    assert textures.for_cell("\n", 0, 0, 0, Direction.UP, False) is None


def test_wall_sprite_follows_variant(textures):
    variants = set()
    for row in range(6):
        for col in range(6):
            index = wall_variant(row, col)
            variants.add(index)
            sprite = textures.for_cell("1", row, col, 0, Direction.UP, False)
            assert sprite is textures.walls[index]
    assert variants == {0, 1, 2, 3}


def test_animation_frames_cycle():
    key_frames = [collectible_frame(t) for t in range(1000)]
    assert set(key_frames) == {0, 1, 2, 3}
    enemy_frames = [enemy_frame(t) for t in range(1000)]
    assert set(enemy_frames) == {0, 1, 2}
    assert enemy_frames == sorted(enemy_frames)
    assert all(collectible_frame(t) == collectible_frame(t + 1000) for t in range(0, 1000, 7))
    assert all(enemy_frame(t) == enemy_frame(t + 3000) for t in range(0, 1000, 7))


def test_draw_all_places_pieces(textures, game):
    renderer = Renderer(game, textures)
    surface = pygame.Surface(renderer.pixel_size)
    assert renderer.pixel_size == (5 * SIZE, 3 * SIZE)
    renderer.draw_all(surface, 500)
    assert _pixel(surface, 1 * SIZE, 1 * SIZE) == _rgb(COLORS["player1.xpm"])
    assert _pixel(surface, 3 * SIZE, 1 * SIZE) == _rgb(COLORS["exit1.xpm"])
    assert _pixel(surface, 2 * SIZE, 1 * SIZE) == _pixel(
        textures.collectibles[collectible_frame(500)], 0, 0
    )


def test_draw_type_touches_only_that_piece(textures, game):
    renderer = Renderer(game, textures)
    surface = pygame.Surface(renderer.pixel_size)
    surface.fill((255, 255, 255))
    renderer.draw_type(surface, "C", 500)
    assert _pixel(surface, 2 * SIZE, 1 * SIZE) == _pixel(
        textures.collectibles[collectible_frame(500)], 0, 0
    )
    assert _pixel(surface, 1 * SIZE, 1 * SIZE) == (255, 255, 255)


def test_exit_opens_after_collecting(textures, game):
    renderer = Renderer(game, textures)
    surface = pygame.Surface(renderer.pixel_size)
    game.move(0, 1)
    renderer.draw_cell(surface, 1, 3, 0)
    assert _pixel(surface, 3 * SIZE, 1 * SIZE) == _rgb(COLORS["exit2.xpm"])
    renderer.draw_cell(surface, 1, 1, 0)
    assert _pixel(surface, 1 * SIZE, 1 * SIZE) == _rgb(COLORS["floor1.xpm"])


def test_draw_curtain_covers_map(textures, game):
    renderer = Renderer(game, textures)
    surface = pygame.Surface(renderer.pixel_size)
    surface.fill((255, 255, 255))
    height = renderer.pixel_size[1]
    results = [renderer.draw_curtain(surface, 0x00FF00) for _ in range(height)]
    assert results[-1] is True
    assert not any(results[:-1])
    assert _pixel(surface, 1, 1) == (0, 255, 0)
    assert _pixel(surface, 0, 1) == (255, 255, 255)
    assert _pixel(surface, 1, 0) == (255, 255, 255)


def test_draw_moves_clears_counter_area(textures, game):
    renderer = Renderer(game, textures)
    surface = pygame.Surface((120, 40))
    surface.fill((255, 255, 255))
    renderer.draw_moves(surface)
    assert _pixel(surface, 1, 1) == (0, 0, 0)
    assert _pixel(surface, 0, 0) == (255, 255, 255)
    assert _pixel(surface, 110, 30) == (255, 255, 255)