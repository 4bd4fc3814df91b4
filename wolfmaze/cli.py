"""Command line entry point: check a map, then play it in a window."""

from __future__ import annotations

import sys
import time

from wolfmaze import console
from wolfmaze.errors import ErrorCode, MapError
from wolfmaze.game import (
    KEY_A,
    KEY_D,
    KEY_DOWN,
    KEY_ESCAPE,
    KEY_LEFT,
    KEY_Q,
    KEY_RIGHT,
    KEY_S,
    KEY_UP,
    KEY_W,
    Game,
    Outcome,
)
from wolfmaze.mapfile import COLLECTIBLE, ENEMY, load_map
from wolfmaze.render import Renderer, Textures

import pygame  # noqa: E402  (imported after render, which silences its banner)

WIN_COLOR = 0x000000
LOSE_COLOR = 0xB40000
STEP_MS = 5
WINDOW_TITLE = "wolfmaze"

_KEYSYMS = {
    pygame.K_ESCAPE: KEY_ESCAPE,
    pygame.K_q: KEY_Q,
    pygame.K_UP: KEY_UP,
    pygame.K_DOWN: KEY_DOWN,
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_RIGHT: KEY_RIGHT,
    pygame.K_w: KEY_W,
    pygame.K_s: KEY_S,
    pygame.K_a: KEY_A,
    pygame.K_d: KEY_D,
}


def _now_ms() -> int:
    return time.monotonic_ns() // 1_000_000


def _play(game: Game) -> None:
    pygame.init()
    try:
        textures = Textures.load()
        renderer = Renderer(game, textures)
        try:
            screen = pygame.display.set_mode(renderer.pixel_size)
        except pygame.error as exc:
            raise MapError(ErrorCode.GRAPHICS_ERROR) from exc
        pygame.display.set_caption(WINDOW_TITLE)
        renderer.draw_all(screen, _now_ms())
        renderer.draw_moves(screen)
        pygame.display.flip()

        clock = pygame.time.Clock()
        last_step = None
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    break
                if event.type != pygame.KEYUP:
                    continue
                code = _KEYSYMS.get(event.key)
                if code is None:
                    continue
                outcome = game.handle_key(code)
                if outcome is Outcome.QUIT:
                    running = False
                    break
                if outcome in (Outcome.MOVED, Outcome.CAUGHT):
                    console.update(game)
                    renderer.draw_all(screen, _now_ms())
                    renderer.draw_moves(screen)
            if not running:
                break
            time_ms = _now_ms()
            step = time_ms // STEP_MS
            if step != last_step:
                last_step = step
                if game.won:
                    running = not renderer.draw_curtain(screen, WIN_COLOR)
                elif game.lost:
                    running = not renderer.draw_curtain(screen, LOSE_COLOR)
                else:
                    renderer.draw_type(screen, COLLECTIBLE, time_ms)
                    renderer.draw_type(screen, ENEMY, time_ms)
            pygame.display.flip()
            clock.tick(1000 // STEP_MS)
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Check the map named on the command line and play it."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        if len(args) != 1:
            raise MapError(ErrorCode.ARGUMENT_COUNT)
        info = load_map(args[0])
        game = Game(info, f"maps/{args[0]}")
        console.update(game)
        _play(game)
    except MapError as exc:
        sys.stdout.write(exc.report)
        sys.stdout.flush()
        return 0
    if game.players == 1:
        sys.stdout.write(console.quit_message())
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())