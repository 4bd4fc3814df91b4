"""Text shown in the terminal while a game runs."""

from __future__ import annotations

import subprocess
import sys

from wolfmaze.game import Game
from wolfmaze.mapfile import COLLECTIBLE, ENEMY

_CYAN = "\x1B[96m"
_YELLOW = "\x1B[93m"
_GREEN = "\x1B[92m"
_RED = "\x1B[31m"
_RESET = "\x1B[0m"

_BANNER = (
    "  _____        _                  ___ ____\n"
    " |   __|___   | |___ ___ ___     |_  |    \\ \n"
    " |__   | . |  | | . |   | . |_   |_  |  |  |\n"
    " |_____|___|  |_|___|_|_|_  | |  |___|____/\n"
    "                        |___|_|\n\n"
)

_STORY = (
    ' You are an Allied spy William "B.J." Blazkowicz.\n'
    " Your goal is to escape from the Nazi German prison\n"
    "            Castle Wolfenstein. Good luck! \n\n"
)


def header(map_name: str, moves: int) -> str:
    """The title, the story and the map name with the move count."""
    return (
        f"{_CYAN}{_BANNER}{_RESET}{_STORY}"
        f"   Map name: {map_name}   Moves: {moves}\n\n"
    )


def key_message() -> str:
    return f"{_YELLOW}            You got a golden key!\n\n{_RESET}"


def exit_open_message() -> str:
    return f"{_GREEN}            The exit is now open!\n\n{_RESET}"


def quit_message() -> str:
    return f"{_CYAN}     So long and thanks for all the keys!\n\n{_RESET}"


def caught_message() -> str:
    return f"{_RED}   You woke up the sleeping guard! Game over!\n\n{_RESET}"


def render(game: Game) -> str:
    """The whole screen for the current state of a game."""
    parts = [header(game.map_name, game.moves)]
    parts.extend(f"  {game.row_text(row)}\n" for row in range(game.height))
    parts.append("\n")
    if game.collectibles == 0:
        parts.append(exit_open_message())
    if game.target == COLLECTIBLE:
        parts.append(key_message())
    if game.target == ENEMY:
        parts.append(caught_message())
    return "".join(parts)


def update(game: Game, clear: bool = True) -> None:
    """Clear the terminal if asked, then print the current screen."""
    if clear:
        try:
            subprocess.run(["clear"], check=False)
        except OSError:
            pass
    sys.stdout.write(render(game))
    sys.stdout.flush()