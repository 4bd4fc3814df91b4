"""Error codes raised while checking a map, and the messages shown for them."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Reasons a map or its surroundings cannot be played."""

    NO_ERROR = 0
    NOT_RECTANGLE = -1
    NOT_SURROUNDED = -2
    UNREACHABLE = -3
    MAP_NOT_FOUND = -4
    NO_EXIT = -5
    NO_COLLECTIBLES = -6
    BAD_CHARACTERS = -7
    NO_PLAYER = -8
    BAD_SIZE = -9
    READ_ERROR = -10
    ARGUMENT_COUNT = -11
    TOO_MANY_EXITS = -12
    TOO_MANY_STARTS = -13
    BAD_FILE_NAME = -14
    NAME_TOO_SHORT = -15
    OPEN_ERROR = -16
    BAD_PIECE = -17
    GRAPHICS_ERROR = -18
    TEXTURE_LOAD_ERROR = -19
    MAP_TOO_BIG = -20
    TEXTURE_NOT_FOUND = -21


_MESSAGES: dict[int, str] = {
    ErrorCode.NO_ERROR: "No error logged.",
    ErrorCode.NOT_RECTANGLE: "Map is not a rectangle",
    ErrorCode.NOT_SURROUNDED: "Map is not surrounded by walls",
    ErrorCode.UNREACHABLE: "Player can not get all collectibles and/or to exit",
    ErrorCode.MAP_NOT_FOUND: "Map was not found",
    ErrorCode.NO_EXIT: "Map has no exit",
    ErrorCode.NO_COLLECTIBLES: "Map has no collectibles",
    ErrorCode.BAD_CHARACTERS: "Map has characters that are not allowed",
    ErrorCode.NO_PLAYER: "Map has no player starting position",
    ErrorCode.BAD_SIZE: "Map size is not valid",
    ErrorCode.READ_ERROR: "Error reading the file",
    ErrorCode.ARGUMENT_COUNT: "Invalid argument count",
    ErrorCode.TOO_MANY_EXITS: "Too many exits",
    ErrorCode.TOO_MANY_STARTS: "Too many starting positions",
    ErrorCode.BAD_FILE_NAME: "File name is not valid",
    ErrorCode.NAME_TOO_SHORT: "Map name is too short to be valid",
    ErrorCode.OPEN_ERROR: "Error opening a file or file does not exist",
    ErrorCode.BAD_PIECE: "Invalid map piece found",
    ErrorCode.GRAPHICS_ERROR: "MLX pointer error",
    ErrorCode.TEXTURE_LOAD_ERROR: "Error loading texture",
    ErrorCode.MAP_TOO_BIG: "Map is too big",
    ErrorCode.TEXTURE_NOT_FOUND: "Texture was not found",
}


def error_message(code: int) -> str:
    """Return the text reported for an error code.

    The text always starts with an ``Error`` line; codes without a known
    description add nothing after it.
    """
    text = _MESSAGES.get(code)
    if text is None:
        return "Error\n"
    return f"Error\n{text}\n"


class MapError(Exception):
    """Raised when a map, its file or its textures fail a check."""

    def __init__(self, code: int) -> None:
        self.code = ErrorCode(code)
        super().__init__(_MESSAGES[self.code])

    @property
    def message(self) -> str:
        """The one-line description of the error."""
        return self.args[0]

    @property
    def report(self) -> str:
        """The full text shown to the player."""
        return error_message(self.code)