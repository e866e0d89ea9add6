"""Level maps: loading the tile grid and scanning it for objects."""

from __future__ import annotations

import enum
from os import PathLike
from typing import Iterator, List, Sequence, Tuple, Union

MAP_ERROR_MESSAGE = "Map doesn't exist"
WIN_ORIGIN = 1400
WIN_COLUMN_WIDTH = 55

Position = Tuple[int, int]


class Tile(str, enum.Enum):
    """Characters that make up a level map."""

    EMPTY = " "
    PIECE = "1"
    MONSTER = "2"
    BOMB = "3"
    END = "e"


class MapError(Exception):
    """Raised when a map cannot be loaded or measured."""


def _tile_char(tile: Union[Tile, str]) -> str:
    return Tile(tile).value


def _scan(lines: Sequence[str]) -> Iterator[Tuple[int, int, str]]:
    """Yield ``(column, row, char)`` for every cell the game reads.

    Scanning stops at the end marker. After a line break the game resumes
    at column 1, so the first column of every row but the first is never
    looked at, not even for the end marker.
    """
    for row, line in enumerate(lines):
        start = 0 if row == 0 else 1
        for col, char in enumerate(line[start:], start):
            if char == Tile.END.value:
                return
            if char == "\n":
                break
            yield col, row, char


def load_map(path: Union[str, PathLike]) -> List[str]:
    """Read a map file and return its lines, line breaks included."""
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.readlines()
    except OSError as exc:
        raise MapError(MAP_ERROR_MESSAGE) from exc
    if not lines:
        raise MapError(f"map {path} is empty")
    return lines


def row_width(lines: Sequence[str]) -> int:
    """Number of columns in the first row of the map."""
    if not lines:
        raise MapError("map has no rows")
    return len(lines[0].split("\n", 1)[0])


def tile_positions(lines: Sequence[str], tile: Union[Tile, str]) -> List[Position]:
    """Grid positions ``(column, row)`` of a tile, in scan order."""
    wanted = _tile_char(tile)
    return [(col, row) for col, row, char in _scan(lines) if char == wanted]


def count_tiles(lines: Sequence[str], tile: Union[Tile, str]) -> int:
    """How many of a tile the game sees before the end marker."""
    return len(tile_positions(lines, tile))


def remove_tile(lines: List[str], index: int, tile: Union[Tile, str]) -> bool:
    """Blank out the ``index``-th occurrence of a tile, in place.

    Returns whether a tile was removed.
    """
    positions = tile_positions(lines, tile)
    if not 0 <= index < len(positions):
        return False
    col, row = positions[index]
    line = lines[row]
    lines[row] = line[:col] + Tile.EMPTY.value + line[col + 1:]
    return True


def win_position(lines: Sequence[str]) -> int:
    """Horizontal position the player must reach to win."""
    return WIN_ORIGIN + row_width(lines) * WIN_COLUMN_WIDTH