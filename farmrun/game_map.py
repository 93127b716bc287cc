"""Reading, checking and path-validating the tile maps of the game.

A map is a rectangle of tiles: ``1`` wall, ``0`` ground, ``C`` carrot,
``P`` the house where the farmer starts and ``E`` the pig.
"""

from __future__ import annotations

import os
from collections import deque
from dataclasses import dataclass, field
from typing import Iterable

from farmrun.lines import LineReader

TILE_SIZE = 48

WALL = "1"
GROUND = "0"
CARROT = "C"
START = "P"
EXIT = "E"

_BER_ERROR = "Invalid path. Map should be a .ber file"


class MapError(Exception):
    """A map file or its contents are not usable."""


@dataclass
class GameMap:
    """The tiles of a map and the counts gathered while scanning it.

    ``width`` and ``height`` are in tiles; ``player`` is the (x, y) tile of
    the last ``P`` found.
    """

    rows: list[list[str]]
    width: int
    height: int
    carrots: int = 0
    players: int = 0
    exits: int = 0
    invalid: bool = False
    player: tuple[int, int] | None = field(default=None)

    def tile(self, x: int, y: int) -> str:
        """The tile at column ``x`` of row ``y``."""
        if x < 0 or y < 0:
            raise IndexError(f"tile ({x}, {y}) is outside the map")
        try:
            return self.rows[y][x]
        except IndexError:
            raise IndexError(f"tile ({x}, {y}) is outside the map") from None

    def check(self) -> None:
        """Check size, contents, shape and closed borders; raise MapError if wrong."""
        if not self.rows or len(self.rows[0]) < 4:
            raise MapError("Map too short")
        if not self.carrots:
            raise MapError("No carrots for your pig :(")
        if self.players != 1:
            raise MapError("You need 1 (and only 1) house")
        if self.invalid:
            raise MapError("Something souldn't be there")
        first_len = len(self.rows[0])
        if any(len(row) != first_len for row in self.rows):
            raise MapError("Invalid map. Please select a rectangular map")
        if self._has_hole():
            raise MapError("Map validation failed. There's a whole in your map")

    def _has_hole(self) -> bool:
        width, height = self.width, self.height
        for row in (0, height - 1):
            if any(self.rows[row][x] != WALL for x in range(width)):
                return True
        for col in (0, width - 1):
            if any(self.rows[y][col] != WALL for y in range(height)):
                return True
        return False

    def validate_path(self) -> bool:
        """Check that every carrot and exactly one pig can be reached from the start.

        The map itself is left untouched. Raises MapError when the check fails.
        """
        failure = "Map validation failed: unreachable elements"
        if self.player is None:
            raise MapError(failure)
        seen: set[tuple[int, int]] = set()
        queue = deque([self.player])
        carrots = exits = 0
        while queue:
            x, y = queue.popleft()
            if (x, y) in seen or y < 0 or y >= len(self.rows):
                continue
            if x < 0 or x >= len(self.rows[y]):
                continue
            tile = self.rows[y][x]
            if tile == WALL:
                continue
            seen.add((x, y))
            if tile == CARROT:
                carrots += 1
            elif tile == EXIT:
                exits += 1
            queue.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))
        if carrots != self.carrots or exits != 1:
            raise MapError(failure)
        return True


def check_map_path(path: str | os.PathLike[str]) -> str:
    """Return the path as text if it names a ``.ber`` file, else raise MapError."""
    text = os.fspath(path)
    if len(text) <= 4:
        raise MapError("Invalid map path")
    if not text.endswith(".ber"):
        raise MapError(_BER_ERROR)
    return text


def _from_lines(lines: Iterable[str]) -> GameMap:
    rows: list[list[str]] = []
    carrots = players = exits = 0
    invalid = False
    player: tuple[int, int] | None = None
    last_raw = 0
    for y, raw in enumerate(lines):
        last_raw = len(raw)
        content = raw.split("\n", 1)[0]
        for x, char in enumerate(content):
            if char == START:
                players += 1
                player = (x, y)
            elif char == CARROT:
                carrots += 1
            elif char == EXIT:
                exits += 1
            elif char not in (GROUND, WALL):
                invalid = True
        rows.append(list(content))
    # The width comes from the raw length of the last line, less its newline.
    width = last_raw - 1 if rows else 0
    return GameMap(
        rows=rows,
        width=width,
        height=len(rows),
        carrots=carrots,
        players=players,
        exits=exits,
        invalid=invalid,
        player=player,
    )


def parse_map(text: str) -> GameMap:
    """Scan map text, one row per line, without checking it."""
    pieces = text.split("\n")
    lines = [piece + "\n" for piece in pieces[:-1]]
    if pieces[-1]:
        lines.append(pieces[-1])
    return _from_lines(lines)


def read_map(path: str | os.PathLike[str]) -> GameMap:
    """Read and scan a map file without checking it."""
    try:
        with open(path, "rb") as stream:
            lines = list(LineReader(stream))
    except OSError as exc:
        raise MapError("Error reading map file") from exc
    return _from_lines(lines)


def load_map(path: str | os.PathLike[str]) -> GameMap:
    """Read a map file, check it and validate its paths."""
    game_map = read_map(path)
    game_map.check()
    game_map.validate_path()
    return game_map