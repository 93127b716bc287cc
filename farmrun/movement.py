"""The farmer's moves over a map and the state of a running game."""

from __future__ import annotations

from enum import Enum

from farmrun.game_map import CARROT, EXIT, GROUND, WALL, GameMap


class Key(Enum):
    """The keys the game reacts to."""

    UP = "up"
    DOWN = "down"
    RIGHT = "right"
    LEFT = "left"
    ESC = "esc"


_STEPS = {
    Key.UP: (0, -1),
    Key.DOWN: (0, 1),
    Key.RIGHT: (1, 0),
    Key.LEFT: (-1, 0),
}


class Game:
    """A map being played: the farmer's tile, moves made and carrots left.

    Collected carrots are removed from the map's rows.
    """

    def __init__(self, game_map: GameMap) -> None:
        if game_map.player is None:
            raise ValueError("the map has no starting position")
        self.map = game_map
        self.x, self.y = game_map.player
        self.moves = 0
        self.carrots = game_map.carrots
        self.ended = False

    @property
    def position(self) -> tuple[int, int]:
        """The farmer's (x, y) tile."""
        return self.x, self.y

    def is_valid_move(self, x: int, y: int) -> bool:
        """True if tile (x, y) lies inside the map and is not a wall."""
        if not (0 <= x < self.map.width and 0 <= y < self.map.height):
            return False
        try:
            return self.map.tile(x, y) != WALL
        except IndexError:
            return False

    def move(self, key: Key | None) -> bool:
        """Move one tile in the direction of ``key``; True if the farmer moved."""
        step = _STEPS.get(key) if isinstance(key, Key) else None
        if step is None:
            return False
        target_x, target_y = self.x + step[0], self.y + step[1]
        if not self.is_valid_move(target_x, target_y):
            return False
        self.x, self.y = target_x, target_y
        self.moves += 1
        return True

    def step(self) -> bool:
        """Collect a carrot under the farmer and check for a win.

        The game ends when no carrots are left and the farmer stands on the
        pig. Returns whether the game has ended.
        """
        tile = self.map.tile(self.x, self.y)
        if tile == CARROT:
            self.map.rows[self.y][self.x] = GROUND
            self.carrots -= 1
            tile = GROUND
        if self.carrots == 0 and tile == EXIT:
            self.ended = True
        return self.ended