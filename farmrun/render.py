"""Drawing a game onto a pygame surface."""

from __future__ import annotations

import os
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from farmrun.chars import itoa  # noqa: E402
from farmrun.game_map import (  # noqa: E402
    CARROT,
    EXIT,
    GROUND,
    START,
    TILE_SIZE,
    WALL,
)
from farmrun.movement import Game  # noqa: E402

WINDOW_TITLE = "farmrun"
CREDIT_COLOR = 0xADF78D
TEXT_COLOR = 0xFFFFFF
CREDIT_MAIN = "made with <3"
CREDIT_ASSETS = "farm tileset assets"

# (key, file name, description used in error messages), in loading order.
_ASSETS = (
    ("ground", "Ground.xpm", "ground"),
    ("wall", "Tree.xpm", "wall"),
    ("farmer", "Player.xpm", "farmer"),
    ("farmer_start", "Player_start.xpm", "farmer start"),
    ("carrot", "Carrot_big.xpm", "carrot"),
    ("house", "House.xpm", "house"),
    ("pig", "Pig.xpm", "pig"),
)

_TILE_IMAGES = {WALL: "wall", CARROT: "carrot", START: "house", EXIT: "pig"}

TextLine = tuple[str, int, int, int]


def movement_text(count: int) -> str:
    """The on-screen move counter."""
    return "Movements: " + itoa(count)


def _movement_line(count: int, width: int, height: int) -> TextLine:
    x = width * 0.01 if width <= 300 else width * 0.85
    return movement_text(count), int(x), int(height * 0.05), TEXT_COLOR


def credit_lines(width: int, height: int) -> list[TextLine]:
    """Credit text as (text, x, y, color) for a window of the given pixel size.

    Narrow windows get two lines, wider ones a single line.
    """
    x = int(width * 0.01)
    if width <= 300:
        return [
            (CREDIT_MAIN, x, int(height * 0.93), CREDIT_COLOR),
            (CREDIT_ASSETS, x, int(height * 0.98), CREDIT_COLOR),
        ]
    return [(f"{CREDIT_MAIN} * {CREDIT_ASSETS}", x, int(height * 0.98), CREDIT_COLOR)]


def win_lines(width: int, height: int) -> list[TextLine]:
    """The win message as (text, x, y, color), placed around the window centre."""
    center_x = width // 2
    center_y = height // 2
    return [
        ("YOU WIN!!!", center_x - 50, center_y - 10, TEXT_COLOR),
        ("Press ESC to exit", center_x - 75, center_y + 20, TEXT_COLOR),
    ]


def load_images(assets_dir: str | os.PathLike[str]) -> dict[str, pygame.Surface]:
    """Load every tile and farmer image from ``assets_dir``.

    Raises RuntimeError naming the first image that cannot be loaded.
    """
    directory = Path(assets_dir)
    images: dict[str, pygame.Surface] = {}
    for key, filename, description in _ASSETS:
        try:
            images[key] = pygame.image.load(str(directory / filename))
        except (pygame.error, OSError) as exc:
            raise RuntimeError(f"Error loading {description} image") from exc
    return images


def _rgb(color: int) -> pygame.Color:
    return pygame.Color((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)


class Renderer:
    """Draws a game's tiles, farmer and text onto a surface.

    Without a surface a display window of the map's size is opened.
    """

    def __init__(
        self,
        game: Game,
        images: dict[str, pygame.Surface],
        surface: pygame.Surface | None = None,
    ) -> None:
        self.game = game
        self.images = images
        self.width = game.map.width * TILE_SIZE
        self.height = game.map.height * TILE_SIZE
        self._owns_display = surface is None
        if surface is None:
            pygame.display.init()
            surface = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption(WINDOW_TITLE)
        self.surface = surface
        if not pygame.font.get_init():
            pygame.font.init()
        self._font = pygame.font.Font(None, 18)

    def _text(self, line: TextLine) -> None:
        text, x, y, color = line
        self.surface.blit(self._font.render(text, True, _rgb(color)), (x, y))

    def _draw_tiles(self) -> None:
        for row, tiles in enumerate(self.game.map.rows):
            for col, tile in enumerate(tiles):
                position = (col * TILE_SIZE, row * TILE_SIZE)
                if tile == GROUND:
                    self.surface.blit(self.images["ground"], position)
                name = _TILE_IMAGES.get(tile)
                if name is not None:
                    self.surface.blit(self.images[name], position)

    def draw(self) -> None:
        """Redraw the whole window from the game's current state."""
        game = self.game
        self.surface.fill((0, 0, 0))
        self._draw_tiles()
        for line in credit_lines(self.width, self.height):
            self._text(line)
        self._text(_movement_line(game.moves, self.width, self.height))
        farmer = "farmer_start" if game.map.tile(game.x, game.y) == START else "farmer"
        self.surface.blit(
            self.images[farmer], (game.x * TILE_SIZE, game.y * TILE_SIZE)
        )
        if game.ended:
            for line in win_lines(self.width, self.height):
                self._text(line)
        if self._owns_display:
            pygame.display.flip()

    def close(self) -> None:
        """Release the images and close the window if this renderer opened it."""
        self.images.clear()
        if self._owns_display:
            pygame.display.quit()
            self._owns_display = False