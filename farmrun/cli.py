"""Command-line entry point: load a map and play it in a window."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence

from farmrun.game_map import MapError, check_map_path, load_map
from farmrun.movement import Game, Key
from farmrun.printf import sprintf

ASSETS_DIR = "assets"


def status_line(game: Game) -> str:
    """The console status shown after every key press."""
    return sprintf("\rMovements: %d   carrots: %d   ", game.moves, game.carrots)


def handle_input(game: Game, key: Key | None) -> bool:
    """Apply a key press to a running game; False when the game should quit."""
    if not game.ended:
        game.move(key)
        game.step()
        sys.stdout.write(status_line(game))
        sys.stdout.flush()
    return key is not Key.ESC


def _fail(message: str) -> int:
    sys.stdout.write(message)
    sys.stdout.flush()
    return 1


def _run(game: Game) -> int:
    import pygame

    from farmrun.render import Renderer, load_images

    keys = {
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_ESCAPE: Key.ESC,
    }
    pygame.init()
    try:
        try:
            images = load_images(Path(ASSETS_DIR))
        except RuntimeError as exc:
            return _fail(str(exc))
        renderer = Renderer(game, images)
        try:
            game.step()
            renderer.draw()
            running = True
            while running:
                event = pygame.event.wait()
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    running = handle_input(game, keys.get(event.key))
                    renderer.draw()
        finally:
            renderer.close()
    finally:
        pygame.quit()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Play the map named by the single argument; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return _fail("Invalid argument. Please add a valid map path")
    try:
        path = check_map_path(args[0])
        game_map = load_map(path)
    except MapError as exc:
        return _fail(str(exc))
    return _run(Game(game_map))


if __name__ == "__main__":
    sys.exit(main())