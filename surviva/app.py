"""The game window, the main loop and the demo scene it starts with."""

from __future__ import annotations

import argparse
import logging
import time

import pygame

from .entities import Dummy, ItemEntity, Player, Tree
from .game_status import status
from .item import IronAxe
from .scene import TopView
from .textures import TextureError, manager

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Surviva"
WINDOW_SIZE = (800, 600)
SPRITE_SCALE = 4
BACKGROUND = (0, 0, 0)


class DemoScene(TopView):
    """A small world with the player, a dummy, a tree and an axe on the ground."""

    def __init__(self) -> None:
        super().__init__()
        status.player = Player()
        self.add_sprite(status.player)

        dummy = Dummy()
        dummy.set_position(100, 100)
        self.add_sprite(dummy)

        tree = Tree()
        tree.set_position(200, 100)
        self.add_sprite(tree)

        axe = ItemEntity(IronAxe())
        axe.set_position(300, 100)
        self.add_sprite(axe)


def _open_window() -> bool:
    pygame.init()
    if not pygame.display.get_init():
        logger.error("Display initialisation error.")
        return False
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
    except pygame.error as exc:
        logger.error("Window creation error: %s", exc)
        return False
    pygame.display.set_caption(WINDOW_TITLE)
    status.screen = screen
    return True


def _shutdown() -> None:
    scene = status.current_scene
    if scene is not None:
        scene.close()
        status.current_scene = None
    manager.unload_all()
    status.screen = None
    pygame.quit()


def _run() -> None:
    last = time.perf_counter()
    while not status.should_close:
        now = time.perf_counter()
        dt = now - last
        last = now

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                status.should_close = True
            if status.current_scene is not None:
                status.current_scene.handle_event(event)

        scene = status.current_scene
        if scene is None:
            continue

        scene.update(dt)

        screen = pygame.display.get_surface()
        status.screen = screen
        if screen is not None:
            screen.fill(BACKGROUND)
        scene.render()
        pygame.display.flip()


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    argparse.ArgumentParser(prog="surviva", description="A top-view survival game.").parse_args(argv)
    logging.basicConfig(level=logging.DEBUG)

    if not _open_window():
        pygame.quit()
        return 1

    status.scale = SPRITE_SCALE
    try:
        try:
            status.current_scene = DemoScene()
        except TextureError as exc:
            logger.error("%s", exc)
            return 1
        _run()
    finally:
        _shutdown()
    return 0