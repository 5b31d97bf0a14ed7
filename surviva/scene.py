"""Scenes hold the sprites of the world and drive their updates and drawing."""

from __future__ import annotations

import pygame

from .behaviors import Clickable, Collidable
from .game_status import status
from .geometry import Camera, Point, Rect
from .sprite import Sprite

_RED = (255, 0, 0, 255)
_GREEN = (0, 255, 0, 255)
_WHITE = (255, 255, 255, 255)


def _to_pygame(rect: Rect) -> pygame.Rect:
    return pygame.Rect(int(rect.x), int(rect.y), int(rect.w), int(rect.h))


class Scene:
    """A list of sprites, a camera and the mouse position seen by the scene."""

    def __init__(self) -> None:
        self.sprites: list[Sprite] = []
        self.camera = Camera()
        self.mouse = Point()

    def handle_event(self, event: pygame.event.Event) -> None:
        """Track the mouse and pass button releases to the hovered sprite."""
        if event.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            pos = getattr(event, "pos", None)
            if pos is not None:
                self.mouse = Point(float(pos[0]), float(pos[1]))
        if event.type == pygame.MOUSEBUTTONUP:
            hovering = status.hovering
            if isinstance(hovering, Clickable):
                hovering.on_click(event.button)

    def update(self, dt: float) -> None:
        """Drop dead sprites, find the hovered one and update the rest."""
        self._remove_dead_sprites()
        self._process_hovering()
        for sprite in list(self.sprites):
            sprite.update(dt)

    def render(self) -> None:
        """Draw every sprite in order."""
        for sprite in self.sprites:
            sprite.render()

    def add_sprite(self, sprite: Sprite) -> None:
        """Add ``sprite`` to the end of the scene."""
        self.sprites.append(sprite)

    def close(self) -> None:
        """Remove every sprite, including any added while removing others."""
        while self.sprites:
            self.sprites.pop(0).on_removed()

    def _remove_dead_sprites(self) -> None:
        dead = [sprite for sprite in self.sprites if sprite.should_delete]
        if not dead:
            return
        self.sprites[:] = [sprite for sprite in self.sprites if not sprite.should_delete]
        for sprite in dead:
            sprite.on_removed()

    def _process_hovering(self) -> None:
        for sprite in self.sprites:
            if isinstance(sprite, Clickable) and sprite.click_box().contains(self.mouse):
                status.hovering = sprite
                sprite.on_hover()
                return
        status.hovering = None


class TopView(Scene):
    """A scene seen from above: collisions, depth ordering and a player camera."""

    def update(self, dt: float) -> None:
        self._check_collision()
        self._order_sprites()
        super().update(dt)

    def render(self) -> None:
        """Centre the camera on the player, draw, and draw debug boxes if enabled."""
        player = status.player
        screen = status.screen
        width, height = screen.get_size() if screen is not None else (0, 0)
        if player is not None:
            self.camera.pos = Point(
                player.position.x - width / 2, player.position.y - height / 2
            )
        super().render()
        if status.debug:
            self._render_debug()

    def _check_collision(self) -> None:
        for sprite in self.sprites:
            if not isinstance(sprite, Collidable):
                continue
            for other in self.sprites:
                if other is sprite or not isinstance(other, Collidable):
                    continue
                if sprite.collides_with(other):
                    sprite.on_collide()
                    other.on_collide()

    def _order_sprites(self) -> None:
        self.sprites.sort(key=lambda sprite: sprite.position.y)

    def _render_debug(self) -> None:
        screen = status.screen
        if screen is None:
            return
        for sprite in self.sprites:
            if isinstance(sprite, Collidable):
                pygame.draw.rect(screen, _RED, _to_pygame(sprite.collide_box()), 1)
            if isinstance(sprite, Clickable):
                pygame.draw.rect(screen, _GREEN, _to_pygame(sprite.click_box()), 1)
            p = sprite.screen_pos
            point = (int(p.x), int(p.y))
            if screen.get_rect().collidepoint(point):
                screen.set_at(point, _WHITE)