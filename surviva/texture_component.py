"""A drawable region of a shared texture."""

from __future__ import annotations

from typing import Any

import pygame

from .game_status import status
from .geometry import Point, Rect
from .textures import TextureManager, manager as default_manager


class TextureComponent:
    """Draws a source rectangle of a texture, scaled by the game sprite scale."""

    def __init__(self, manager: TextureManager | None = None) -> None:
        self.manager = manager if manager is not None else default_manager
        self.texture: Any = None
        self.src = Rect()
        self.scale = 1.0

    def set_texture(self, texture: Any) -> None:
        """Use ``texture`` and make the source rectangle cover all of it."""
        self.texture = texture
        width, height = texture.get_size()
        self.src = Rect(0, 0, float(width), float(height))

    def set_src(self, src: Rect) -> None:
        """Select the part of the texture to draw."""
        self.src = src

    @property
    def size(self) -> Point:
        """On-screen size of the source rectangle at the game sprite scale."""
        return Point(self.src.w * status.scale, self.src.h * status.scale)

    def render(self, position: Point, offset: Point) -> None:
        """Draw onto the game screen with the top-left corner at ``position``.

        ``offset`` is the pivot point; drawing is never rotated, so it does
        not move the image.
        """
        screen = status.screen
        if self.texture is None or screen is None:
            return
        width = int(self.src.w * status.scale * self.scale)
        height = int(self.src.h * status.scale * self.scale)
        if width <= 0 or height <= 0:
            return
        area = pygame.Rect(
            int(self.src.x), int(self.src.y), int(self.src.w), int(self.src.h)
        ).clip(self.texture.get_rect())
        if area.width == 0 or area.height == 0:
            return
        image = pygame.transform.scale(self.texture.subsurface(area), (width, height))
        screen.blit(image, (position.x, position.y))

    def release(self) -> None:
        """Give the texture back to the texture manager."""
        if self.texture is not None:
            self.manager.unuse(self.texture)
            self.texture = None