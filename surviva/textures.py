"""Reference-counted loading of texture images."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

import pygame

logger = logging.getLogger(__name__)


class TextureError(Exception):
    """Raised when a texture cannot be loaded."""


def load_image(path: str) -> pygame.Surface:
    """Load an image file into a surface."""
    try:
        surface = pygame.image.load(path)
    except (pygame.error, OSError) as exc:
        raise TextureError(f"cannot load texture {path!r}: {exc}") from exc
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        surface = surface.convert_alpha()
    return surface


@dataclass
class _Slot:
    texture: Any
    usage: int


class TextureManager:
    """Shares one loaded texture per path and frees it when no user remains."""

    def __init__(self, loader: Callable[[str], Any]) -> None:
        self.loader = loader
        self._slots: dict[str, _Slot] = {}

    def use(self, path: str) -> Any:
        """Return the texture for ``path``, loading it on first use."""
        slot = self._slots.get(path)
        if slot is None:
            texture = self.loader(path)
            if texture is None:
                logger.error("Texture is null: %s", path)
                raise TextureError(f"cannot load texture {path!r}")
            slot = self._slots[path] = _Slot(texture, 0)
        slot.usage += 1
        logger.info("Texture successfully assigned: %s", path)
        return slot.texture

    def unuse(self, texture: Any) -> None:
        """Drop one use of ``texture``; free it when no use is left."""
        if texture is None:
            return
        for path, slot in self._slots.items():
            if slot.texture is texture:
                slot.usage -= 1
                if slot.usage < 1:
                    self._free(path)
                return
        logger.warning("The texture to unuse is not available with texture manager.")

    def unload_all(self) -> None:
        """Free every texture, whether or not it still has users."""
        logger.warning(
            "Unloading all textures regardless of remaining users."
        )
        for path in list(self._slots):
            self._free(path)

    def usage(self, path: str) -> int:
        """Number of current users of the texture at ``path``."""
        slot = self._slots.get(path)
        return slot.usage if slot else 0

    def _free(self, path: str) -> None:
        del self._slots[path]
        logger.info("Texture successfully freed: %s", path)


manager = TextureManager(load_image)