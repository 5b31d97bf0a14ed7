"""The base of everything that lives in a scene."""

from __future__ import annotations

from .game_status import status
from .geometry import Point
from .texture_component import TextureComponent


def _camera_position() -> Point:
    scene = status.current_scene
    return scene.camera.pos if scene is not None else Point()


class Sprite:
    """A positioned, optionally textured object in the current scene.

    ``offset`` is the pivot in unscaled texture pixels; ``position`` is the
    world position of that pivot.
    """

    def __init__(self) -> None:
        self.position = Point()
        self.offset = Point()
        self.should_delete = False
        self.texture: TextureComponent | None = None
        self.age = 0.0

    def update(self, dt: float) -> None:
        """Advance the sprite by ``dt`` seconds; plain sprites only age."""
        self.age += dt

    def render(self) -> None:
        """Draw the texture so that its pivot lands on the sprite's position."""
        if self.texture is None:
            return
        offset = self.scaled_offset
        self.texture.render(self.position - offset - _camera_position(), offset)

    def on_removed(self) -> None:
        """Release what the sprite holds once it leaves its scene."""
        if self.texture is not None:
            self.texture.release()
            self.texture = None

    def set_position(self, x: float, y: float) -> None:
        """Move the sprite to world position (x, y)."""
        self.position = Point(x, y)

    @property
    def scaled_offset(self) -> Point:
        """The pivot offset at the game sprite scale."""
        return self.offset * status.scale

    @property
    def screen_pos(self) -> Point:
        """The position relative to the current scene's camera."""
        return self.position - _camera_position()

    @property
    def scale(self) -> Point:
        """The on-screen size of the sprite's texture."""
        if self.texture is None:
            raise AttributeError("sprite has no texture")
        return self.texture.size