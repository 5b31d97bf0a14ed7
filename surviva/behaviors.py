"""Mix-ins that make a sprite clickable or collidable."""

from __future__ import annotations

from .game_status import status
from .geometry import Point, Rect, distance


def _box_on_screen(sprite, box: Rect) -> Rect:
    screen_pos: Point = sprite.screen_pos
    offset: Point = sprite.scaled_offset
    return Rect(
        screen_pos.x - offset.x + box.x,
        screen_pos.y - offset.y + box.y,
        box.w,
        box.h,
    )


class Clickable:
    """Gives a sprite a box, relative to its texture, that reacts to the mouse.

    Mix into a :class:`~surviva.sprite.Sprite` subclass and call
    ``Clickable.__init__`` with the box in unscaled texture pixels.
    """

    def __init__(self, box: Rect) -> None:
        self._click_rect = box.scaled(status.scale)
        self.hover_count = 0

    def on_hover(self) -> None:
        """React to the mouse resting over the click box; counts the frames."""
        self.hover_count += 1

    def on_click(self, button: int) -> None:
        """React to a mouse button released over the click box."""

    def is_in_player_reach(self) -> bool:
        """Return True if the player stands within reach of this sprite."""
        player = status.player
        return distance(self.position, player.position) <= player.reach

    def click_box(self) -> Rect:
        """The click box in screen coordinates."""
        return _box_on_screen(self, self._click_rect)


class Collidable:
    """Gives a sprite a box, relative to its texture, that takes part in collisions.

    Mix into a :class:`~surviva.sprite.Sprite` subclass and call
    ``Collidable.__init__`` with the box in unscaled texture pixels.
    """

    def __init__(self, box: Rect) -> None:
        self._collide_rect = box.scaled(status.scale)

    def on_collide(self) -> None:
        """React to overlapping another collidable."""

    def collides_with(self, other: Collidable) -> bool:
        """Return True if the two collide boxes overlap."""
        return self.collide_box().intersects(other.collide_box())

    def collide_box(self) -> Rect:
        """The collide box in screen coordinates."""
        return _box_on_screen(self, self._collide_rect)