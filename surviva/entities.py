"""The living things of the world: the player, a dummy, trees and dropped items."""

from __future__ import annotations

import logging
from typing import Callable

import pygame

from .behaviors import Clickable, Collidable
from .game_status import status
from .geometry import Point, Rect
from .inventory import Inventory
from .item import Item, ItemType, Tool, Wood
from .sprite import Sprite
from .texture_component import TextureComponent

logger = logging.getLogger(__name__)

PLAYER_WIDTH = 10
PLAYER_HEIGHT = 16
PLAYER_FRAME_MS = 500
PLAYER_INVENTORY_SIZE = 24

TREE_WIDTH = 48
TREE_HEIGHT = 64
TREE_SHEET_AMOUNT = 6


def _use_texture(component: TextureComponent, path: str) -> None:
    component.set_texture(component.manager.use(path))


class Entity(Sprite):
    """A textured sprite with hit points, a speed and an optional inventory."""

    def __init__(self) -> None:
        Sprite.__init__(self)
        self.texture = TextureComponent()
        self.velocity = Point()
        self.max_hp = 100
        self.hp = self.max_hp
        self.speed = 200
        self.inventory: Inventory | None = None

    def hurt(self, damage: int) -> None:
        """Take ``damage`` hit points; mark the entity for removal at zero or below."""
        self.hp -= damage
        if self.hp <= 0:
            self.should_delete = True

    def render(self) -> None:
        """Draw the entity and the item it holds in hand."""
        super().render()
        if self.inventory is None:
            return
        item = self.inventory.item_on_hand
        if item is None:
            return
        item.render_on_body(self.screen_pos)

    def on_removed(self) -> None:
        super().on_removed()
        if self.inventory is None:
            return
        for item in self.inventory:
            if item is not None and item.texture is not None:
                item.texture.release()


class Player(Entity, Collidable):
    """The entity steered by the keyboard."""

    reach = 100.0

    def __init__(self) -> None:
        Entity.__init__(self)
        Collidable.__init__(self, Rect(0, 13, 10, 3))
        _use_texture(self.texture, "assets/player.png")
        self.offset = Point(5, 16)
        self.texture.set_src(Rect(0, 0, PLAYER_WIDTH, PLAYER_HEIGHT))
        self.inventory = Inventory(PLAYER_INVENTORY_SIZE)
        self.previous_position: Point | None = None
        self.clock: Callable[[], int] = pygame.time.get_ticks
        self._ticks = self.clock()
        self._flipflop = 0

    def steer(
        self, up: bool, down: bool, left: bool, right: bool, slow: bool, dt: float
    ) -> None:
        """Set the velocity for one frame of ``dt`` seconds from the pressed directions."""
        vertical = int(bool(down)) - int(bool(up))
        horizontal = int(bool(right)) - int(bool(left))
        speed = self.speed
        if horizontal * vertical:
            speed = int(speed / 1.414)
        if slow:
            speed = int(speed / 2)
        self.velocity = Point(speed * horizontal * dt, speed * vertical * dt)

    def update(self, dt: float) -> None:
        """Animate, read the keyboard when a window is open, and move."""
        self.previous_position = self.position
        self._animate()
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            keys = pygame.key.get_pressed()
            self.steer(
                keys[pygame.K_w],
                keys[pygame.K_s],
                keys[pygame.K_a],
                keys[pygame.K_d],
                keys[pygame.K_LSHIFT],
                dt,
            )
        self.position = self.position + self.velocity

    def on_collide(self) -> None:
        """Step back to where the player stood before the last move."""
        if self.previous_position is not None:
            self.position = self.previous_position

    def _animate(self) -> None:
        now = self.clock()
        if now - self._ticks < PLAYER_FRAME_MS:
            return
        self._ticks = now
        self.texture.set_src(Rect(0, 0, PLAYER_WIDTH, PLAYER_HEIGHT))
        if not self.velocity.x and not self.velocity.y:
            return
        x = float(self._flipflop % 2 * PLAYER_WIDTH)
        self.texture.set_src(Rect(x, 0, PLAYER_WIDTH, PLAYER_HEIGHT))
        self._flipflop += 1


class Dummy(Entity, Clickable, Collidable):
    """A training dummy; left-clicking it toggles debug mode."""

    def __init__(self) -> None:
        Entity.__init__(self)
        Clickable.__init__(self, Rect(0, 0, 10, 16))
        Collidable.__init__(self, Rect(0, 13, 10, 3))
        _use_texture(self.texture, "assets/dummy.png")
        self.offset = Point(5, 16)

    def on_click(self, button: int) -> None:
        if button == pygame.BUTTON_LEFT:
            logger.debug("You left-clicked DUMMY!!")
            status.debug = not status.debug


class Tree(Entity, Clickable, Collidable):
    """A tree that is chopped with an axe and drops wood when felled."""

    def __init__(self) -> None:
        Entity.__init__(self)
        Clickable.__init__(self, Rect(16, 36, 16, 28))
        Collidable.__init__(self, Rect(16, 55, 16, 9))
        _use_texture(self.texture, "assets/tree.png")
        self.offset = Point(24, 64)
        self.texture.set_src(Rect(0, 0, TREE_WIDTH, TREE_HEIGHT))

    def on_click(self, button: int) -> None:
        """Chop the tree with the axe the player holds, if any."""
        if button != pygame.BUTTON_LEFT:
            return
        player = status.player
        if player is None or player.inventory is None:
            return
        tool = player.inventory.item_on_hand
        if not isinstance(tool, Tool) or tool.item_type is not ItemType.AXE:
            return

        self.hurt(tool.damage)

        step = self.max_hp / TREE_SHEET_AMOUNT
        x = 0.0
        for i in range(TREE_SHEET_AMOUNT):
            if self.hp > step * i:
                x = float((TREE_SHEET_AMOUNT - i - 1) * TREE_WIDTH)
        self.texture.set_src(Rect(x, 0, TREE_WIDTH, TREE_HEIGHT))

    def on_removed(self) -> None:
        """Release the texture and drop a piece of wood where the tree stood."""
        super().on_removed()
        scene = status.current_scene
        if scene is None:
            return
        wood = ItemEntity(Wood())
        wood.set_position(self.position.x, self.position.y)
        scene.add_sprite(wood)


class ItemEntity(Entity, Collidable):
    """An item lying on the ground that the player picks up by touching it."""

    def __init__(self, item: Item) -> None:
        Entity.__init__(self)
        Collidable.__init__(self, Rect(0, 0, 16, 16))
        self.item: Item | None = item
        self.offset = Point(8, 8)
        if item.texture is not None:
            item.texture.scale = 0.0

    def render(self) -> None:
        """Draw the item centred on the entity's position."""
        if self.item is None or self.item.texture is None:
            return
        offset = self.scaled_offset
        self.item.texture.render(self.screen_pos - offset, offset)

    def update(self, dt: float) -> None:
        """Grow the item into view after it appears."""
        if self.item is None or self.item.texture is None:
            return
        texture = self.item.texture
        if texture.scale < 1:
            texture.scale += dt

    def on_collide(self) -> None:
        """Hand the item to the player and leave the scene."""
        if self.item is None:
            return
        if self.item.texture is not None:
            self.item.texture.scale = 1.0
        player = status.player
        if player is not None and player.inventory is not None:
            player.inventory.add_item(self.item)
        self.should_delete = True
        self.item = None

    def on_removed(self) -> None:
        super().on_removed()
        if self.item is not None:
            if self.item.texture is not None:
                self.item.texture.release()
            self.item = None