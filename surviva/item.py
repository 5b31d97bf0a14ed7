"""Items that can be carried in an inventory: materials and tools."""

from __future__ import annotations

from enum import Enum, auto

from .geometry import Point
from .texture_component import TextureComponent


class ItemType(Enum):
    """The kind of an item."""

    MATERIAL = auto()
    AXE = auto()


def _textured(path: str) -> TextureComponent:
    component = TextureComponent()
    component.set_texture(component.manager.use(path))
    return component


class Item:
    """Something with a name and description that may be drawn on a body."""

    def __init__(self, name: str, description: str, item_type: ItemType) -> None:
        self.name = name
        self.description = description
        self.item_type = item_type
        self.texture: TextureComponent | None = None
        self.times_used = 0

    def on_use(self) -> None:
        """React to being used; plain items only count the use."""
        self.times_used += 1

    def render_on_body(self, position: Point) -> None:
        """Draw the item held at ``position``, a body's screen position."""
        if self.texture is None:
            return
        pos = Point(position.x + 10, position.y - self.texture.size.y)
        self.texture.render(pos, Point())


class Tool(Item):
    """An item that deals damage and wears out."""

    def __init__(self, name: str, description: str, item_type: ItemType) -> None:
        super().__init__(name, description, item_type)
        self.damage = 0
        self.max_durability = 100
        self.durability = self.max_durability


class IronAxe(Tool):
    """An axe that fells trees."""

    def __init__(self) -> None:
        super().__init__("Axe", "An Axe", ItemType.AXE)
        self.texture = _textured("assets/axe.png")
        self.damage = 20


class Wood(Item):
    """A piece of wood dropped by a felled tree."""

    def __init__(self) -> None:
        super().__init__("Wood", "A Wood", ItemType.MATERIAL)
        self.texture = _textured("assets/wood.png")