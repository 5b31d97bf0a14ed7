"""A fixed number of item slots with one slot held in hand."""

from __future__ import annotations

from collections.abc import Iterator

from .item import Item


class Inventory:
    """Fixed-size slots, each holding an item or None."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("inventory size must not be negative")
        self._items: list[Item | None] = [None] * size
        self.hand_index = 0

    def add_item(self, item: Item) -> bool:
        """Put ``item`` in the first free slot; return False if all are full."""
        for index, slot in enumerate(self._items):
            if slot is None:
                self._items[index] = item
                return True
        return False

    def __getitem__(self, index: int) -> Item | None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"inventory slot {index} out of range")
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item | None]:
        return iter(self._items)

    @property
    def item_on_hand(self) -> Item | None:
        """The item in the slot selected by ``hand_index``."""
        return self[self.hand_index]