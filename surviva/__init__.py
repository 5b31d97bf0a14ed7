"""A small top-down survival game built on pygame: sprites, items, an inventory and scenes."""

__version__ = "0.1.0"