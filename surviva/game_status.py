"""Global game state shared between scenes and sprites."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any


@dataclass
class GameStatus:
    """The screen, current scene, player, sprite scale and flags of the game.

    ``hovering`` holds the sprite that is currently under the mouse cursor.
    """

    screen: Any = None
    current_scene: Any = None
    player: Any = None
    scale: int = 1
    debug: bool = False
    should_close: bool = False
    hovering: Any = None

    def change_scene(self, scene: Any) -> None:
        """Close the current scene and make ``scene`` the current one."""
        if self.current_scene is not None:
            self.current_scene.close()
        self.current_scene = scene

    def reset(self) -> None:
        """Restore every field to its default value."""
        for f in fields(self):
            setattr(self, f.name, f.default)


status = GameStatus()