# surviva

A small top-down survival game. You walk a character around a field and chop a
tree with an iron axe. A felled tree drops wood, which you pick up by walking over it.

## Installing

```
pip install .
```

This installs `pygame`, which opens the window and draws everything.

## Playing

```
surviva
```

The window is 800×600 and can be resized. It opens on a demo scene
(`surviva.app.DemoScene`) that holds the player, a training dummy, a tree and an iron
axe lying on the ground. Close the window to quit. The command exits with status 1
if the window cannot be opened or an image cannot be loaded.

Controls:

| Key / button     | Action                                           |
|------------------|--------------------------------------------------|
| `W` `A` `S` `D`  | Walk. Diagonal movement is slowed to match.      |
| Left `Shift`     | Walk at half speed                               |
| Left click       | Click the dummy or the tree under the cursor     |

- Walk over the axe to pick it up. It goes into the first free slot of your
  24-slot inventory. The item in slot 0 is the one held in hand, and it is drawn
  beside the player.
- Left-click the tree while you hold the axe to chop it. Each hit costs the tree 20
  of its 100 hit points and changes its picture. When its hit points run out, the
  tree is removed and drops wood.
- Left-click the dummy to toggle debug mode. Debug mode draws collision boxes in
  red, click boxes in green and each sprite's anchor point in white.
- When the player runs into something solid, it steps back to where it stood
  before the move.

Sprites are drawn in order of their vertical position, so things lower on the
screen appear in front. The camera keeps the player in the middle of the window.

## Assets

Images are loaded from an `assets/` directory in the current working directory:
`player.png`, `dummy.png`, `tree.png`, `axe.png` and `wood.png`. They are not
installed with the package, so provide them yourself. Every sprite is drawn at four
times its pixel size with nearest-neighbour scaling. `surviva.textures.TextureManager`
loads each path only once and frees it when its last user releases it.

## Using the pieces

You can import the game's building blocks on their own:

- `surviva.geometry`: `Point`, `Rect` (`contains`, `intersects`, `scaled`), `Camera`
  and `distance`
- `surviva.game_status`: `GameStatus` and the shared `status` instance (screen,
  current scene, player, sprite scale, debug and close flags, hovered sprite)
- `surviva.textures`: `TextureManager`, `load_image` and `TextureError`
- `surviva.texture_component`: `TextureComponent`, which draws a region of a texture
- `surviva.item`: `Item`, `Tool`, `IronAxe`, `Wood` and `ItemType`
- `surviva.inventory`: `Inventory`, a fixed number of item slots
- `surviva.sprite`: `Sprite`, the base of everything in a scene
- `surviva.behaviors`: the `Clickable` and `Collidable` mix-ins
- `surviva.entities`: `Entity`, `Player`, `Dummy`, `Tree` and `ItemEntity`
- `surviva.scene`: `Scene`, and `TopView`, which sorts sprites by y and checks
  collisions

```python
from surviva.inventory import Inventory
from surviva.geometry import Rect, Point, distance

bag = Inventory(3)
len(bag)                                    # 3
bag.add_item(...)                           # fills the first free slot; False when full
Rect(0, 0, 10, 10).contains(Point(5, 5))    # True
distance(Point(0, 0), Point(3, 4))          # 5.0
```

A `TextureManager` takes any loader function, so you can use it without image files:

```python
from surviva.textures import TextureManager

textures = TextureManager(lambda path: object())
tex = textures.use("a.png")
textures.use("a.png") is tex     # True
textures.usage("a.png")          # 2
```

## What it does not do

There is one fixed demo scene. The game cannot save or load, has no menus, no
game-over, no crafting, and no way to select a different inventory slot as the one
held in hand. Items and tools do not wear out in play.

## Running the tests

```
pip install ".[test]"
pytest
```