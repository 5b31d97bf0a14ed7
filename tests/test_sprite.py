from types import SimpleNamespace

import pygame
import pytest

from surviva.game_status import status
from surviva.geometry import Camera, Point, Rect
from surviva.sprite import Sprite
from surviva.texture_component import TextureComponent
from surviva.textures import TextureManager

RED = pygame.Color(255, 0, 0, 255)


@pytest.fixture(autouse=True)
def clean_status():
    status.reset()
    yield
    status.reset()


def red_image(width=2, height=2):
    image = pygame.Surface((width, height))
    image.fill(RED)
    return image


def use_camera(x, y):
    status.current_scene = SimpleNamespace(camera=Camera(Point(x, y)))


def test_new_sprite_defaults():
    sprite = Sprite()
    assert sprite.position == Point()
    assert sprite.offset == Point()
    assert sprite.should_delete is False
    assert sprite.texture is None


def test_set_position():
    sprite = Sprite()
    sprite.set_position(12.5, -3)
    assert sprite.position == Point(12.5, -3)


def test_scaled_offset_uses_sprite_scale():
    status.scale = 4
    sprite = Sprite()
    sprite.offset = Point(5, 16)
    assert sprite.scaled_offset == Point(5, 16) * 4


def test_screen_pos_subtracts_camera():
    use_camera(10, 10)
    sprite = Sprite()
    sprite.set_position(50, 50)
    assert sprite.screen_pos == Point(40, 40)


def test_screen_pos_without_scene_is_position():
    sprite = Sprite()
    sprite.set_position(7, 8)
    assert sprite.screen_pos == sprite.position


def test_scale_is_texture_size():
    status.scale = 3
    sprite = Sprite()
    sprite.texture = TextureComponent()
    sprite.texture.set_texture(red_image())
    sprite.texture.set_src(Rect(0, 0, 2, 5))
    assert sprite.scale == sprite.texture.size
    assert sprite.scale == Point(2 * 3, 5 * 3)


def test_scale_without_texture_raises():
    with pytest.raises(AttributeError):
        Sprite().scale


def test_render_places_pivot_on_position():
    status.scale = 2
    screen = pygame.Surface((100, 100))
    status.screen = screen
    use_camera(10, 10)
    sprite = Sprite()
    sprite.set_position(50, 50)
    sprite.offset = Point(1, 2)
    sprite.texture = TextureComponent()
    sprite.texture.set_texture(red_image())

    sprite.render()

    corner = sprite.screen_pos - sprite.scaled_offset
    assert screen.get_at((int(corner.x), int(corner.y))) == RED
    assert screen.get_at((int(corner.x) - 1, int(corner.y))) != RED
    assert screen.get_at((int(corner.x) + 3, int(corner.y) + 3)) == RED
    assert screen.get_at((int(corner.x) + 4, int(corner.y))) != RED


def test_render_without_texture_draws_nothing():
    screen = pygame.Surface((20, 20))
    status.screen = screen
    before = pygame.image.tobytes(screen, "RGBA")
    sprite = Sprite()
    sprite.render()
    assert sprite.texture is None
    assert pygame.image.tobytes(screen, "RGBA") == before


def test_update_leaves_sprite_in_place():
    sprite = Sprite()
    sprite.set_position(3, 4)
    sprite.update(0.5)
    assert sprite.position == Point(3, 4)


def test_on_removed_releases_texture():
    textures = TextureManager(lambda path: red_image())
    sprite = Sprite()
    sprite.texture = TextureComponent(textures)
    sprite.texture.set_texture(textures.use("body.png"))
    assert textures.usage("body.png") == 1

    sprite.on_removed()

    assert textures.usage("body.png") == 0
    assert sprite.texture is None