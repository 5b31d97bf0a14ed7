import pygame
import pytest

from surviva.textures import TextureError, TextureManager, load_image


class _FakeLoader:
    def __init__(self):
        self.loaded = []

    def __call__(self, path):
        self.loaded.append(path)
        return object()


def test_use_loads_once_and_shares():
    loader = _FakeLoader()
    mgr = TextureManager(loader)
    a = mgr.use("assets/tree.png")
    b = mgr.use("assets/tree.png")
    assert a is b
    assert loader.loaded == ["assets/tree.png"]
    assert mgr.usage("assets/tree.png") == 2


def test_usage_of_unknown_path_is_zero():
    assert TextureManager(_FakeLoader()).usage("assets/none.png") == 0


def test_unuse_frees_after_last_user():
    loader = _FakeLoader()
    mgr = TextureManager(loader)
    tex = mgr.use("assets/axe.png")
    mgr.use("assets/axe.png")
    mgr.unuse(tex)
    assert mgr.usage("assets/axe.png") == 1
    mgr.unuse(tex)
    assert mgr.usage("assets/axe.png") == 0
    again = mgr.use("assets/axe.png")
    assert again is not tex
    assert len(loader.loaded) == 2


def test_unuse_unknown_or_none_changes_nothing():
    mgr = TextureManager(_FakeLoader())
    mgr.use("assets/wood.png")
    mgr.unuse(None)
    mgr.unuse(object())
    assert mgr.usage("assets/wood.png") == 1


def test_unload_all_frees_everything():
    mgr = TextureManager(_FakeLoader())
    for path in ("a.png", "b.png", "c.png"):
        mgr.use(path)
    mgr.use("a.png")
    mgr.unload_all()
    assert [mgr.usage(p) for p in ("a.png", "b.png", "c.png")] == [0, 0, 0]


def test_loader_returning_none_raises():
    mgr = TextureManager(lambda path: None)
    with pytest.raises(TextureError):
        mgr.use("missing.png")
    assert mgr.usage("missing.png") == 0


def test_load_image_reads_file(tmp_path):
    path = tmp_path / "img.bmp"
    surface = pygame.Surface((7, 5))
    surface.fill((0, 255, 0))
    pygame.image.save(surface, str(path))
    loaded = load_image(str(path))
    assert loaded.get_size() == surface.get_size()
    assert loaded.get_at((3, 2))[:3] == (0, 255, 0)


def test_load_image_missing_file_raises(tmp_path):
    with pytest.raises(TextureError):
        load_image(str(tmp_path / "nope.png"))