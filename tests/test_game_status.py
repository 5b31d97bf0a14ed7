import pytest

from surviva.game_status import GameStatus, status


class _RecordingScene:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


@pytest.fixture(autouse=True)
def _clean_status():
    status.reset()
    yield
    status.reset()


def test_change_scene_closes_previous():
    gs = GameStatus()
    first, second = _RecordingScene(), _RecordingScene()
    gs.current_scene = first
    gs.change_scene(second)
    assert first.closed
    assert not second.closed
    assert gs.current_scene is second


def test_change_scene_from_empty():
    gs = GameStatus()
    scene = _RecordingScene()
    gs.change_scene(scene)
    assert gs.current_scene is scene
    assert not scene.closed


def test_reset_restores_defaults():
    gs = GameStatus()
    fresh = GameStatus()
    gs.scale = 4
    gs.debug = True
    gs.should_close = True
    gs.player = object()
    gs.hovering = object()
    gs.reset()
    assert gs == fresh


def test_defaults():
    gs = GameStatus()
    assert gs.hovering is None
    assert gs.current_scene is None
    assert gs.debug is False
    assert gs.should_close is False


def test_shared_status_is_mutable_and_resettable():
    status.debug = not status.debug
    assert status.debug is True
    status.reset()
    assert status == GameStatus()