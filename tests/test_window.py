import struct

import pygame
import pytest

from mintengine.window import Window, WindowConfig


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    path = tmp_path / "AppData.bin"
    WindowConfig(title="Mint", width=64, height=48, style=7, framerate_limit=60).serialize(path)
    yield path
    pygame.display.quit()


def test_config_round_trip(tmp_path):
    path = tmp_path / "AppData.bin"
    original = WindowConfig(
        title="Main Menu", width=1920, height=1080, style=7, framerate_limit=60, vsync=True
    )
    original.serialize(path)
    loaded = WindowConfig()
    loaded.deserialize(path)
    assert loaded == original


def test_config_layout(tmp_path):
    path = tmp_path / "AppData.bin"
    WindowConfig(title="Mint", width=64, height=48).serialize(path)
    data = path.read_bytes()
    assert struct.unpack("<Q", data[:8]) == (len("Mint"),)
    assert data[8:12] == b"Mint"
    assert len(data) == 29


def test_config_truncated(tmp_path):
    path = tmp_path / "AppData.bin"
    WindowConfig(title="Mint", width=64, height=48).serialize(path)
    path.write_bytes(path.read_bytes()[:-3])
    with pytest.raises(ValueError):
        WindowConfig().deserialize(path)


def test_config_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        WindowConfig().deserialize(tmp_path / "absent.bin")


def test_config_out_of_range(tmp_path):
    with pytest.raises(ValueError):
        WindowConfig(width=-1).serialize(tmp_path / "AppData.bin")


def test_window_opens_with_config(config_file):
    window = Window(config_file)
    assert window.is_open is True
    assert window.surface.get_size() == (64, 48)
    assert pygame.display.get_caption()[0] == "Mint"
    window.close()


def test_window_draw_passes_surface(config_file):
    class Recorder:
        def __init__(self):
            self.target = None

        def draw(self, surface):
            self.target = surface
            return "drawn"

    recorder = Recorder()
    with Window(config_file) as window:
        window.clear()
        assert window.draw(recorder) == "drawn"
        assert recorder.target is window.surface
        window.display()
        assert isinstance(window.poll_events(), list)


def test_window_close(config_file):
    window = Window(config_file)
    window.close()
    assert window.is_open is False
    assert window.poll_events() == []
    assert window.draw(object()) is None


def test_window_without_config_is_closed():
    window = Window()
    assert window.is_open is False
    assert window.poll_events() == []