from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pygame
import pytest

from termsnake.config import Config
from termsnake.display import CursesDisplay, Display, DisplayTooSmall, open_display
from termsnake.window import PygameDisplay, translate_key, window_size


class TestTranslateKey:
    @pytest.mark.parametrize("key, name", [
        (pygame.K_UP, "up"),
        (pygame.K_DOWN, "down"),
        (pygame.K_LEFT, "left"),
        (pygame.K_RIGHT, "right"),
    ])
    def test_arrows(self, key, name):
        assert translate_key(key, "") == name

    def test_characters(self):
        assert translate_key(pygame.K_q, "q") == "q"

    def test_unprintable(self):
        assert translate_key(pygame.K_ESCAPE, "\x1b") == "unknown"
        assert translate_key(pygame.K_LSHIFT, "") == "unknown"


def test_window_size():
    assert window_size(32, 16) == (640, 16 * 20 + 28)


def test_open_display_pygame_backend():
    display = open_display(Config(backend="pygame"))
    assert isinstance(display, PygameDisplay)


def fake_pygame(desktop=(1920, 1080)):
    mod = MagicMock()
    for name in ("QUIT", "KEYDOWN", "NOEVENT", "MOUSEMOTION"):
        setattr(mod, name, getattr(pygame, name))
    mod.display.Info.return_value = SimpleNamespace(current_w=desktop[0], current_h=desktop[1])
    return mod


def event(kind, key=0, unicode=""):
    return SimpleNamespace(type=kind, key=key, unicode=unicode)


class TestPygameDisplay:
    def test_small_desktop_raises_in_pixels_and_releases(self):
        mod = fake_pygame(desktop=(320, 200))
        with patch("termsnake.window.pygame", mod):
            with pytest.raises(DisplayTooSmall) as info:
                with PygameDisplay(32, 16):
                    pytest.fail("should not get here")
        assert info.value.required == window_size(32, 16)
        assert info.value.actual == (320, 200)
        assert info.value.unit == "pixels"
        mod.display.set_mode.assert_not_called()
        mod.quit.assert_called_once()

    def test_unknown_desktop_size_is_not_checked(self):
        mod = fake_pygame(desktop=(-1, -1))
        with patch("termsnake.window.pygame", mod):
            with PygameDisplay(32, 16):
                mod.display.set_mode.assert_called_once_with(window_size(32, 16))
            mod.quit.assert_called_once()

    def test_poll_key_times_out(self):
        mod = fake_pygame()
        mod.event.wait.return_value = event(pygame.NOEVENT)
        with patch("termsnake.window.pygame", mod):
            with PygameDisplay(32, 16) as display:
                assert display.poll_key(50) is None
        (waited,), _ = mod.event.wait.call_args
        assert 0 < waited <= 50

    def test_poll_key_blocks_until_keydown(self):
        mod = fake_pygame()
        mod.event.wait.side_effect = [
            event(pygame.MOUSEMOTION),
            event(pygame.KEYDOWN, key=pygame.K_LEFT),
        ]
        with patch("termsnake.window.pygame", mod):
            with PygameDisplay(32, 16) as display:
                assert display.poll_key(None) == "left"
        assert mod.event.wait.call_count == 2
        for call in mod.event.wait.call_args_list:
            assert call.args == ()

    def test_zero_timeout_reads_only_queued_events(self):
        mod = fake_pygame()
        mod.event.poll.side_effect = [
            event(pygame.MOUSEMOTION),
            event(pygame.KEYDOWN, key=pygame.K_q, unicode="q"),
            event(pygame.NOEVENT),
        ]
        with patch("termsnake.window.pygame", mod):
            with PygameDisplay(32, 16) as display:
                assert display.poll_key(0) == "q"
                assert display.poll_key(0) is None
        mod.event.wait.assert_not_called()

    def test_window_close_exits(self):
        mod = fake_pygame()
        mod.event.wait.return_value = event(pygame.QUIT)
        with patch("termsnake.window.pygame", mod):
            with PygameDisplay(32, 16) as display:
                with pytest.raises(SystemExit):
                    display.poll_key(None)

    def test_flush_input_clears_pending_keys(self):
        mod = fake_pygame()
        with patch("termsnake.window.pygame", mod):
            with PygameDisplay(32, 16) as display:
                display.flush_input()
        mod.event.clear.assert_called_once_with(pygame.KEYDOWN)


@pytest.mark.parametrize("cls", [CursesDisplay, PygameDisplay])
def test_displays_provide_every_protocol_member(cls):
    for name in ("__enter__", "__exit__", "poll_key", "flush_input", "render"):
        assert name in Display.__dict__
        assert callable(getattr(cls, name))
