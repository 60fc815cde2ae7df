import os

import pygame
import pytest

from spaceinvaders.graphics import Color, Graphics
from spaceinvaders.text_renderer import FontLoadError, TextRenderer

WHITE = Color(255, 255, 255)


class RecordingGraphics:
    def __init__(self):
        self.calls = []

    def draw_rect(self, rect, color, filled=True):
        self.calls.append(("rect", rect, color, filled))

    def draw_line(self, x1, y1, x2, y2, color):
        self.calls.append(("line", (x1, y1, x2, y2), color))


def default_font_path():
    return os.path.join(os.path.dirname(pygame.__file__), pygame.font.get_default_font())


@pytest.fixture
def renderer():
    return TextRenderer(RecordingGraphics())


def test_fallback_size_of_empty_text(renderer):
    assert renderer.text_size("") == (0.0, 20.0)


def test_fallback_width_grows_linearly(renderer):
    one = renderer.text_size("A")
    two = renderer.text_size("AB")
    assert two[0] == 2 * one[0]
    assert two[1] == one[1]


def test_uppercase_draws_outline_and_bar(renderer):
    renderer.draw_text("A", 100.0, 50.0, WHITE, centered=False)
    calls = renderer.graphics.calls
    assert [c[0] for c in calls] == ["rect", "line"]
    rect = calls[0][1]
    assert (rect.x, rect.y) == (100.0, 50.0)
    assert calls[0][3] is False
    x1, y1, x2, y2 = calls[1][1]
    assert y1 == y2 == rect.y + rect.h / 2
    assert (x1, x2) == (rect.x, rect.x + rect.w)


def test_lowercase_draws_shorter_outline(renderer):
    renderer.draw_text("a", 0.0, 0.0, WHITE, centered=False)
    (kind, rect, _color, filled), = renderer.graphics.calls
    assert kind == "rect"
    assert filled is False
    assert rect.y > 0.0
    assert rect.y + rect.h == renderer.text_size("a")[1]


def test_digit_draws_full_outline(renderer):
    renderer.draw_text("7", 10.0, 20.0, WHITE, centered=False)
    (kind, rect, _color, filled), = renderer.graphics.calls
    assert kind == "rect"
    assert filled is False
    assert (rect.x, rect.y) == (10.0, 20.0)


def test_space_draws_nothing(renderer):
    renderer.draw_text("   ", 10.0, 20.0, WHITE)
    assert renderer.graphics.calls == []


def test_other_char_draws_filled_box(renderer):
    renderer.draw_text("!", 0.0, 0.0, WHITE, centered=False)
    (kind, rect, color, filled), = renderer.graphics.calls
    assert kind == "rect"
    assert filled is True
    assert color == WHITE
    assert rect.x > 0.0 and rect.y > 0.0


def test_centered_fallback_starts_half_width_left(renderer):
    text = "SCORE"
    renderer.draw_text(text, 400.0, 20.0, WHITE, centered=True)
    width, height = renderer.text_size(text)
    first = renderer.graphics.calls[0][1]
    assert first.x == 400.0 - width / 2
    assert first.y == 20.0 - height / 2


def test_fallback_characters_advance_left_to_right(renderer):
    renderer.draw_text("ABC", 0.0, 0.0, WHITE, centered=False)
    xs = [c[1].x for c in renderer.graphics.calls if c[0] == "rect"]
    assert xs == sorted(xs)
    assert len(set(xs)) == 3


def test_missing_font_raises_and_falls_back(renderer, tmp_path):
    with pytest.raises(FontLoadError):
        renderer.load_font(tmp_path / "missing.ttf", 24)
    assert renderer.font is None
    renderer.draw_text("A", 0.0, 0.0, WHITE)
    assert renderer.graphics.calls


def test_real_font_draws_centred_pixels():
    surface = pygame.Surface((200, 100), pygame.SRCALPHA)
    surface.fill((0, 0, 0, 0))
    renderer = TextRenderer(Graphics(surface))
    renderer.load_font(default_font_path(), 24)
    width, height = renderer.text_size("HI")
    assert width > 0 and height > 0
    renderer.draw_text("HI", 100.0, 50.0, WHITE, centered=True)
    drawn = surface.get_bounding_rect()
    assert drawn.width > 0 and drawn.height > 0
    assert abs(drawn.centerx - 100) <= 4
    assert abs(drawn.centery - 50) <= 8


def test_real_font_size_differs_from_fallback(renderer):
    fallback = renderer.text_size("WWWW")
    renderer.load_font(default_font_path(), 48)
    assert renderer.text_size("WWWW") != fallback
    assert renderer.text_size("WWWW")[0] > renderer.text_size("W")[0]