import pytest

from core2d.log import Core2DError, get_core_error
from core2d.text import Text, TextFont
from core2d.types import RED, WHITE


@pytest.fixture
def font():
    return TextFont(None, 24)


def test_render_size_matches_surface(font):
    text = font.render("hello", WHITE)
    assert isinstance(text, Text)
    assert text.width == text.surface.get_width()
    assert text.height == text.surface.get_height()
    assert text.width > 0


def test_longer_text_is_wider(font):
    short = font.render("hi", RED)
    long = font.render("hi there, world", RED)
    assert long.width > short.width


def test_blended_and_solid_have_same_size(font):
    solid = font.render("sample", WHITE, blend=False)
    blended = font.render("sample", WHITE, blend=True)
    assert (solid.width, solid.height) == (blended.width, blended.height)


def test_missing_font_raises_and_records_error(tmp_path):
    path = str(tmp_path / "nope.ttf")
    with pytest.raises(Core2DError):
        TextFont(path, 12)
    assert get_core_error() == f"Failed to load font: {path}"