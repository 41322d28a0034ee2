import pytest

from core2d.demo import main, step_lines
from core2d.types import Vector2f


def test_step_lines_clips_at_crossing():
    end = step_lines(
        Vector2f(0.0, 0.0), Vector2f(100.0, 50.0), Vector2f(60.0, 100.0), Vector2f(60.0, 0.0)
    )
    assert end.x == pytest.approx(60.0)
    assert end.y == pytest.approx(30.0)


def test_step_lines_keeps_end_without_crossing():
    end1 = Vector2f(100.0, 50.0)
    end = step_lines(Vector2f(0.0, 0.0), end1, Vector2f(200.0, 100.0), Vector2f(200.0, 0.0))
    assert end == end1


def test_crossing_point_lies_on_second_line():
    end = step_lines(
        Vector2f(0.0, 0.0), Vector2f(100.0, 50.0), Vector2f(40.0, 100.0), Vector2f(40.0, 0.0)
    )
    assert end.x == pytest.approx(40.0)


def test_main_runs_given_frames(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    assert main(["--frames", "2"]) == 0