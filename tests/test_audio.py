import pygame
import pytest

from core2d.audio import Music, Sound, pause_music, playing_music, resume_music
from core2d.log import Core2DError


@pytest.fixture(autouse=True)
def no_mixer():
    pygame.mixer.quit()
    yield
    pygame.mixer.quit()


def test_missing_sound_raises(tmp_path, capsys):
    with pytest.raises(Core2DError):
        Sound(tmp_path / "missing.wav")
    assert "[ERROR] Failed to load chunk" in capsys.readouterr().out


def test_missing_music_raises(tmp_path, capsys):
    with pytest.raises(Core2DError):
        Music(tmp_path / "missing.ogg")
    assert "[ERROR] Failed to load music" in capsys.readouterr().out


def test_no_music_without_mixer():
    assert playing_music() is False


def test_pause_and_resume_without_mixer_leave_nothing_playing():
    pause_music()
    resume_music()
    assert playing_music() is False