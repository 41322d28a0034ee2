"""Sound effects and streamed music."""

from __future__ import annotations

import os

import pygame

from core2d.log import Core2DError, err, log
from core2d.types import NEAREST_AVAILABLE_CHANNEL


def initialize_sfx(
    frequency: int = 44100, size: int = -16, channels: int = 2, buffer: int = 2048
) -> None:
    """Open the audio device."""
    try:
        pygame.mixer.init(frequency, size, channels, buffer)
    except pygame.error as exc:
        err("Failed to open audio device.")
        raise Core2DError(f"Failed to open audio device: {exc}") from exc


class Sound:
    """A short sound effect held in memory."""

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = os.fspath(path)
        log(f"Loading sound '{self.path}'...")
        try:
            self._sound = pygame.mixer.Sound(self.path)
        except (pygame.error, OSError) as exc:
            err(f"Failed to load chunk '{self.path}'.")
            log(f"Error message: {exc}")
            raise Core2DError(f"Failed to load chunk '{self.path}'.") from exc

    def play(self, channel: int = NEAREST_AVAILABLE_CHANNEL, loops: int = 0) -> None:
        """Play on ``channel``, or the first free one when it is -1."""
        if channel == NEAREST_AVAILABLE_CHANNEL:
            self._sound.play(loops)
        else:
            pygame.mixer.Channel(channel).play(self._sound, loops)


class Music:
    """A music file streamed from disk."""

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = os.fspath(path)
        log(f"Loading music '{self.path}'...")
        try:
            pygame.mixer.music.load(self.path)
        except (pygame.error, OSError) as exc:
            err(f"Failed to load music '{self.path}'.")
            log(f"Error message: {exc}")
            raise Core2DError(f"Failed to load music '{self.path}'.") from exc

    def play(self, loops: int = 0) -> None:
        """Start playing; ``loops`` of -1 repeats forever."""
        pygame.mixer.music.load(self.path)
        pygame.mixer.music.play(loops)


def playing_music() -> bool:
    """True while music is playing."""
    if pygame.mixer.get_init() is None:
        return False
    return bool(pygame.mixer.music.get_busy())


def pause_music() -> None:
    if pygame.mixer.get_init() is not None:
        pygame.mixer.music.pause()


def resume_music() -> None:
    if pygame.mixer.get_init() is not None:
        pygame.mixer.music.unpause()