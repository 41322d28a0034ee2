"""Fonts and rendered text."""

from __future__ import annotations

import os
from dataclasses import dataclass

import pygame

from core2d.log import Core2DError, err, log, push_error
from core2d.types import Color


@dataclass
class Text:
    """A piece of rendered text and its size."""

    surface: pygame.Surface
    width: float
    height: float


class TextFont:
    """A TrueType font at a fixed point size.

    ``path`` may be None to use the default font.
    """

    def __init__(self, path: str | os.PathLike | None, size: int) -> None:
        self.path = None if path is None else os.fspath(path)
        self.size = size
        log(f"Loading font '{self.path}'...")
        if not pygame.font.get_init():
            pygame.font.init()
        try:
            self._font = pygame.font.Font(self.path, size)
        except (pygame.error, OSError) as exc:
            message = f"Failed to load font: {self.path}"
            err(message)
            push_error(message)
            log(f"Error message: {exc}")
            raise Core2DError(message) from exc

    def render(self, text: str, color: Color, blend: bool = False) -> Text:
        """Render ``text``; ``blend`` selects anti-aliased output."""
        try:
            surface = self._font.render(text, blend, color.as_tuple())
        except pygame.error as exc:
            message = f"Failed to render text '{text}'."
            err(message)
            push_error(message)
            log(f"Error message: {exc}")
            raise Core2DError(message) from exc
        return Text(surface, surface.get_width(), surface.get_height())