"""Image textures and spritesheets."""

from __future__ import annotations

import itertools
import os
from dataclasses import dataclass, field

import pygame

from core2d.log import Core2DError, log
from core2d.types import Rectangle

_texture_ids = itertools.count(1)


@dataclass
class Texture:
    """An image drawn at a given width and height."""

    surface: pygame.Surface
    width: float
    height: float
    id: int = field(default_factory=lambda: next(_texture_ids))

    @classmethod
    def load(cls, path: str | os.PathLike, width: float, height: float) -> Texture:
        """Load an image file (PNG, JPEG, BMP, ...) as a texture."""
        path = os.fspath(path)
        log(f"Loading texture '{path}'...")
        try:
            surface = pygame.image.load(path)
        except (pygame.error, OSError) as exc:
            log(f"Unable to load texture '{path}'...")
            log(f"Error message: {exc}")
            raise Core2DError(f"Unable to load texture '{path}'") from exc
        return cls(surface, width, height)

    @classmethod
    def from_surface(cls, surface: pygame.Surface, width: float, height: float) -> Texture:
        """Wrap an existing surface as a texture."""
        return cls(surface, width, height)

    def rectangle(self) -> Rectangle:
        """The texture's full area at the origin."""
        return Rectangle(0, 0, self.width, self.height)


@dataclass
class Spritesheet:
    """A texture cut into equal frames, addressed by row and column."""

    texture: Texture
    frame_width: int
    frame_height: int
    row: int = 0
    col: int = 0

    def cutout(self) -> Rectangle:
        """The source rectangle of the current frame."""
        return Rectangle(
            self.frame_width * self.col,
            self.frame_height * self.row,
            self.frame_width,
            self.frame_height,
        )