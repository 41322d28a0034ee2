"""Plain value types: colours, shapes and vectors."""

from __future__ import annotations

from dataclasses import dataclass

INF_LOOP = -1
NEAREST_AVAILABLE_CHANNEL = -1


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


@dataclass
class Rectangle:
    x: float
    y: float
    width: float
    height: float

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)


@dataclass
class Circle:
    x: float
    y: float
    radius: float


@dataclass
class Vector2i:
    x: int = 0
    y: int = 0


@dataclass
class Vector2f:
    x: float = 0.0
    y: float = 0.0


RED = Color(255, 0, 0, 255)
GREEN = Color(0, 255, 0, 255)
BLUE = Color(0, 0, 255, 255)
YELLOW = Color(255, 255, 0, 255)
PURPLE = Color(128, 0, 128, 255)
PINK = Color(255, 192, 203, 255)
BLACK = Color(0, 0, 0, 255)
WHITE = Color(255, 255, 255, 255)
BROWN = Color(139, 69, 19, 255)
ORANGE = Color(255, 165, 0, 255)
CYAN = Color(0, 255, 255, 255)
MAGENTA = Color(255, 0, 255, 255)
GRAY = Color(128, 128, 128, 255)