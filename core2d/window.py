"""The window, its event loop state and camera-aware drawing."""

from __future__ import annotations

import pygame

from core2d.camera import Camera, CameraView
from core2d.input import KeyboardState
from core2d.log import Core2DError, err, log, push_error
from core2d.texture import Spritesheet, Texture
from core2d.text import Text
from core2d.timing import DeltaClock
from core2d.types import Circle, Color, Rectangle, Vector2f


def _fail(message: str, exc: BaseException | None = None) -> Core2DError:
    err(message)
    push_error(message)
    if exc is not None:
        log(f"Error message: {exc}")
    return Core2DError(message)


class Window:
    """A display window with a default camera, keyboard state and frame clock."""

    def __init__(self, title: str, width: int, height: int, fps: int = 60) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")

        log("Initializing SDL...")
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise _fail("Failed to initialize SDL! Abort.", exc) from exc

        log("Creating window...")
        try:
            self.surface = pygame.display.set_mode((width, height))
        except pygame.error as exc:
            raise _fail("Failed to initialize window! Abort.", exc) from exc
        pygame.display.set_caption(title)

        log("Finalizing window...")
        self.fps = fps
        self.event = pygame.event.Event(pygame.NOEVENT)
        self.keyboard = KeyboardState()

        log("Initializing default camera...")
        self.view = CameraView(Camera())
        self.clock = DeltaClock()
        self._destroyed = False

    def __enter__(self) -> Window:
        return self

    def __exit__(self, *exc_info) -> None:
        self.destroy()

    # events

    def fetch_events(self) -> bool:
        """Refresh keyboard state and take one event; False if none was waiting."""
        self.keyboard.update(pygame.key.get_pressed())
        self.event = pygame.event.poll()
        return self.event.type != pygame.NOEVENT

    def is_event(self, event_type: int) -> bool:
        return self.event.type == event_type

    # helpers

    def _dest_rect(self, x: float, y: float, w: float, h: float) -> pygame.Rect:
        pos = self.view.relative_position(x, y)
        size = self.view.relative_size(w, h)
        return pygame.Rect(int(pos.x), int(pos.y), int(size.x), int(size.y))

    @staticmethod
    def _cut(texture: Texture, cutout: Rectangle) -> pygame.Surface | None:
        src = pygame.Rect(
            int(cutout.x), int(cutout.y), int(cutout.width), int(cutout.height)
        ).clip(texture.surface.get_rect())
        if src.width <= 0 or src.height <= 0:
            return None
        return texture.surface.subsurface(src)

    def _blit_scaled(self, image: pygame.Surface, dest: pygame.Rect) -> None:
        if dest.width <= 0 or dest.height <= 0:
            return
        self.surface.blit(pygame.transform.scale(image, dest.size), dest.topleft)

    # drawing

    def fill(self, color: Color) -> None:
        """Clear the window; raises if no camera is set."""
        self.surface.fill(color.as_tuple())
        if self.view.camera is None:
            message = "No camera found, Aborting to avoid worst-case-scenarios."
            err(message)
            push_error(message)
            self.destroy()
            raise Core2DError(message)

    def fill_rect(self, rec: Rectangle, color: Color) -> None:
        dest = self._dest_rect(rec.x, rec.y, rec.width, rec.height)
        pygame.draw.rect(self.surface, color.as_tuple(), dest)

    def lines_rect(self, rec: Rectangle, color: Color) -> None:
        dest = self._dest_rect(rec.x, rec.y, rec.width, rec.height)
        pygame.draw.rect(self.surface, color.as_tuple(), dest, width=1)

    def fill_circle(self, circle: Circle, color: Color) -> None:
        pos = self.view.relative_position(circle.x, circle.y)
        radius = self.view.relative_size(circle.radius, 0).x
        rgba = color.as_tuple()
        for dy in range(int(-radius), int(radius) + 1):
            dx = int((radius * radius - dy * dy) ** 0.5)
            row = int(pos.y + dy)
            pygame.draw.line(
                self.surface, rgba, (int(pos.x - dx), row), (int(pos.x + dx), row)
            )

    def draw_point(self, x: float, y: float, color: Color) -> None:
        pos = self.view.relative_position(x, y)
        self.surface.set_at((int(pos.x), int(pos.y)), color.as_tuple())

    def draw_line(self, start: Vector2f, end: Vector2f, color: Color) -> None:
        a = self.view.relative_position(start.x, start.y)
        b = self.view.relative_position(end.x, end.y)
        pygame.draw.line(
            self.surface, color.as_tuple(), (int(a.x), int(a.y)), (int(b.x), int(b.y))
        )

    def draw_texture(self, x: float, y: float, texture: Texture | None) -> None:
        if texture is None:
            return
        self._blit_scaled(
            texture.surface, self._dest_rect(x, y, texture.width, texture.height)
        )

    def draw_texture_ex(
        self, pos: Vector2f, texture: Texture | None, cutout: Rectangle
    ) -> None:
        if texture is None:
            return
        image = self._cut(texture, cutout)
        if image is None:
            return
        self._blit_scaled(
            image, self._dest_rect(pos.x, pos.y, texture.width, texture.height)
        )

    def draw_texture_pro(
        self,
        pos: Vector2f,
        texture: Texture | None,
        cutout: Rectangle,
        origin: Vector2f,
        angle: int = 0,
        flip_x: bool = False,
        flip_y: bool = False,
    ) -> None:
        """Draw a cutout rotated clockwise by ``angle`` degrees about ``origin``.

        ``origin`` is relative to the destination's top-left corner.
        """
        if texture is None:
            return
        image = self._cut(texture, cutout)
        dest = self._dest_rect(pos.x, pos.y, texture.width, texture.height)
        if image is None or dest.width <= 0 or dest.height <= 0:
            return
        image = pygame.transform.scale(image, dest.size)
        if flip_x or flip_y:
            image = pygame.transform.flip(image, flip_x, flip_y)
        if not angle:
            self.surface.blit(image, dest.topleft)
            return
        pivot = pygame.math.Vector2(dest.x + int(origin.x), dest.y + int(origin.y))
        offset = pygame.math.Vector2(dest.center) - pivot
        center = pivot + offset.rotate(angle)
        rotated = pygame.transform.rotate(image, -angle)
        self.surface.blit(
            rotated, rotated.get_rect(center=(round(center.x), round(center.y)))
        )

    def draw_spritesheet(self, x: float, y: float, sheet: Spritesheet) -> None:
        self.draw_texture_ex(Vector2f(x, y), sheet.texture, sheet.cutout())

    def draw_text(self, text: Text, x: float, y: float) -> None:
        self._blit_scaled(text.surface, self._dest_rect(x, y, text.width, text.height))

    def show(self) -> None:
        """Present the frame and wait one frame period."""
        pygame.display.flip()
        pygame.time.delay(1000 // self.fps)

    def destroy(self) -> None:
        """Drop the camera and close the window."""
        if self._destroyed:
            return
        self._destroyed = True
        if self.view.camera is not None:
            log("Destroying camera...")
            self.view.free_camera()
        log("Destroying renderer...")
        log("Destroying window...")
        pygame.display.quit()