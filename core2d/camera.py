"""A 2D camera and the view that maps world coordinates through it."""

from __future__ import annotations

from dataclasses import dataclass

from core2d.types import Vector2f


@dataclass
class Camera:
    """A camera looking at a target point with a zoom factor."""

    target_x: int = 0
    target_y: int = 0
    zoom: float = 1.0


class CameraView:
    """Holds the active camera and whether it is applied."""

    def __init__(self, camera: Camera | None = None, enabled: bool = True) -> None:
        self.camera = camera
        self.enabled = enabled

    def _active(self) -> Camera | None:
        return self.camera if self.enabled else None

    def relative_position(self, x: float, y: float) -> Vector2f:
        """Map a world position to screen space; unchanged without a camera."""
        cam = self._active()
        if cam is None:
            return Vector2f(x, y)
        return Vector2f((x - cam.target_x) * cam.zoom, (y - cam.target_y) * cam.zoom)

    def relative_size(self, w: float, h: float) -> Vector2f:
        """Scale a size by the camera zoom; unchanged without a camera."""
        cam = self._active()
        if cam is None:
            return Vector2f(w, h)
        return Vector2f(w * cam.zoom, h * cam.zoom)

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    def set_camera(self, camera: Camera) -> None:
        """Replace the current camera."""
        self.free_camera()
        self.camera = camera

    def free_camera(self) -> None:
        """Drop the current camera."""
        self.camera = None