from core2d.camera import Camera, CameraView
from core2d.types import Vector2f


def test_no_camera_returns_input():
    view = CameraView()
    assert view.relative_position(12.0, -3.0) == Vector2f(12.0, -3.0)
    assert view.relative_size(7.0, 8.0) == Vector2f(7.0, 8.0)


def test_default_camera_is_identity():
    view = CameraView(Camera())
    assert view.relative_position(12.0, 30.0) == Vector2f(12.0, 30.0)
    assert view.relative_size(5.0, 6.0) == Vector2f(5.0, 6.0)


def test_camera_target_maps_to_origin():
    view = CameraView(Camera(target_x=10, target_y=20, zoom=2.0))
    assert view.relative_position(10.0, 20.0) == Vector2f(0.0, 0.0)


def test_zoom_scales_size():
    view = CameraView(Camera(zoom=2.0))
    assert view.relative_size(3.0, 4.0) == Vector2f(3.0 * 2.0, 4.0 * 2.0)


def test_disable_and_enable():
    view = CameraView(Camera(target_x=5, target_y=5, zoom=3.0))
    view.disable()
    assert view.relative_position(1.0, 2.0) == Vector2f(1.0, 2.0)
    assert view.relative_size(1.0, 2.0) == Vector2f(1.0, 2.0)
    view.enable()
    assert view.relative_position(5.0, 5.0) == Vector2f(0.0, 0.0)


def test_set_and_free_camera():
    view = CameraView(Camera())
    new_cam = Camera(target_x=1, target_y=1, zoom=1.0)
    view.set_camera(new_cam)
    assert view.camera is new_cam
    view.free_camera()
    assert view.camera is None
    assert view.relative_position(9.0, 9.0) == Vector2f(9.0, 9.0)