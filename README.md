# core2d

A small toolkit for 2D games built on pygame. It gives you a window with
camera-aware drawing, textures and spritesheets, rendered text, sound and
music, countdown timers, keyboard edge detection, simple file helpers and a
handful of math and collision functions.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## A first window

```python
import pygame

from core2d.types import RED, WHITE, Rectangle
from core2d.window import Window

with Window("Example", 640, 480, 60) as win:
    running = True
    while running:
        win.clock.update()
        win.fetch_events()
        if win.is_event(pygame.QUIT):
            running = False
        if win.keyboard.is_held(pygame.KSCAN_D):
            win.view.camera.target_x -= 2
        win.fill(WHITE)
        win.fill_rect(Rectangle(20, 20, 50, 50), RED)
        win.show()
pygame.quit()
```

`Window(title, width, height, fps=60)` opens the display and sets up a
default `Camera`, a `KeyboardState` (`win.keyboard`) and a `DeltaClock`
(`win.clock`). `fetch_events()` refreshes the keyboard state and takes one
pending event into `win.event`; it returns `False` when no event was waiting.
`show()` flips the display and waits `1000 // fps` milliseconds. Leaving the
`with` block, or calling `destroy()`, drops the camera and closes the display.

Every drawing call (`fill_rect`, `lines_rect`, `fill_circle`, `draw_point`,
`draw_line`, `draw_texture`, `draw_texture_ex`, `draw_texture_pro`,
`draw_spritesheet`, `draw_text`) passes positions and sizes through
`win.view`, a `CameraView`: positions are shifted by the camera target and
scaled by its zoom, sizes are scaled by the zoom. `win.view.disable()` draws
in plain screen coordinates. `fill()` raises `Core2DError` and closes the
window if the view has no camera.

## Modules

- `core2d.types`: `Color` (RGBA, channels checked to be 0–255),
  `Rectangle`, `Circle`, `Vector2i`, `Vector2f`, the named colours `RED`,
  `GREEN`, `BLUE`, `YELLOW`, `PURPLE`, `PINK`, `BLACK`, `WHITE`, `BROWN`,
  `ORANGE`, `CYAN`, `MAGENTA`, `GRAY`, and the constants `INF_LOOP` and
  `NEAREST_AVAILABLE_CHANNEL` (both -1).
- `core2d.camera`: `Camera` (`target_x`, `target_y`, `zoom`) and
  `CameraView` with `relative_position`, `relative_size`, `enable`,
  `disable`, `set_camera` and `free_camera`.
- `core2d.mathutil`: `get_momentum`, `get_kinetic_energy`, `get_force`,
  `get_drag`, `clamp`, `get_distance`, `get_distance_v`, `get_area`,
  `lines_intersection` (the crossing point of two segments, or `None`),
  `check_collision_aabb`, `check_collision_circle_rec` and `move_towards`,
  which returns the new `(x, y)`. Note that `get_distance` measures
  `|dx + dy|`, not the Euclidean distance.
- `core2d.timing`: `DeltaClock` (`update`, `delta_time`) and `Timer`, a
  countdown with `reset`, `is_finished`, `update(dt)` and `elapsed`; a
  looping timer starts over when it runs out, a non-looping one stops at 0.
- `core2d.input`: `KeyboardState` with `update`, `is_just_pressed`,
  `is_just_released` and `is_held`, keyed by pygame scancodes, plus
  `is_mouse_pressed(event, button)` and `get_mouse_pressed(event)`.
- `core2d.texture`: `Texture` (`load`, `from_surface`, `rectangle`) and
  `Spritesheet`, whose `cutout()` gives the source rectangle of the frame at
  its `row` and `col`.
- `core2d.text`: `TextFont(path, size)` (`path=None` for pygame's default
  font) renders strings into `Text` objects with `render(text, color,
  blend=False)`.
- `core2d.audio`: `initialize_sfx`, `Sound` and `Music` (each with
  `play`), `playing_music`, `pause_music` and `resume_music`.
- `core2d.files`: `IoFile`, a context manager with `append`, `size`,
  `tell`, `seek`, `rewind`, `read` and `close`, plus `quick_write` and
  `quick_read`.
- `core2d.log`: `log` and `err` print `[LOG]` and `[ERROR]` lines;
  `ErrorLog` keeps messages in order, and the engine-wide one is reached
  through `push_error`, `get_core_error` and `get_all_errors`. Failures
  raise `Core2DError`.

## Demo

A short demo draws two lines and moves the second one with the A and D keys;
the first line is cut at the point where they cross.

```
core2d-demo
core2d-demo --frames 300
```

`--frames N` stops after N frames; without it the demo runs until the window
is closed.

## What it does not do

core2d ships no images, fonts or sounds of its own, and has no scene,
entity or physics-simulation layer: the math helpers are plain functions
that you call from your own game loop.