# xframe

These are frame-level building blocks for small interactive graphics tools. They do not depend on a window or a GPU. Each piece keeps plain state that you feed and query once per frame.

## Modules

- `xframe.config.Config` reads settings from a JSON file and has typed getters: `get_int`, `get_bool`, `get_float` and `get_string`.
  - A getter returns the given default when the key is missing, holds another type, or the file held no JSON object.
  - The setters are `set_int`, `set_bool`, `set_float` and `set_string`. A setter raises `ConfigTypeError` when the key already holds a value of a different type.
  - `save()` writes the settings back to the file they came from. `save_as(path)` writes them to another file as indented JSON.
  - If the file cannot be opened or parsed, the problem is logged and the defaults stay in effect.
- `xframe.timer.Timer` keeps `elapsed_time`, `total_time` and `frames_per_second`.
  - Call `initialize()` once, then `update()` every frame.
  - The clock is `time.perf_counter` unless you pass another callable.
- `xframe.camera.Camera` is a camera that always treats +Y as up.
  - It has a `position`, a `fov` in radians (clamped to 10–150 degrees), an `aspect_ratio`, and `near_plane` and `far_plane`.
  - To move it, use `walk`, `strafe` and `rise`. To turn it, use `yaw` and `pitch`; `pitch` refuses to look almost straight up or down.
  - To aim it, use `set_direction` and `set_look_at`.
  - It gives `view_matrix()` and `projection_matrix(back_buffer_aspect)`. Both are 4×4 numpy arrays in row-vector form.
  - `screen_point_to_ray` turns a screen point into a `Ray` with `origin` and `direction`.
- `xframe.input.InputSystem` turns input events into per-frame state.
  - Feed it the events you receive: `key_down`/`key_up`, `mouse_button_down`/`mouse_button_up`, `mouse_wheel`, `mouse_move` and `activate`.
  - Call `update(gamepad_states)` once per frame.
  - Then query `is_key_down`, `is_key_pressed`, `is_mouse_down` and `is_mouse_pressed`.
  - The mouse properties are `mouse_move_x`, `mouse_move_y`, `mouse_move_z` (wheel notches), `mouse_screen_x` and `mouse_screen_y`. The edge flags are `mouse_left_edge`, `mouse_right_edge`, `mouse_top_edge` and `mouse_bottom_edge`.
  - For game pads, `gamepad(player)` returns a `GamePadState`, and `is_gamepad_connected(player)` reports whether one is connected. Up to four players are tracked.
- `xframe.shapes` builds line lists, where each pair of points is one segment. It covers:
  - boxes: `aabb_lines`, `obb_lines`;
  - spheres: `sphere_lines`, `sphere_line_count`;
  - transform axes: `transform_axes`;
  - screen rectangles: `screen_rect_lines`;
  - circles, arcs and diamonds: `circle_lines`, `arc_lines`, `diamond_lines`;
  - grids: `grid_lines`;
  - enlarged pixels: `pixel_points`.
- `xframe.simpledraw.SimpleDraw` queues world-space lines and screen-space lines, pixels and a grid, within a vertex budget.
  - Shapes that do not fit in the budget are dropped.
  - `render(camera)` returns the frame's `DrawCall`s (`topology`, `vertices`, `transform`) and clears the queue.
- `xframe.viewport.Viewport` is a screen rectangle whose negative values are clamped to zero. When shown, `draw(simple_draw)` outlines it in white. `on_new_frame()` resets it.

## Install

```
pip install .
```

## Example

```python
from xframe.camera import Camera
from xframe.simpledraw import SimpleDraw

camera = Camera()
camera.walk(-10.0)

draw = SimpleDraw(800, 600, 10000)
draw.add_line((0, 0, 0), (1, 0, 0), (1.0, 0.0, 0.0, 1.0))
draw.add_screen_rect(10, 10, 100, 50, (1.0, 1.0, 1.0, 1.0))

for call in draw.render(camera):
    print(call.topology, len(call.vertices))
```

## What it does not do

The package opens no window, talks to no GPU and plays no sound.

- `SimpleDraw.render` produces vertex lists and matrices; it does not rasterize them.
- `InputSystem` does not listen to a window itself; you pass it the events you receive.
- It has no texture, sprite, font, shader or audio handling.
- It installs no command-line program.

## Tests

```
pip install .[test]
pytest
```