# elmengine

The core pieces of a small real-time rendering engine: events, input state,
layers, frame timing, logging, 4x4 transforms, cameras and their controllers,
a trace-file profiler, and plain descriptions of vertex layouts, textures,
frame buffers and shaders. It depends only on numpy.

## Modules

- `elmengine.timestep`: `Timestep`, a frozen frame delta in `seconds`, with a
  `milliseconds` property. It converts with `float()`.
- `elmengine.timer`: `Timer`, a stopwatch built on `time.perf_counter_ns`, with
  `reset()`, `elapsed_seconds()` and `elapsed_milliseconds()`.
- `elmengine.events`: `EventType`, `EventCategory` (bit flags) and the event
  classes `KeyPressedEvent`, `KeyReleasedEvent`, `KeyTypedEvent`,
  `MouseButtonPressedEvent`, `MouseButtonReleasedEvent`, `MouseMovedEvent`,
  `MouseScrolledEvent`, `WindowCloseEvent`, `WindowMinimizeEvent` and
  `WindowResizeEvent`. Each event has a `handled` flag and
  `is_in_category()`. `EventDispatcher(event).dispatch(EventClass, func)` calls
  `func` only when the event is of that class, ORs its result into `handled`,
  and returns whether it called it.
- `elmengine.input`: the `Key` and `MouseButton` code enums, and `InputState`,
  which you update yourself (`press_key`, `release_key`, `press_mouse_button`,
  `release_mouse_button`, `move_mouse`) and query with `is_key_pressed`,
  `is_mouse_button_pressed`, `mouse_position`, `mouse_x` and `mouse_y`.
- `elmengine.layers`: `Layer`, with the hooks `on_attach`, `on_detach`,
  `on_update`, `on_event` and `on_imgui_render`, and `LayerStack`. Layers pushed
  with `push_layer` always stay below overlays pushed with `push_overlay`.
  `pop_layer` and `pop_overlay` return whether the layer was found. Iteration
  runs from bottom to top, and `reversed()` from top to bottom. `close()`, or
  leaving a `with` block, detaches everything.
- `elmengine.telemetry`: `ApplicationTelemetry` averages frame times over blocks
  of 30 frames and gives `smooth_frame_time` and `fps`. `fps` is infinite until
  the first block is complete.
- `elmengine.log`: `init()` sets up the `[ELM]` core logger and the `[APP]`
  client logger. Both use standard `logging`, write to stdout and log every
  level, down to the added `TRACE` level. `core_logger()` and `client_logger()`
  return `None` before `init()` has been called.
- `elmengine.transforms`: numpy helpers for column vectors (`M @ v`):
  `ortho`, `perspective` (with the field of view in radians), `translate`,
  `rotate`, `euler_to_mat4`, and `decompose_transform`, which returns
  `(translation, rotation, scale)` and raises `ValueError` for a matrix it
  cannot normalise.
- `elmengine.cameras`: `OrthographicCamera` (near and far are fixed at -1 and 1)
  and `PerspectiveCamera` (the field of view is in degrees, and `fov`,
  `aspect_ratio`, `near_clip` and `far_clip` can be set). Both cache
  `view_projection_matrix` and return read-only arrays.
- `elmengine.controllers`: `OrthographicCameraController` pans with W, A, S and
  D, rotates with Q and E when `enable_rotation` is set, and zooms on
  `MouseScrolledEvent` with a minimum zoom of 0.25. `PerspectiveCameraController`
  moves with W, A, S, D, Q and E. While the right mouse button
  (`MouseButton.BUTTON_1`) is held, it looks around on `MouseMovedEvent`, and
  it tells an optional `cursor_callback(captured)` when to capture or release
  the cursor. Both controllers read from an `InputState`, which you pass as
  `input_state=`, and both have a `resize_viewport(width, height)` method.
- `elmengine.instrumentor`: `get_instrumentor()` returns the process-wide
  `Instrumentor`. Its `begin_session`, `write_profile` and `end_session` write a
  Chrome trace-event JSON file. `profile_scope(name)` returns an
  `InstrumentationTimer` to use with `with`. `cleanup_output_string(expr,
  remove)` strips a substring from a name and turns double quotes into single
  quotes.
- `elmengine.vertex_layout`: `ShaderDataType`, `shader_data_type_size()`,
  `VertexBufferElement` (with `size`, `offset` and `component_count`) and
  `VertexBufferLayout`, which works out the offsets and the `stride`.
- `elmengine.textures`: `TextureWrap`, `TextureFilter`, `Texture2DSpecification`,
  `SubTexture2D.from_atlas()` for sprite UVs, `FrameBufferTextureFormat`,
  `FrameBufferTextureSpecification` and `FrameBufferSpecification`.
  `FrameBufferSpecification` accepts attachments given either as formats or as
  full specifications.
- `elmengine.shader_library`: `ShaderLibrary`, a registry keyed by name.
  `add()` raises `ValueError` on a duplicate name, `get()` raises `KeyError`
  for an unknown one, and `in` tests membership. `load(fpath, name=None)` calls
  the `loader` callable given to the constructor.

## Install

```
pip install elmengine
```

With the test dependencies:

```
pip install "elmengine[test]"
```

## Example

```python
from elmengine.timestep import Timestep
from elmengine.input import InputState, Key
from elmengine.events import MouseScrolledEvent
from elmengine.controllers import OrthographicCameraController

input_state = InputState()
controller = OrthographicCameraController(16 / 9, input_state=input_state)

input_state.press_key(Key.D)
controller.on_update(Timestep(0.016))
controller.on_event(MouseScrolledEvent(0.0, 1.0))

print(controller.zoom_level)  # 0.75
print(controller.camera.view_projection_matrix)
```

Profiling a block of code:

```python
from elmengine.instrumentor import get_instrumentor, profile_scope

profiler = get_instrumentor()
profiler.begin_session("Runtime", "profile-runtime.json")
with profile_scope("update"):
    ...
profiler.end_session()
```

## What it does not do

This package does not open windows and does not talk to a GPU. It has no
application run loop, no debug UI, and no scene or entity system. It does not
read keyboard or mouse input from a device: `InputState` holds only what you
feed into it. Textures, frame buffers and shaders exist here only as
descriptions. The package compiles no shaders, and `ShaderLibrary` holds
whatever objects your own `loader` returns. It installs no command-line
commands.