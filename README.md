# mintengine

Building blocks for small 2D games on pygame: a window configured from a
binary file, a renderer that draws a queue of drawables, a cache of loaded
assets, frame-based sprite animation, timers, a frame clock, and a simple
retained UI layer that lays out rectangles and draws them to an off-screen
surface.

## Installing

```
pip install .
```

The only runtime dependency is pygame. The tests use pytest
(`pip install .[test]`).

## A minimal loop

```python
import pygame

from mintengine.animation import Animation, AnimationData
from mintengine.assets import AssetsManager, Texture2D
from mintengine.clock import Time
from mintengine.renderer import Renderer
from mintengine.sprite import Sprite
from mintengine.window import Window, WindowConfig

WindowConfig(title="Demo", width=800, height=600, style=2, framerate_limit=60).serialize("window.bin")

window = Window("window.bin")
renderer = Renderer()
renderer.create(window)

assets = AssetsManager()
sheet = assets.load_asset(Texture2D, "player.png")
sprite = Sprite(Animation.from_data(AnimationData(
    texture=sheet, frame_number=6, frame_y=48,
    frame_width=48, frame_height=48, frame_time=0.1,
)))

Time.init()
while window.is_open:
    Time.restart()
    for event in window.poll_events():
        if event.type == pygame.QUIT:
            window.close()
    sprite.update()
    renderer.submit(sprite)
    renderer.render()
```

## Modules

### Window and rendering

- `mintengine.window` – `WindowConfig` holds a title, width, height, style
  flags, frame-rate limit and vertical sync, and reads and writes them with
  `serialize(path)` / `deserialize(path)`. `Window(config_path)` opens a
  pygame display from such a file. It offers `poll_events()`, `clear()`,
  `draw(drawable)`, `display()` (which also honours the frame-rate limit),
  `close()` and `is_open`, and can be used as a context manager that closes it.
- `mintengine.renderer` – `Renderer.create(window)` attaches a window;
  `submit(drawable)` queues anything with a `draw(surface)` method; `render()`
  clears the window, draws the queue in submission order, shows it and
  empties the queue. Without a window it logs an error and keeps the queue.

### Assets

`mintengine.assets` has `Texture2D` (a pygame surface), `Font` (a font file
path) and `Shader` (source text), each with `load(name)`, `unload()`,
`name`, `is_loaded` and an `AssetType`. Loading a missing file raises
`FileNotFoundError`; a file pygame cannot read is logged and left unloaded.
`AssetsManager.load_asset(kind, name)` loads an asset once and returns the
cached instance for later requests; `get_asset(kind, name)` raises `KeyError`
for an unknown asset; `unload_asset`, `unload_all_assets` and
`is_asset_loaded` manage the cache.

### Sprites and animation

- `mintengine.animation` – an `Animation` is a spritesheet, a list of frame
  rectangles and a frame time. `Animation.from_data(AnimationData(...))` cuts a
  row of equal frames from a sheet; `Animation.from_texture(texture)` makes one
  frame covering the whole texture.
- `mintengine.sprite` – a `Sprite` plays its animations with a `Timer`,
  looping or pausing at the last frame. `update(dt)` advances it (by
  `Time.delta_time` when `dt` is omitted). It has `play`, `pause`, `stop`,
  `add_animation`, `set_current_animation`, `set_current_frame`,
  `frame_time`, `direction` (an `AnimDirection`; changing it mirrors the
  sprite horizontally), `set_color`, `local_bounds`, `global_bounds` and
  `draw(surface)`.
- `mintengine.static_sprite` – a `StaticSprite` draws a whole texture, with
  `texture`, `color`, `local_bounds`, `global_bounds` and `draw(surface)`.
- `mintengine.text` – `Text(font, string, character_size)` draws a string
  with a `Font` asset.
- `mintengine.transform` – `Transformable` gives sprites and text their
  `position`, `scale`, `origin` and `rotation`, and `transform_rect(rect)`.

### UI

- `mintengine.geometry` – `Point` (element-wise and scalar arithmetic),
  `Size` and `Rect`.
- `mintengine.style` – `Style` holds a `PositionType`, a requested `bound`, a
  `resolved_bound` and a `background_color`; `serialize` and `deserialize`
  store it in a small binary file.
- `mintengine.ui_element` – a `UIElement` has a `style` and children added
  with `add(child)`. `compute_layout()` resolves modified elements: relative
  children are placed from their parent's resolved position, absolute ones
  keep their own. `render(surface)` draws the element, then its children.
- `mintengine.ui_renderer` – `UIRenderer(size)` owns a transparent `surface`;
  `submit(element)` queues a root element and `render()` lays out and draws
  the queue onto the surface.

### Utilities

- `mintengine.timer` – `Timer(max_time)` with `update(dt)`, `restart()`
  (carrying over time past the limit), `start`, `stop`, `end`,
  `remaining_time`, `is_running` and `has_ended`.
- `mintengine.clock` – `Time.init()`, `Time.restart()`, `Time.delta_time`,
  `Time.app_time`, `Time.frame_time()` and `Time.global_time()`.
- `mintengine.log` – `init_logging()` sets up the `CORE` and `CLIENT`
  loggers writing to standard output; `core_logger()` and `app_logger()`
  return them.
- `mintengine.registry` – `add_manager(manager, kind)`, `get_manager(kind)`
  and `clear_managers()` share manager objects process-wide.
- `mintengine.pool` – `ObjectPool` groups objects by type.
- `mintengine.files` – `file_exists`, `create_new_file`, `open_binary` and the
  `Serializable` interface.

## What it does not do

The package has no application class that runs a main loop for you, no stack
of game states, and no demo game or command to run: a game writes its own
loop from the pieces above, as in the example.