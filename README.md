# vega

`vega` is a small core for layer-based 2D games. It does not depend on any
rendering library. It also contains the pieces of a timber-style arcade game
built on that core.

The package uses only the standard library.

## Engine

### Layers (`vega.layer`)

`Layer` is the abstract base class for everything in a scene. A subclass
provides a `name` property and overrides the hooks it needs:

- `on_attach`, `on_detach`
- `on_event`, `on_update(dt)`
- `on_draw(device)`, `on_ui(device)`, `on_imgui`
- `on_collide(layer, class_name)`

Use `activate_collider(flags, class_name)`, `set_collider(origin, rect, scale)`
and `set_collider_display_mode(enabled)` to give a layer a collider and place
it. `set_collider` and `set_collider_display_mode` raise `RuntimeError` if the
layer has no collider.

`release()` drops the collider. `Layer.get_count()` reports how many layers
have been created and not yet released.

`LayerArray` keeps the ordered stack, with overlays in front of ordinary
layers. Insertions and removals are queued:

- `insert_layer`, `insert_overlay`, `remove_layer` and `remove_overlay` queue
  a change. Each returns `False` when it makes no sense: inserting a layer
  that is already present, or removing one that is absent.
- Queued insertions take effect in `apply_insertions()`.
- Queued removals take effect in `collect_garbage()`. It calls `on_detach()`
  on each removed layer, then releases it.

### Events (`vega.events`)

- An `InputEvent` holds an `EventType` and, for key events, a key.
- `Event` wraps an `InputEvent`. A layer calls `use()` on it to consume it,
  and `used` reports whether that has happened.
- `EventQueue.push()` collects the events of a frame.
- `EventQueue.dispatch_to(layers)` offers each event to the layers in order.
  It stops offering an event once a layer has used it.

### Input state (`vega.inputs`)

`InputManager.update_event()` takes in the window's events. You can then ask:

- `get_key_down(key)`: did the key go down this frame?
- `get_key(key)`: is the key held?
- `get_key_up(key)`: did the key come up this frame?

`clear()` forgets this frame's presses and releases. Keys that are still held
stay held.

### Collision (`vega.collision`)

- `Collider` is an axis-aligned box. `set(origin, rect, scale)` places it and
  computes its integer world bounds as a `Rect`.
- `is_collided(other)` returns `False` for the same collider and for two
  colliders with the same class name.
- When two colliders overlap, `is_collided` calls the owner's
  `on_collide(other_owner, other_owner.name)` and sets both outline colours to
  `"red"`.
- `ColliderManager.get_instance()` returns the shared registry. Its methods
  are `attach()`, which creates a collider, and `detach(collider)`.

### Resources (`vega.resources`)

`ResourceManager` is a cache keyed by path, built around a loader function:

```python
from vega.resources import ResourceManager

textures = ResourceManager(loader=my_loader, empty=None)
textures.load("res/graphics/bee.png")
if "res/graphics/bee.png" in textures:
    bee = textures.get("res/graphics/bee.png")
missing = textures.get_safety("res/graphics/nothing.png")  # the empty value
textures.unload_all()
```

How it behaves:

- `load` returns `False` only when the path is already cached.
- A loader that raises `OSError` or `ValueError`, or returns `None`, leaves
  nothing cached.
- `get` raises `KeyError` for a path that is not loaded.

### System (`vega.system`)

`System.get_instance()` returns the shared system. It owns:

- the layer stack;
- pause state, through `set_pause` and `is_paused`;
- reset state, through `set_reset`, `is_reset` and `reset`;
- `exit_program()`;
- a `textures` manager and a `fonts` manager, both of which read files as
  bytes.

`find_layer(name)` returns the first active layer with that name.

`init(info, window)` takes a `WindowInfo(width, height, title)` and a window
object. The window object must provide:

- `create()`
- `release()`
- `is_open()`
- `poll_events(queue)`
- `present(frame)`

`step(dt)` runs one frame in this order:

1. apply pending insertions;
2. poll and dispatch events;
3. update the layers;
4. test every pair of colliders;
5. collect removed layers;
6. draw the layers, then their UI, then the colliders that are displayed;
7. call `on_imgui` on each layer;
8. present the frame.

`run()` steps frames until play stops or the window closes.

`begin_process(create_application, runtime, window)` initialises the system
and runs it. If a reset was requested, it resets and runs again.

### Utilities (`vega.mathutil`)

- `get_random(start, end)` returns an integer from the inclusive range. It
  raises `ValueError` when `start > end`.
- `Direction` has the members `DEFAULT`, `LEFT` and `RIGHT`.

## Simple framework

This is a lighter framework that does not use the engine above.

- `vega.gameobject` provides:
  - `GameObject`, which has an active flag, a position and an age;
  - `SpriteGo`, which loads one texture through a `ResourceManager` and draws
    a sprite.
- `vega.framework.Framework` keeps game time, real time and a time scale.
  - `tick(real_delta)` advances the clocks.
  - `do()` runs a loop that shows `res/graphics/background.png` until the
    window closes. It feeds the window's events to an `InputManager`.
  - The window passed to `init(width, height, name, window)` must provide
    `create`, `is_open`, `poll_events`, `close`, `clear`, `draw` and
    `display`.

## Game pieces (`vega.game`)

- **`Bee` and `Cloud`** (`vega.game.actors`):
  - They load `res/graphics/bee.png` and `res/graphics/cloud.png`.
  - The texture's width comes from its `size` attribute or from its PNG
    header.
  - Each one crosses the screen in a wavy line and starts over from a random
    side once it leaves the screen.
- **`Player`** (`vega.game.player`):
  - It reacts to `KEY_PRESSED` events whose key is `"left"` or `"right"`.
  - It moves to that side of the centre and adds 10 to the `UI` score.
  - It refills the time bar by 100 for `"left"` and by 30 for `"right"`.
  - When it collides with a layer named `"Branch"`, it calls that layer's
    `destroy(True)` and dies.
  - Dying swaps in `res/graphics/rip.png` and pauses the system.
- **`UI`** (`vega.game.ui`):
  - It shows the score.
  - Its time bar is 400 wide and drains in 3 seconds. When the bar empties,
    the player dies.
  - It shows one banner: "PRESS ENTER TO START!" while a layer named
    `"Application"` reports `is_first_start()`, "GAME OVER!" after the player
    dies, or "PAUSE!" while the game is paused.

## What is not included

- `vega` draws nothing and opens no window. Frames and sprites go to the
  device and window objects you supply.
- There is no command to start a game.
- The game pieces are not a full game. The package has no tree, no branch
  layer and no application layer that starts, pauses or restarts play from the
  keyboard. You supply these yourself.

## Running the tests

Install the `test` extra, then run `pytest`.