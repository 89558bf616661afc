# promethean

A small retained-mode 2D user-interface toolkit for games, together with the
pieces it relies on: a synchronous publish/subscribe event bus, a logging
facade and entity-component data types. It has no dependencies outside the
standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `promethean.eventbus.EventBus`: process-wide bus obtained with
  `EventBus.instance()`. `subscribe(event_type, handler)` returns an integer
  id; `unsubscribe(id)` removes it (an unknown id logs a warning);
  `publish(event)` calls, synchronously and in subscription order, every
  handler registered for the exact type of the event. An exception raised by
  a handler is logged and does not stop the other handlers.
- `promethean.log`: `get_logger()` returns the `"promethean"` logger from the
  standard `logging` module (INFO by default); `set_level(level)` and
  `get_level()` work with the `LogLevel` enumeration (`DEBUG`, `INFO`,
  `WARN`, `ERROR`).
- `promethean.events`: input events `MouseMotion(x, y)`,
  `MouseButtonDown(x, y, button)`, `MouseButtonUp(x, y, button)` and
  `KeyDown(key)`; the `MouseButton` and `Key` enumerations; and `Rect`, an
  integer rectangle whose `contains(x, y)` excludes the right and bottom
  edges.
- `promethean.widget`: the abstract `Widget` class (`draw`, `handle_event`,
  `set_position`, `set_size`), `WidgetContainer`, which forwards drawing and
  events to its `children`, and `Renderer`, which records every quad passed
  to `draw_quad(pos, size)` in its `quads` list.
- `promethean.layout`: `HorizontalLayout` and `VerticalLayout` (default
  spacing 5). Adding a child or changing the position or size divides the
  layout's area evenly between the children, separated by the spacing.
  Drawing a layout with no children raises `RuntimeError`.
- `promethean.button`: `Button(button_id, texture_normal, texture_hover,
  texture_pressed, load_texture=None)`, a button whose `state` is a
  `ButtonState` (`NORMAL`, `HOVER`, `PRESSED`). A left press and release
  inside it publishes `ButtonClickedEvent(button_id)` on the event bus. The
  optional `load_texture` callable is used to load the three textures.
- `promethean.uibutton`: `UIButton(button_id, on_click=None)`, a plain
  button that calls `on_click` when the left button is pressed and released
  inside its `rect` (100 x 40 by default).
- `promethean.slider`: `Slider(slider_id, track_texture, knob_texture,
  initial_value=0.5)`. Its `value` property stays in `[0, 1]`; changes
  smaller than 0.01 are ignored, and each accepted change publishes
  `SliderValueChangedEvent(slider_id, new_value)`. The knob can be dragged
  with the left mouse button, and the left and right arrow keys move the
  value by 0.02.
- `promethean.window`: `UIWindow(on_show=None, on_hide=None)`, a container
  that only draws and takes events while `visible`; `UIManager`, a stack of
  windows (`push_window`, `pop_window`, `top_window`, `len()`) that sends
  events to the top window only and draws all of them; `State`, the abstract
  game state with `on_enter`, `on_exit`, `pause`, `resume`, `handle_event`,
  `update` and `render`, whose default hooks keep its `active` and `paused`
  flags; and `UIOverlay`, a state hosting a `UIManager` as `manager` and
  adding each `update` time step to `elapsed`.
- `promethean.components`: `Position`, `Velocity`, `Renderable` and
  `NavComponent` dataclasses with `to_json()` and `from_json(data)`, and
  `ComponentPool`, dense storage keyed by entity id (`emplace`, `remove`,
  `get`, `in`, `len()`, `entities()`).

## Example

```python
from promethean.events import MouseButtonDown, MouseButtonUp
from promethean.uibutton import UIButton
from promethean.window import UIManager, UIWindow

window = UIWindow()
play = UIButton("play")
play.on_click = lambda: print("play pressed")
play.set_position((0, 0))
play.set_size((100, 40))
window.add_child(play)

manager = UIManager()
manager.push_window(window)
manager.handle_event(MouseButtonDown(10, 10))
manager.handle_event(MouseButtonUp(10, 10))
manager.pop_window()
```

Widgets that publish events do so through `EventBus.instance()`:

```python
from promethean.button import ButtonClickedEvent
from promethean.eventbus import EventBus

bus = EventBus.instance()
sub = bus.subscribe(ButtonClickedEvent, lambda ev: print(ev.button_id))
bus.unsubscribe(sub)
```

## What it does not do

- It opens no window and reads no real input device: events are built by the
  caller and passed to `handle_event`.
- It draws nothing on screen. `Renderer` only collects quads; turning them
  into pixels is left to the application.
- Textures are not loaded unless a `load_texture` callable is given to
  `Button`; slider texture names are only stored.
- There is no entity registry, system runner, pathfinding or save format;
  only the component types and `ComponentPool` are provided.
- There is no command-line program.