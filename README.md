# ranv

A small engine core built around three ideas:

- **Events** (`ranv.events`) describe what happened: window resizes and
  closes, key presses and releases, mouse movement, scrolling and button
  clicks. Every event has an `event_type` (an `EventType`), `category_flags`
  (an `EventCategory` flag set), a `name` and a `handled` flag.
- **Layers** (`ranv.layer.Layer`) are updated once per frame and receive
  events. They live on a `LayerStack` (`ranv.layer_stack`); overlays always sit
  above ordinary layers.
- **An application** (`ranv.application.Application`) owns a window and a
  layer stack, runs the main loop and passes each event from the topmost layer
  downward until one of them marks it handled. A `WindowCloseEvent` stops the
  loop.

The window (`ranv.pygame_window.PygameWindow`) is backed by pygame.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Trying it out

The package ships a sandbox application that opens a window, logs
`Example::Update` through the `APP` logger each frame and traces every event it
receives:

```
ranv-sandbox
```

The same program runs with `python -m ranv.sandbox`. Closing the window ends it.

## Writing an application

```python
from ranv.application import Application, run_application
from ranv.events import KeyPressedEvent
from ranv.layer import Layer
from ranv.log import client_logger


class GameLayer(Layer):
    def __init__(self):
        super().__init__("Game")

    def on_update(self):
        pass

    def on_event(self, event):
        if isinstance(event, KeyPressedEvent):
            client_logger().info("key %s", event.key_code)
            event.handled = True


class Game(Application):
    def __init__(self):
        super().__init__()
        self.push_layer(GameLayer())


if __name__ == "__main__":
    run_application(Game)
```

`run_application` sets up logging, builds the application from the factory you
pass, runs it until the window is closed and then closes the window.

`Application` accepts an optional `window` argument; without one it creates a
`PygameWindow` with the default `WindowProps` (title `"RanV Engine"`, 1280×720).
Any subclass of `ranv.window.Window` can be passed instead.

### Logging

`ranv.log.init()` attaches a standard-output handler to two loggers, `RANV`
(returned by `core_logger()`) and `APP` (returned by `client_logger()`), and
lets every level through. Both are `logging.LoggerAdapter`s with an extra
`trace()` method for a level below `debug`. Lines look like
` [12:34:56] APP: message ` and are coloured by level when standard output is a
terminal.

### Dispatching events

`EventDispatcher` calls a handler only when the event is of the given class, and
stores the handler's return value in `event.handled`. `dispatch` returns whether
the handler was called:

```python
from ranv.events import EventDispatcher, WindowCloseEvent

def on_close(event):
    return True

called = EventDispatcher(WindowCloseEvent()).dispatch(WindowCloseEvent, on_close)
```

`event.is_in_category(EventCategory.INPUT)` tells whether an event belongs to
any of the given categories. `str(event)` gives a readable description such as
`KeyPressedEvent: 65 (1 repeats)`.

### Layer ordering

`push_overlay` puts a layer on top of everything. `push_layer` puts a layer at
the bottom of the stack, beneath the overlays and beneath layers pushed before
it. Iterating a `LayerStack` goes from bottom to top, the order updates run in;
`reversed(stack)` goes from top to bottom, the order events travel in.
`pop_layer` and `pop_overlay` remove a layer and do nothing if it is not there.

### The pygame window

`PygameWindow` (also made by `create_window(props)`) opens a resizable display
and turns pygame input into engine events through `handle_native_event`:
quit, resize, key down and up (a key pressed again while still held counts as a
repeat), mouse buttons (left 0, right 1, middle 2; wheel buttons are ignored),
mouse wheel and mouse motion. With `vsync` on, which is the default, frames are
capped at 60 per second. Each frame is cleared to magenta. The window is a
context manager, and `close()` may be called more than once.

## What it does not do

There is no rendering beyond clearing the window to a fixed colour, no event
queue (events are handled as soon as they arrive), and no window focus or move
events are produced, although their `EventType` members exist.