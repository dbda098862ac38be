"""Application main loop and the entry point that runs it."""

from __future__ import annotations

from typing import Callable

from . import log
from .events import Event, EventDispatcher, WindowCloseEvent
from .layer import Layer
from .layer_stack import LayerStack
from .pygame_window import create_window
from .window import Window, WindowProps


class Application:
    """Owns a window and a layer stack and drives them frame by frame."""

    def __init__(self, window: Window | None = None) -> None:
        self._window = window if window is not None else create_window(WindowProps())
        self._window.set_event_callback(self.on_event)
        self._running = True
        self._layer_stack = LayerStack()

    @property
    def window(self) -> Window:
        return self._window

    @property
    def layer_stack(self) -> LayerStack:
        return self._layer_stack

    @property
    def running(self) -> bool:
        return self._running

    def push_layer(self, layer: Layer) -> None:
        self._layer_stack.push_layer(layer)

    def push_overlay(self, overlay: Layer) -> None:
        self._layer_stack.push_overlay(overlay)

    def on_event(self, event: Event) -> None:
        """Handle window closing, then offer the event to layers top to bottom."""
        EventDispatcher(event).dispatch(WindowCloseEvent, self._on_window_close)
        log.core_logger().trace("%s", event)
        for layer in reversed(self._layer_stack):
            layer.on_event(event)
            if event.handled:
                break

    def run(self) -> None:
        """Update every layer and the window until the window is closed."""
        while self._running:
            for layer in self._layer_stack:
                layer.on_update()
            self._window.on_update()

    def _on_window_close(self, event: WindowCloseEvent) -> bool:
        self._running = False
        return True


def run_application(factory: Callable[[], Application]) -> None:
    """Set up logging, build the application with ``factory`` and run it."""
    log.init()
    core = log.core_logger()
    core.warning("Initialized Log!")
    core.info("Hello! Var=%s", 5)

    app = factory()
    try:
        app.run()
    finally:
        app.window.close()