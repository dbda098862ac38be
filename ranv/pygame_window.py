"""Window implementation backed by pygame."""

from __future__ import annotations

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from . import log  # noqa: E402
from .events import (  # noqa: E402
    Event,
    KeyPressedEvent,
    KeyReleasedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
    WindowResizeEvent,
)
from .window import EventCallback, Window, WindowProps  # noqa: E402

_CLEAR_COLOR = (255, 0, 255)
_VSYNC_RATE = 60
_WHEEL_BUTTONS = frozenset({4, 5})
# pygame numbers buttons left=1, middle=2, right=3; the engine uses left=0, right=1, middle=2.
_BUTTON_MAP = {1: 0, 2: 2, 3: 1}


def _engine_button(native_button: int) -> int:
    return _BUTTON_MAP.get(native_button, native_button - 3)


class PygameWindow(Window):
    """A resizable pygame display that turns native input into engine events."""

    def __init__(self, props: WindowProps | None = None) -> None:
        props = props if props is not None else WindowProps()
        self._title = props.title
        self._width = props.width
        self._height = props.height
        self._vsync = False
        self._callback: EventCallback | None = None
        self._held_keys: set[int] = set()
        self._clock = pygame.time.Clock()
        self._closed = False

        log.core_logger().info(
            "Creating window %s (%s, %s)", props.title, props.width, props.height
        )
        try:
            pygame.display.init()
        except pygame.error as exc:
            log.core_logger().error("Display error: %s", exc)
            raise RuntimeError("Could not initialize display!") from exc

        self._surface = pygame.display.set_mode((props.width, props.height), pygame.RESIZABLE)
        pygame.display.set_caption(props.title)
        self.vsync = True
        self._surface.fill(_CLEAR_COLOR)

    @property
    def title(self) -> str:
        return self._title

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def vsync(self) -> bool:
        return self._vsync

    @vsync.setter
    def vsync(self, enabled: bool) -> None:
        self._vsync = bool(enabled)

    def set_event_callback(self, callback: EventCallback) -> None:
        self._callback = callback

    def _emit(self, event: Event) -> Event:
        if self._callback is not None:
            self._callback(event)
        return event

    def handle_native_event(self, native_event: pygame.event.Event) -> Event | None:
        """Translate one pygame event, pass it to the callback and return it.

        Returns None for native events the engine has no event for.
        """
        kind = native_event.type
        if kind == pygame.QUIT:
            return self._emit(WindowCloseEvent())
        if kind == pygame.VIDEORESIZE:
            self._width, self._height = native_event.w, native_event.h
            return self._emit(WindowResizeEvent(native_event.w, native_event.h))
        if kind == pygame.KEYDOWN:
            key = native_event.key
            repeat = 1 if key in self._held_keys else 0
            self._held_keys.add(key)
            return self._emit(KeyPressedEvent(key, repeat))
        if kind == pygame.KEYUP:
            self._held_keys.discard(native_event.key)
            return self._emit(KeyReleasedEvent(native_event.key))
        if kind in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            if native_event.button in _WHEEL_BUTTONS:
                return None
            button = _engine_button(native_event.button)
            if kind == pygame.MOUSEBUTTONDOWN:
                return self._emit(MouseButtonPressedEvent(button))
            return self._emit(MouseButtonReleasedEvent(button))
        if kind == pygame.MOUSEWHEEL:
            return self._emit(MouseScrolledEvent(float(native_event.x), float(native_event.y)))
        if kind == pygame.MOUSEMOTION:
            x, y = native_event.pos
            return self._emit(MouseMovedEvent(float(x), float(y)))
        return None

    def on_update(self) -> None:
        """Poll pending input, present the frame and clear for the next one."""
        if self._closed:
            return
        for native_event in pygame.event.get():
            self.handle_native_event(native_event)
        if self._closed:
            return
        pygame.display.flip()
        if self._vsync:
            self._clock.tick(_VSYNC_RATE)
        self._surface = pygame.display.get_surface()
        self._surface.fill(_CLEAR_COLOR)

    def close(self) -> None:
        """Destroy the display; calling it again does nothing."""
        if self._closed:
            return
        self._closed = True
        pygame.display.quit()

    def __enter__(self) -> PygameWindow:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def create_window(props: WindowProps | None = None) -> PygameWindow:
    """Create the platform window."""
    return PygameWindow(props)