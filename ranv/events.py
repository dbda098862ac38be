"""Engine events: types, categories, concrete event classes and dispatching.

Events are blocking: when one occurs it is dispatched immediately and must
be dealt with right then.
"""

from __future__ import annotations

import enum
from typing import Callable, ClassVar, TypeVar


class EventType(enum.Enum):
    """Every kind of event the engine can emit."""

    NONE = 0
    WINDOW_CLOSE = enum.auto()
    WINDOW_RESIZE = enum.auto()
    WINDOW_FOCUS = enum.auto()
    WINDOW_LOST_FOCUS = enum.auto()
    WINDOW_MOVED = enum.auto()
    APP_TICK = enum.auto()
    APP_UPDATE = enum.auto()
    APP_RENDER = enum.auto()
    KEY_PRESSED = enum.auto()
    KEY_RELEASED = enum.auto()
    MOUSE_BUTTON_PRESSED = enum.auto()
    MOUSE_BUTTON_RELEASED = enum.auto()
    MOUSE_MOVED = enum.auto()
    MOUSE_SCROLLED = enum.auto()


class EventCategory(enum.IntFlag):
    """Bit flags grouping events into broad categories."""

    NONE = 0
    APPLICATION = 1 << 0
    INPUT = 1 << 1
    KEYBOARD = 1 << 2
    MOUSE = 1 << 3
    MOUSE_BUTTON = 1 << 4


def _format_float(value: float) -> str:
    return f"{value:g}"


class Event:
    """Base of all events. Concrete subclasses set the class attributes."""

    event_type: ClassVar[EventType] = EventType.NONE
    name: ClassVar[str] = ""
    category_flags: ClassVar[EventCategory] = EventCategory.NONE

    def __init__(self) -> None:
        if type(self).event_type is EventType.NONE:
            raise TypeError(f"{type(self).__name__} is abstract and cannot be instantiated")
        self.handled = False

    def is_in_category(self, category: EventCategory) -> bool:
        """Return True if the event belongs to any of the given categories."""
        return bool(self.category_flags & category)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"


E = TypeVar("E", bound=Event)


class EventDispatcher:
    """Routes one event to a handler registered for its concrete class."""

    def __init__(self, event: Event) -> None:
        self._event = event

    def dispatch(self, event_class: type[E], func: Callable[[E], bool]) -> bool:
        """Call ``func`` if the event is of ``event_class``'s type.

        The handler's result becomes the event's ``handled`` flag. Returns
        whether the handler was called.
        """
        if self._event.event_type is not event_class.event_type:
            return False
        self._event.handled = bool(func(self._event))  # type: ignore[arg-type]
        return True


# --- application events -------------------------------------------------


class WindowResizeEvent(Event):
    event_type = EventType.WINDOW_RESIZE
    name = "WindowResize"
    category_flags = EventCategory.APPLICATION

    def __init__(self, width: int, height: int) -> None:
        super().__init__()
        self.width = width
        self.height = height

    def __str__(self) -> str:
        return f"WindowResizeEvent: {self.width}, {self.height}"


class WindowCloseEvent(Event):
    event_type = EventType.WINDOW_CLOSE
    name = "WindowClose"
    category_flags = EventCategory.APPLICATION


class AppTickEvent(Event):
    event_type = EventType.APP_TICK
    name = "AppTick"
    category_flags = EventCategory.APPLICATION


class AppUpdateEvent(Event):
    event_type = EventType.APP_UPDATE
    name = "AppUpdate"
    category_flags = EventCategory.APPLICATION


class AppRenderEvent(Event):
    event_type = EventType.APP_RENDER
    name = "AppRender"
    category_flags = EventCategory.APPLICATION


# --- keyboard events ----------------------------------------------------


class KeyEvent(Event):
    """Base of keyboard events; not instantiated directly."""

    category_flags = EventCategory.KEYBOARD | EventCategory.INPUT

    def __init__(self, key_code: int) -> None:
        super().__init__()
        self.key_code = key_code


class KeyPressedEvent(KeyEvent):
    event_type = EventType.KEY_PRESSED
    name = "KeyPressed"

    def __init__(self, key_code: int, repeat_count: int) -> None:
        super().__init__(key_code)
        self.repeat_count = repeat_count

    def __str__(self) -> str:
        return f"KeyPressedEvent: {self.key_code} ({self.repeat_count} repeats)"


class KeyReleasedEvent(KeyEvent):
    event_type = EventType.KEY_RELEASED
    name = "KeyReleased"

    def __str__(self) -> str:
        return f"KeyReleasedEvent: {self.key_code}"


# --- mouse events -------------------------------------------------------


class MouseMovedEvent(Event):
    event_type = EventType.MOUSE_MOVED
    name = "MouseMoved"
    category_flags = EventCategory.MOUSE | EventCategory.INPUT

    def __init__(self, x: float, y: float) -> None:
        super().__init__()
        self.x = x
        self.y = y

    def __str__(self) -> str:
        return f"MouseMovedEvent: {_format_float(self.x)}, {_format_float(self.y)}"


class MouseScrolledEvent(Event):
    event_type = EventType.MOUSE_SCROLLED
    name = "MouseScrolled"
    category_flags = EventCategory.MOUSE | EventCategory.INPUT

    def __init__(self, x_offset: float, y_offset: float) -> None:
        super().__init__()
        self.x_offset = x_offset
        self.y_offset = y_offset


class MouseButtonEvent(Event):
    """Base of mouse button events; not instantiated directly."""

    category_flags = EventCategory.MOUSE_BUTTON | EventCategory.INPUT

    def __init__(self, button: int) -> None:
        super().__init__()
        self.button = button


class MouseButtonPressedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_BUTTON_PRESSED
    name = "MouseButtonPressed"

    def __str__(self) -> str:
        return f"MouseButtonPressedEvent: {self.button}"


class MouseButtonReleasedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_BUTTON_RELEASED
    name = "MouseButtonReleased"

    def __str__(self) -> str:
        return f"MouseButtonReleasedEvent: {self.button}"