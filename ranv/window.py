"""Abstract desktop window and the properties it is created with."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Callable

from .events import Event

EventCallback = Callable[[Event], None]


@dataclass
class WindowProps:
    """Title and size a window is created with."""

    title: str = "RanV Engine"
    width: int = 1280
    height: int = 720


class Window(abc.ABC):
    """A desktop window that polls input and forwards it as engine events."""

    @abc.abstractmethod
    def on_update(self) -> None:
        """Process pending input and present the frame."""

    @abc.abstractmethod
    def set_event_callback(self, callback: EventCallback) -> None:
        """Set the function that receives every event the window produces."""

    @property
    @abc.abstractmethod
    def width(self) -> int:
        """Current width in pixels."""

    @property
    @abc.abstractmethod
    def height(self) -> int:
        """Current height in pixels."""

    @property
    @abc.abstractmethod
    def vsync(self) -> bool:
        """Whether presenting is paced to the display; settable in implementations."""

    def close(self) -> None:
        """Release the window. The default does nothing."""