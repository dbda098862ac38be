"""Base class for layers of an application."""

from __future__ import annotations

from .events import Event


class Layer:
    """A slice of an application that is updated each frame and receives events.

    Subclasses override the hooks they need. The default hooks only keep
    simple bookkeeping: whether the layer is attached, how many frames it
    has seen and the last event that reached it.
    """

    def __init__(self, name: str = "Layer") -> None:
        self._name = name
        self.attached = False
        self.frames = 0
        self.last_event: Event | None = None

    @property
    def name(self) -> str:
        """Debug name of the layer."""
        return self._name

    def on_attach(self) -> None:
        """Called when the layer is attached."""
        self.attached = True

    def on_detach(self) -> None:
        """Called when the layer is detached."""
        self.attached = False

    def on_update(self) -> None:
        """Called once per frame."""
        self.frames += 1

    def on_event(self, event: Event) -> None:
        """Called for each event reaching this layer."""
        self.last_event = event

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"