"""Example application with a single logging layer."""

from __future__ import annotations

from . import log
from .application import Application, run_application
from .events import Event
from .layer import Layer
from .window import Window


class ExampleLayer(Layer):
    """Layer that logs every update and every event it receives."""

    def __init__(self) -> None:
        super().__init__("Example")

    def on_update(self) -> None:
        log.client_logger().info("Example::Update")

    def on_event(self, event: Event) -> None:
        log.client_logger().trace("%s", event)


class Sandbox(Application):
    """Application holding one ExampleLayer."""

    def __init__(self, window: Window | None = None) -> None:
        super().__init__(window)
        self.push_layer(ExampleLayer())


def create_application() -> Sandbox:
    return Sandbox()


def main(argv: list[str] | None = None) -> int:
    """Run the sandbox until its window is closed."""
    run_application(create_application)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())