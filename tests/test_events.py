import pytest

from ranv.events import (
    AppTickEvent,
    Event,
    EventCategory,
    EventDispatcher,
    EventType,
    KeyEvent,
    KeyPressedEvent,
    KeyReleasedEvent,
    MouseButtonEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
    WindowResizeEvent,
)

_ALL_CATEGORIES = (
    EventCategory.APPLICATION,
    EventCategory.INPUT,
    EventCategory.KEYBOARD,
    EventCategory.MOUSE,
    EventCategory.MOUSE_BUTTON,
)


@pytest.mark.parametrize(
    "event, expected",
    [
        (WindowCloseEvent(), {EventCategory.APPLICATION}),
        (KeyReleasedEvent(1), {EventCategory.KEYBOARD, EventCategory.INPUT}),
        (MouseMovedEvent(0, 0), {EventCategory.MOUSE, EventCategory.INPUT}),
        (MouseButtonReleasedEvent(0), {EventCategory.MOUSE_BUTTON, EventCategory.INPUT}),
    ],
)
def test_category_bits_follow_source_layout(event, expected):
    assert [c.value for c in _ALL_CATEGORIES] == [1 << i for i in range(5)]
    found = {c for c in _ALL_CATEGORIES if event.is_in_category(c)}
    assert found == expected


def test_event_type_none_is_zero():
    assert EventType.NONE.value == 0
    event = WindowCloseEvent()
    assert event.event_type is EventType.WINDOW_CLOSE
    assert event.event_type.value == 1


def test_window_resize_string_and_fields():
    event = WindowResizeEvent(1280, 720)
    assert str(event) == "WindowResizeEvent: 1280, 720"
    assert (event.width, event.height) == (1280, 720)
    assert event.event_type is EventType.WINDOW_RESIZE


def test_default_string_is_name():
    assert str(WindowCloseEvent()) == "WindowClose"
    assert str(AppTickEvent()) == "AppTick"
    assert str(MouseScrolledEvent(1.0, -1.0)) == "MouseScrolled"


def test_key_event_strings():
    assert str(KeyPressedEvent(65, 0)) == "KeyPressedEvent: 65 (0 repeats)"
    assert str(KeyReleasedEvent(65)) == "KeyReleasedEvent: 65"


def test_mouse_event_strings():
    assert str(MouseMovedEvent(1.5, 2.0)) == "MouseMovedEvent: 1.5, 2"
    assert str(MouseButtonPressedEvent(1)) == "MouseButtonPressedEvent: 1"
    assert str(MouseButtonReleasedEvent(1)) == "MouseButtonReleasedEvent: 1"


def test_categories_of_keyboard_event():
    event = KeyPressedEvent(10, 1)
    assert event.is_in_category(EventCategory.KEYBOARD)
    assert event.is_in_category(EventCategory.INPUT)
    assert not event.is_in_category(EventCategory.MOUSE)
    assert not event.is_in_category(EventCategory.APPLICATION)


def test_categories_of_mouse_events():
    assert MouseMovedEvent(0, 0).is_in_category(EventCategory.MOUSE)
    assert not MouseMovedEvent(0, 0).is_in_category(EventCategory.MOUSE_BUTTON)
    button = MouseButtonPressedEvent(0)
    assert button.is_in_category(EventCategory.MOUSE_BUTTON)
    assert not button.is_in_category(EventCategory.MOUSE)


def test_window_event_in_application_category_only():
    event = WindowCloseEvent()
    assert event.is_in_category(EventCategory.APPLICATION)
    assert not event.is_in_category(EventCategory.INPUT)


@pytest.mark.parametrize("cls, args", [(Event, ()), (KeyEvent, (1,)), (MouseButtonEvent, (1,))])
def test_abstract_events_cannot_be_created(cls, args):
    with pytest.raises(TypeError):
        cls(*args)


def test_new_event_is_not_handled():
    assert KeyReleasedEvent(3).handled is False


def test_dispatch_matching_type_sets_handled():
    event = WindowCloseEvent()
    seen = []

    def handler(e):
        seen.append(e)
        return True

    assert EventDispatcher(event).dispatch(WindowCloseEvent, handler) is True
    assert seen == [event]
    assert event.handled is True


def test_dispatch_result_false_leaves_unhandled():
    event = WindowCloseEvent()
    assert EventDispatcher(event).dispatch(WindowCloseEvent, lambda e: False) is True
    assert event.handled is False


def test_dispatch_other_type_does_not_call():
    event = KeyPressedEvent(1, 0)
    calls = []
    result = EventDispatcher(event).dispatch(KeyReleasedEvent, lambda e: calls.append(e) or True)
    assert result is False
    assert calls == []
    assert event.handled is False