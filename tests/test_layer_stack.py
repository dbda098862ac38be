from ranv.layer import Layer
from ranv.layer_stack import LayerStack


def _names(layers):
    return [layer.name for layer in layers]


def test_empty_stack():
    stack = LayerStack()
    assert len(stack) == 0
    assert list(stack) == []


def test_pushed_layer_goes_beneath_earlier_layers():
    stack = LayerStack()
    stack.push_layer(Layer("a"))
    stack.push_layer(Layer("b"))
    assert _names(stack) == ["b", "a"]


def test_overlays_stay_on_top():
    stack = LayerStack()
    stack.push_layer(Layer("a"))
    stack.push_overlay(Layer("o1"))
    stack.push_layer(Layer("b"))
    stack.push_overlay(Layer("o2"))
    assert _names(stack) == ["b", "a", "o1", "o2"]
    assert len(stack) == 4


def test_reversed_is_event_order():
    stack = LayerStack()
    stack.push_layer(Layer("a"))
    stack.push_overlay(Layer("o"))
    assert _names(reversed(stack)) == list(reversed(_names(stack)))
    assert _names(reversed(stack))[0] == "o"


def test_pop_layer_removes_that_instance():
    stack = LayerStack()
    a, b = Layer("same"), Layer("same")
    stack.push_layer(a)
    stack.push_layer(b)
    stack.pop_layer(a)
    assert list(stack) == [b]
    assert all(layer is not a for layer in stack)


def test_pop_missing_is_ignored():
    stack = LayerStack()
    kept = Layer("kept")
    stack.push_layer(kept)
    stack.pop_layer(Layer("stranger"))
    stack.pop_overlay(Layer("stranger"))
    assert list(stack) == [kept]


def test_pop_overlay():
    stack = LayerStack()
    layer, overlay = Layer("l"), Layer("o")
    stack.push_layer(layer)
    stack.push_overlay(overlay)
    stack.pop_overlay(overlay)
    assert list(stack) == [layer]


def test_push_after_pop_still_below_overlays():
    stack = LayerStack()
    a = Layer("a")
    stack.push_layer(a)
    stack.push_overlay(Layer("o"))
    stack.pop_layer(a)
    stack.push_layer(Layer("c"))
    assert _names(stack) == ["c", "o"]