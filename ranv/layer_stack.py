"""Ordered stack of layers with overlays kept on top."""

from __future__ import annotations

from typing import Iterator

from .layer import Layer


class LayerStack:
    """Holds layers and overlays in update order.

    A pushed layer is placed at the bottom of the stack, beneath layers pushed
    before it; overlays are always appended on top. Iterating goes bottom to
    top (update order); ``reversed`` goes top to bottom (event order).
    """

    def __init__(self) -> None:
        self._layers: list[Layer] = []
        self._insert_index = 0

    def push_layer(self, layer: Layer) -> None:
        self._layers.insert(self._insert_index, layer)

    def push_overlay(self, overlay: Layer) -> None:
        self._layers.append(overlay)

    def _index_of(self, layer: Layer) -> int | None:
        return next((i for i, item in enumerate(self._layers) if item is layer), None)

    def pop_layer(self, layer: Layer) -> None:
        """Remove a layer; nothing happens if it is not in the stack."""
        index = self._index_of(layer)
        if index is not None:
            del self._layers[index]
            self._insert_index = max(self._insert_index - 1, 0)

    def pop_overlay(self, overlay: Layer) -> None:
        """Remove an overlay; nothing happens if it is not in the stack."""
        index = self._index_of(overlay)
        if index is not None:
            del self._layers[index]

    def __iter__(self) -> Iterator[Layer]:
        return iter(self._layers)

    def __reversed__(self) -> Iterator[Layer]:
        return reversed(self._layers)

    def __len__(self) -> int:
        return len(self._layers)