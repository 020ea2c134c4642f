"""Layers and the ordered stack that holds them."""

from __future__ import annotations

from typing import Iterator

from elmengine.events import Event
from elmengine.timestep import Timestep


class Layer:
    """A unit of per-frame logic; subclasses override the hooks they need.

    The default hooks keep simple bookkeeping: whether the layer is attached,
    the last timestep and event it saw, and how many UI frames it was drawn in.
    """

    def __init__(self, name: str = "Layer") -> None:
        self.name = name
        self.attached = False
        self.last_timestep: Timestep | None = None
        self.last_event: Event | None = None
        self.imgui_frames = 0

    def on_attach(self) -> None:
        """Called when the layer is pushed onto a stack."""
        self.attached = True

    def on_detach(self) -> None:
        """Called when the layer leaves its stack."""
        self.attached = False

    def on_update(self, ts: Timestep) -> None:
        """Called once per frame."""
        self.last_timestep = ts

    def on_event(self, event: Event) -> None:
        """Called for events travelling down the stack."""
        self.last_event = event

    def on_imgui_render(self) -> None:
        """Called when the debug UI is drawn."""
        self.imgui_frames += 1

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


class LayerStack:
    """Layers first, overlays after them; iteration runs bottom to top."""

    def __init__(self) -> None:
        self._layers: list[Layer] = []
        self._insert_ix = 0

    def push_layer(self, layer: Layer) -> None:
        self._layers.insert(self._insert_ix, layer)
        self._insert_ix += 1
        layer.on_attach()

    def push_overlay(self, layer: Layer) -> None:
        self._layers.append(layer)
        layer.on_attach()

    def _index_of(self, layer: Layer) -> int | None:
        return next((i for i, item in enumerate(self._layers) if item is layer), None)

    def pop_layer(self, layer: Layer) -> bool:
        """Remove a layer; return whether it was in the stack."""
        ix = self._index_of(layer)
        if ix is None:
            return False
        del self._layers[ix]
        self._insert_ix = max(self._insert_ix - 1, 0)
        layer.on_detach()
        return True

    def pop_overlay(self, layer: Layer) -> bool:
        """Remove an overlay; return whether it was in the stack."""
        ix = self._index_of(layer)
        if ix is None:
            return False
        del self._layers[ix]
        layer.on_detach()
        return True

    def close(self) -> None:
        """Detach every layer and empty the stack."""
        layers, self._layers = self._layers, []
        self._insert_ix = 0
        for layer in layers:
            layer.on_detach()

    def __enter__(self) -> LayerStack:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __iter__(self) -> Iterator[Layer]:
        return iter(list(self._layers))

    def __reversed__(self) -> Iterator[Layer]:
        return reversed(list(self._layers))

    def __len__(self) -> int:
        return len(self._layers)