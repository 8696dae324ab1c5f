"""Layers: the objects the engine updates, draws and feeds with events."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Iterator, List, Optional

from .collision import Collider, ColliderManager, FloatRect, Vector2
from .events import Event


class Layer(ABC):
    """Base for everything the engine manages; subclasses override the hooks they need."""

    _count: ClassVar[int] = 0

    def __init__(self) -> None:
        Layer._count += 1
        self._body: Optional[Collider] = None
        self._released = False

    def on_attach(self) -> None:
        """Called when the layer is attached to the system."""

    def on_detach(self) -> None:
        """Called when the layer is detached from the system."""

    def on_event(self, event: Event) -> None:
        """Handle an input event."""

    def on_update(self, dt: float) -> None:
        """Advance the layer by ``dt`` seconds."""

    def on_draw(self, device: Any) -> None:
        """Draw the layer's world content."""

    def on_ui(self, device: Any) -> None:
        """Draw the layer's interface content."""

    def on_imgui(self) -> None:
        """Draw debug widgets."""

    def on_collide(self, layer: Optional["Layer"], class_name: str) -> None:
        """Handle a collision with ``layer`` whose name is ``class_name``."""

    @property
    @abstractmethod
    def name(self) -> str:
        """The name used to find the layer."""

    @property
    def collider(self) -> Optional[Collider]:
        return self._body

    def is_activated_collider(self) -> bool:
        """True if the layer has an active collider."""
        return self._body is not None and self._body.activated

    def activate_collider(self, flags: bool, class_name: str) -> None:
        """Give the layer a registered collider, or take it away.

        Does nothing while a collider is already active.
        """
        if self.is_activated_collider():
            return
        manager = ColliderManager.get_instance()
        if flags:
            if self._body is None or self._body not in manager:
                self._body = manager.attach()
            self._body.activate(True, class_name, self)
        elif self._body is not None:
            self._body.activate(False, "", None)
            manager.detach(self._body)
            self._body = None

    def _require_body(self) -> Collider:
        if self._body is None:
            raise RuntimeError(f"layer {self.name!r} has no collider")
        return self._body

    def set_collider(
        self, origin: Vector2, rect: FloatRect, scale: Vector2 = (1.0, 1.0)
    ) -> None:
        """Place the collider over ``rect`` shifted by ``origin``."""
        body = self._require_body()
        shifted = FloatRect(
            rect.left + origin[0], rect.top + origin[1], rect.width, rect.height
        )
        body.set(origin, shifted, scale)

    def set_collider_display_mode(self, enabled: bool) -> None:
        """Choose whether the collider box is drawn."""
        self._require_body().set_display(enabled)

    def release(self) -> None:
        """Drop the layer's collider and remove it from the live count."""
        if self._released:
            return
        self._released = True
        Layer._count -= 1
        if self._body is not None:
            self._body.activate(False, "", None)
            ColliderManager.get_instance().detach(self._body)
            self._body = None

    @classmethod
    def get_count(cls) -> int:
        """Number of layers created and not yet released."""
        return Layer._count


class LayerArray:
    """Ordered layers, overlays first, with insertions and removals deferred to frame boundaries."""

    def __init__(self) -> None:
        self._layers: List[Layer] = []
        self._insert_index = 0
        self._add_layers: List[Layer] = []
        self._add_overlays: List[Layer] = []
        self._delete_layers: List[Layer] = []
        self._delete_overlays: List[Layer] = []

    def insert_layer(self, layer: Layer) -> bool:
        """Queue ``layer`` for appending; False if it is already present."""
        if layer in self:
            return False
        self._add_layers.append(layer)
        return True

    def insert_overlay(self, overlay: Layer) -> bool:
        """Queue ``overlay`` for insertion ahead of the layers; False if present."""
        if overlay in self:
            return False
        self._add_overlays.append(overlay)
        return True

    def remove_layer(self, layer: Layer) -> bool:
        """Queue ``layer`` for removal; False if it is not present."""
        if layer not in self:
            return False
        self._delete_layers.append(layer)
        return True

    def remove_overlay(self, overlay: Layer) -> bool:
        """Queue ``overlay`` for removal; False if it is not present."""
        if overlay not in self:
            return False
        self._delete_overlays.append(overlay)
        return True

    def apply_insertions(self) -> None:
        """Add the queued layers and overlays."""
        self._layers.extend(self._add_layers)
        for overlay in self._add_overlays:
            self._layers.insert(self._insert_index, overlay)
            self._insert_index += 1
        self._add_layers.clear()
        self._add_overlays.clear()

    def _discard(self, layer: Layer) -> bool:
        for position, item in enumerate(self._layers):
            if item is layer:
                del self._layers[position]
                return True
        return False

    def collect_garbage(self) -> None:
        """Remove the queued layers, detaching and releasing each."""
        for layer in self._delete_layers:
            if self._discard(layer):
                self._insert_index = max(0, self._insert_index - 1)
                layer.on_detach()
                layer.release()
        for overlay in self._delete_overlays:
            if self._discard(overlay):
                overlay.on_detach()
                overlay.release()
        self._delete_layers.clear()
        self._delete_overlays.clear()

    def release(self) -> None:
        """Release every layer held and empty the array."""
        for layer in self._layers:
            layer.release()
        self._layers.clear()
        self._insert_index = 0

    def __contains__(self, layer: object) -> bool:
        return any(item is layer for item in self._layers)

    def __iter__(self) -> Iterator[Layer]:
        return iter(list(self._layers))

    def __len__(self) -> int:
        return len(self._layers)