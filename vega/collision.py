"""Axis-aligned box colliders and the registry that owns them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Iterator, List, Optional, Tuple

Vector2 = Tuple[float, float]

_OUTLINE_THICKNESS = 3.0


@dataclass(frozen=True)
class FloatRect:
    """A rectangle given by its top-left corner and its size."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class Rect:
    """Integer world-space bounds: ``x``/``y`` is the top-left and ``w``/``h`` the bottom-right corner."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0


@dataclass
class _Box:
    """The outlined rectangle drawn to visualise a collider."""

    origin: Vector2 = (0.0, 0.0)
    position: Vector2 = (0.0, 0.0)
    size: Vector2 = (0.0, 0.0)
    scale: Vector2 = (1.0, 1.0)
    fill_color: str = "white"
    outline_color: str = "white"
    outline_thickness: float = 0.0

    def _transform(self, x: float, y: float) -> Vector2:
        ox, oy = self.origin
        px, py = self.position
        sx, sy = self.scale
        return px + sx * (x - ox), py + sy * (y - oy)

    def global_bounds(self) -> FloatRect:
        """Bounds of the box, outline included, after origin, scale and position."""
        t = self.outline_thickness
        w, h = self.size
        corners = [
            self._transform(x, y) for x in (-t, w + t) for y in (-t, h + t)
        ]
        xs = [c[0] for c in corners]
        ys = [c[1] for c in corners]
        return FloatRect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))


class Collider:
    """A box that reports overlaps to the layer that owns it."""

    def __init__(self) -> None:
        self._box = _Box()
        self._class_name = ""
        self._owner: Optional[Any] = None
        self._activated = False
        self._display = False
        self._rect = Rect()

    def set(self, origin: Vector2, rect: FloatRect, scale: Vector2) -> None:
        """Place the box and recompute its world-space bounds."""
        self._box.origin = (float(origin[0]), float(origin[1]))
        self._box.position = (rect.left, rect.top)
        self._box.size = (rect.width, rect.height)
        self._box.scale = (float(scale[0]), float(scale[1]))
        self._box.fill_color = "transparent"
        self._box.outline_color = "white"
        self._box.outline_thickness = _OUTLINE_THICKNESS
        bounds = self._box.global_bounds()
        x = int(bounds.left)
        y = int(bounds.top)
        self._rect = Rect(x, y, int(x + bounds.width), int(y + bounds.height))

    def set_display(self, enabled: bool) -> None:
        """Choose whether the box is drawn."""
        self._display = enabled

    def activate(self, flags: bool, class_name: str, layer: Optional[Any]) -> None:
        """Switch the collider on or off and record its class name and owner."""
        self._activated = flags
        self._class_name = class_name
        self._owner = layer

    @property
    def rect(self) -> Rect:
        return self._rect

    @property
    def display(self) -> bool:
        return self._display

    @property
    def activated(self) -> bool:
        return self._activated

    @property
    def class_name(self) -> str:
        return self._class_name

    @property
    def owner(self) -> Optional[Any]:
        return self._owner

    @property
    def outline_color(self) -> str:
        return self._box.outline_color

    @outline_color.setter
    def outline_color(self, color: str) -> None:
        self._box.outline_color = color

    @property
    def box_bounds(self) -> FloatRect:
        """World-space bounds of the drawn box."""
        return self._box.global_bounds()

    def is_collided(self, other: "Collider") -> bool:
        """Test for overlap with ``other``; on a hit, notify the owner and mark both red."""
        if self is other or self._class_name == other._class_name:
            return False
        mine, theirs = self._rect, other._rect
        if mine.w < theirs.x or mine.x > theirs.w:
            return False
        if mine.h < theirs.y or mine.y > theirs.h:
            return False
        if self._owner is not None:
            other_owner = other._owner
            other_name = other_owner.name if other_owner is not None else ""
            self._owner.on_collide(other_owner, other_name)
        other.outline_color = "red"
        self.outline_color = "red"
        return True


class ColliderManager:
    """Owns every live collider; the frame loop tests them pairwise."""

    _instance: ClassVar[Optional["ColliderManager"]] = None

    def __init__(self) -> None:
        self._colliders: List[Collider] = []

    @classmethod
    def get_instance(cls) -> "ColliderManager":
        """Return the process-wide manager."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def attach(self) -> Collider:
        """Create, register and return a new collider."""
        collider = Collider()
        self._colliders.append(collider)
        return collider

    def detach(self, collider: Collider) -> None:
        """Unregister ``collider``; unknown colliders are ignored."""
        self._colliders = [c for c in self._colliders if c is not collider]

    def __contains__(self, collider: object) -> bool:
        return any(c is collider for c in self._colliders)

    def __iter__(self) -> Iterator[Collider]:
        return iter(list(self._colliders))

    def __len__(self) -> int:
        return len(self._colliders)