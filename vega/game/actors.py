"""Background actors that wander across the screen: bees and clouds."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Tuple

from ..collision import FloatRect, Vector2
from ..layer import Layer
from ..mathutil import Direction, get_random
from ..resources import ResourceManager
from ..system import System

_BEE_TEXTURE = "res/graphics/bee.png"
_CLOUD_TEXTURE = "res/graphics/cloud.png"
_PHASE_LIMIT = 6.3
_CLOUD_DRIFT = 20.0
_PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def _texture_size(texture: Any) -> Tuple[float, float]:
    """Width and height of a texture object or of PNG-encoded bytes."""
    size = getattr(texture, "size", None)
    if size is not None and not callable(size):
        return float(size[0]), float(size[1])
    if isinstance(texture, (bytes, bytearray, memoryview)):
        data = bytes(texture)
        if len(data) >= 24 and data[:8] == _PNG_SIGNATURE and data[12:16] == b"IHDR":
            width, height = struct.unpack(">II", data[16:24])
            return float(width), float(height)
    raise ValueError("cannot determine the size of the texture")


@dataclass
class _Sprite:
    """A textured quad with origin, scale and position."""

    texture: Any = None
    position: Vector2 = (0.0, 0.0)
    scale: Vector2 = (1.0, 1.0)
    origin: Vector2 = (0.0, 0.0)
    size: Vector2 = (0.0, 0.0)

    def set_texture(self, texture: Any) -> None:
        """Use ``texture``; the drawn area is taken from the first texture only."""
        self.texture = texture
        if self.size == (0.0, 0.0):
            self.size = _texture_size(texture)

    @property
    def local_bounds(self) -> FloatRect:
        return FloatRect(0.0, 0.0, self.size[0], self.size[1])

    @property
    def global_bounds(self) -> FloatRect:
        ox, oy = self.origin
        px, py = self.position
        sx, sy = self.scale
        w, h = self.size
        xs = [px + sx * (x - ox) for x in (0.0, w)]
        ys = [py + sy * (y - oy) for y in (0.0, h)]
        return FloatRect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))


def _resolve(system: Optional[System], manager: Optional[ResourceManager[Any]], kind: str):
    system = System.get_instance() if system is None else system
    if manager is None:
        manager = getattr(system, kind)
    return system, manager


class Bee(Layer):
    """A bee that flies across the lower screen in a wavy line."""

    _phase: ClassVar[float] = 0.0

    def __init__(
        self,
        system: Optional[System] = None,
        textures: Optional[ResourceManager[Any]] = None,
    ) -> None:
        super().__init__()
        self._system, self._textures = _resolve(system, textures, "textures")
        self.sprite = _Sprite()
        self.position: Vector2 = (0.0, 0.0)
        self.direction = Direction.DEFAULT
        self.speed = 0.0
        self._wall = FloatRect()

    @property
    def wall(self) -> FloatRect:
        """Horizontal limits beyond which the bee starts over."""
        return self._wall

    def on_attach(self) -> None:
        self._textures.load(_BEE_TEXTURE)
        texture = self._textures.get(_BEE_TEXTURE)
        self.sprite.set_texture(texture)
        width, _ = _texture_size(texture)
        self._wall = FloatRect(left=-width, width=self._system.width + width)
        self.reset_pos()

    def on_update(self, dt: float) -> None:
        self.move(dt, self.direction, self.speed)
        if self.collide_wall():
            self.reset_pos()

    def on_draw(self, device: Any) -> None:
        device.draw(self.sprite)

    @property
    def name(self) -> str:
        return "Bee"

    def reset_pos(self) -> None:
        """Pick a new side, height and speed and place the bee off screen."""
        self.direction = Direction.LEFT if get_random(0, 1) else Direction.RIGHT
        x = self._wall.left if self.direction is Direction.RIGHT else self._wall.width
        self.position = (x, float(get_random(600, 800)))
        self.sprite.position = self.position
        self.sprite.scale = (1.0, 1.0) if self.direction is Direction.LEFT else (-1.0, 1.0)
        self.speed = float(get_random(100, 200))

    def move(self, dt: float, direction: Direction, speed: float) -> None:
        """Advance ``speed * dt`` horizontally with a sinusoidal bob."""
        Bee._phase = Bee._phase + dt if Bee._phase < _PHASE_LIMIT else 0.0
        x, y = self.position
        step = speed * dt
        if direction is Direction.LEFT:
            x -= step
            y += step * math.sin(Bee._phase)
        elif direction is Direction.RIGHT:
            x += step
            y += step * math.sin(Bee._phase)
        self.position = (x, y)
        self.sprite.position = self.position

    def collide_wall(self) -> bool:
        """True once the bee has left the screen on the side it heads to."""
        x = self.position[0]
        if self.direction is Direction.LEFT:
            return x < self._wall.left
        if self.direction is Direction.RIGHT:
            return x > self._wall.width
        return False


class Cloud(Layer):
    """A cloud that drifts slowly across the sky."""

    _phase: ClassVar[float] = 0.0
    _wall: ClassVar[FloatRect] = FloatRect()

    def __init__(
        self,
        system: Optional[System] = None,
        textures: Optional[ResourceManager[Any]] = None,
    ) -> None:
        super().__init__()
        self._system, self._textures = _resolve(system, textures, "textures")
        self.sprite = _Sprite()
        self.position: Vector2 = (0.0, 0.0)
        self.direction = Direction.DEFAULT
        self.speed = 0.0

    @property
    def wall(self) -> FloatRect:
        """Horizontal limits shared by all clouds."""
        return Cloud._wall

    def on_attach(self) -> None:
        self._textures.load(_CLOUD_TEXTURE)
        texture = self._textures.get(_CLOUD_TEXTURE)
        self.sprite.set_texture(texture)
        width, _ = _texture_size(texture)
        Cloud._wall = FloatRect(left=-width, width=self._system.width + width)
        self.reset_pos()

    def on_update(self, dt: float) -> None:
        self.move(dt, self.direction, self.speed)
        if self.collide_wall():
            self.reset_pos()

    def on_draw(self, device: Any) -> None:
        device.draw(self.sprite)

    @property
    def name(self) -> str:
        return "Cloud"

    def reset_pos(self) -> None:
        """Pick a new side, height and speed and place the cloud off screen."""
        wall = Cloud._wall
        self.direction = Direction.LEFT if get_random(0, 1) else Direction.RIGHT
        x = wall.left if self.direction is Direction.RIGHT else wall.width
        self.position = (x, float(get_random(0, 250)))
        self.sprite.position = self.position
        self.sprite.scale = (-1.0, 1.0) if self.direction is Direction.LEFT else (1.0, 1.0)
        self.speed = float(get_random(50, 100))

    def move(self, dt: float, direction: Direction, speed: float) -> None:
        """Advance ``speed * dt`` horizontally with a gentle vertical sway."""
        Cloud._phase = Cloud._phase + dt if Cloud._phase < _PHASE_LIMIT else 0.0
        x, y = self.position
        sway = _CLOUD_DRIFT * dt * math.sin(Cloud._phase)
        if direction is Direction.LEFT:
            x -= speed * dt
            y += sway
        elif direction is Direction.RIGHT:
            x += speed * dt
            y += sway
        self.position = (x, y)
        self.sprite.position = self.position

    def collide_wall(self) -> bool:
        """True once the cloud has left the screen on the side it heads to."""
        x = self.position[0]
        if self.direction is Direction.LEFT:
            return x < Cloud._wall.left
        if self.direction is Direction.RIGHT:
            return x > Cloud._wall.width
        return False