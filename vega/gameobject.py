"""Simple game objects for the stand-alone framework."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Tuple

from .resources import ResourceManager

Vector2 = Tuple[float, float]


@dataclass
class GameObject:
    """Base object with an activity flag, a position and an age in seconds."""

    active: bool = True
    position: Vector2 = (0.0, 0.0)
    age: float = 0.0
    _start: Vector2 = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._start = self.position

    def init(self) -> None:
        """Prepare the object for use."""
        self._start = self.position

    def release(self) -> None:
        """Stop the object taking part in the game."""
        self.active = False

    def reset(self) -> None:
        """Return the object to its starting position and make it active again."""
        self.position = self._start
        self.active = True
        self.age = 0.0

    def update(self, dt: float) -> None:
        """Advance the object's age by ``dt`` seconds while it is active."""
        if self.active:
            self.age += dt

    def draw(self, window: Any) -> None:
        """Draw the object onto ``window``."""


@dataclass
class _Sprite:
    texture: Any = None
    position: Vector2 = (0.0, 0.0)


class SpriteGo(GameObject):
    """A game object drawn as a single textured sprite."""

    def __init__(self, texture_id: str, textures: ResourceManager[Any]) -> None:
        super().__init__()
        self.texture_id = texture_id
        self._textures = textures
        self.sprite = _Sprite()

    def init(self) -> None:
        """Load the texture and attach it to the sprite; KeyError if it failed to load."""
        super().init()
        self._textures.load(self.texture_id)
        self.sprite.texture = self._textures.get(self.texture_id)

    def draw(self, window: Any) -> None:
        """Draw the sprite onto ``window``."""
        window.draw(self.sprite)