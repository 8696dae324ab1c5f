"""The lumberjack the player controls."""

from __future__ import annotations

from typing import Any, Optional

from ..layer import Layer
from ..mathutil import Direction
from ..resources import ResourceManager
from ..system import System
from .actors import _Sprite

_PLAYER_TEXTURE = "res/graphics/player.png"
_RIP_TEXTURE = "res/graphics/rip.png"
_LEFT_KEY = "left"
_RIGHT_KEY = "right"
_SIDE_OFFSET = 50.0
_GROUND_OFFSET = 380.0


class Player(Layer):
    """Stands on either side of the tree and dies when hit by a branch."""

    def __init__(
        self,
        system: Optional[System] = None,
        textures: Optional[ResourceManager[Any]] = None,
    ) -> None:
        super().__init__()
        self._system = System.get_instance() if system is None else system
        self._textures = self._system.textures if textures is None else textures
        self.sprite = _Sprite()
        self.position = (0.0, 0.0)
        self.width = 0
        self.height = 0
        self._origin = (0.0, 0.0)
        self.flipped = False
        self._alive = False

    def on_attach(self) -> None:
        self._textures.load(_PLAYER_TEXTURE)
        self.sprite.set_texture(self._textures.get(_PLAYER_TEXTURE))
        self.sprite.origin = (-150.0, 0.0)
        self._origin = self.sprite.origin
        bounds = self.sprite.local_bounds
        self.width = int(bounds.width)
        self.height = int(bounds.height)
        self.position = (
            self._system.width * 0.5 + _SIDE_OFFSET,
            self._system.height - _GROUND_OFFSET,
        )
        self.sprite.position = self.position
        self._alive = True
        self.flipped = False
        self.activate_collider(True, self.name)
        self.set_collider(self._origin, bounds)
        self.set_collider_display_mode(False)

    def on_draw(self, device: Any) -> None:
        device.draw(self.sprite)

    def on_event(self, event: Any) -> None:
        if self._system.is_paused() or not self._alive:
            return
        from .ui import UI

        target = self._system.find_layer("UI")
        ui = target if isinstance(target, UI) else None
        raw = event.get()
        if raw.type.name != "KEY_PRESSED":
            return
        if raw.key == _LEFT_KEY:
            self.move(Direction.LEFT)
            self.flipped = True
            if ui is not None:
                ui.regain_timebar(100.0)
                ui.add_score(10)
        if raw.key == _RIGHT_KEY:
            self.move(Direction.RIGHT)
            self.flipped = False
            if ui is not None:
                ui.regain_timebar(30.0)
                ui.add_score(10)

    def on_update(self, dt: float) -> None:
        if self._system.is_paused() or not self._alive:
            return
        self.set_collider_display_mode(True)
        self.set_collider(self.sprite.origin, self.sprite.global_bounds)

    def on_collide(self, layer: Any, class_name: str) -> None:
        if class_name != "Branch":
            return
        destroy = getattr(layer, "destroy", None)
        if callable(destroy):
            destroy(True)
            self.dead(True)

    @property
    def name(self) -> str:
        return "Player"

    def move(self, direction: Direction) -> None:
        """Jump to the given side of the tree, facing it."""
        centre = self._system.width * 0.5
        if direction is Direction.LEFT:
            self.sprite.scale = (-1.0, 1.0)
            self.position = (centre - _SIDE_OFFSET, self.position[1])
        elif direction is Direction.RIGHT:
            self.sprite.scale = (1.0, 1.0)
            self.position = (centre + _SIDE_OFFSET, self.position[1])
        else:
            return
        self.sprite.position = self.position

    def dead(self, enabled: bool) -> None:
        """Replace the player with a gravestone and pause the game."""
        self._textures.load(_RIP_TEXTURE)
        self.sprite.set_texture(self._textures.get(_RIP_TEXTURE))
        self._alive = False
        self._system.set_pause(True)

    def is_alive(self) -> bool:
        """True until the player has died."""
        return self._alive