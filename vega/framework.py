"""A minimal stand-alone game loop that shows one background sprite."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Any, Iterable, Optional, Protocol

from .events import EventType, InputEvent
from .gameobject import SpriteGo
from .inputs import InputManager
from .resources import ResourceManager

_BACKGROUND_TEXTURE = "res/graphics/background.png"


class _RenderWindow(Protocol):
    def create(self, width: int, height: int, name: str) -> None: ...

    def is_open(self) -> bool: ...

    def poll_events(self) -> Iterable[InputEvent]: ...

    def close(self) -> None: ...

    def clear(self) -> None: ...

    def draw(self, item: Any) -> None: ...

    def display(self) -> None: ...


def _read_file(path: str) -> bytes:
    return Path(path).read_bytes()


class Framework:
    """Window, clock and input state for a simple game loop."""

    def __init__(self) -> None:
        self.time_scale = 1.0
        self.time = 0.0
        self.delta_time = 0.0
        self.real_time = 0.0
        self.real_delta_time = 0.0
        self.input = InputManager()
        self.textures: ResourceManager[Any] = ResourceManager(_read_file, b"")
        self._window: Optional[_RenderWindow] = None
        self._clock = time.perf_counter()

    def init(self, width: int, height: int, name: str, window: _RenderWindow) -> None:
        """Open ``window`` with the given size and title."""
        window.create(width, height, name)
        self._window = window

    def tick(self, real_delta: float) -> None:
        """Advance the clocks by one frame of ``real_delta`` seconds."""
        self.real_delta_time = real_delta
        self.delta_time *= self.time_scale
        self.real_time += real_delta
        self.time += self.delta_time

    def _restart_clock(self) -> float:
        now = time.perf_counter()
        elapsed, self._clock = now - self._clock, now
        return elapsed

    def do(self) -> None:
        """Run the loop until the window closes."""
        if self._window is None:
            raise RuntimeError("framework has not been initialised with a window")
        window = self._window
        background = SpriteGo(_BACKGROUND_TEXTURE, self.textures)
        background.init()
        background.release()

        self._restart_clock()
        while window.is_open():
            self.tick(self._restart_clock())
            self.input.clear()
            for event in window.poll_events():
                if event.type is EventType.CLOSED:
                    window.close()
                self.input.update_event(event)
            window.clear()
            background.draw(window)
            window.display()

        background.release()

    def release(self) -> None:
        """Drop loaded textures and the window reference."""
        self.textures.unload_all()
        self._window = None