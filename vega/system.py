"""The engine core: layer registry, frame loop and reset cycle."""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, ClassVar, List, Optional, Protocol

from .collision import ColliderManager
from .events import EventQueue
from .layer import Layer, LayerArray
from .resources import ResourceManager

_CLEAR_COLOR = "red"


@dataclass(frozen=True)
class WindowInfo:
    """Size and title of the window an application asks for."""

    width: int
    height: int
    title: str


class _Window(Protocol):
    def create(self) -> None: ...

    def release(self) -> None: ...

    def is_open(self) -> bool: ...

    def poll_events(self, queue: EventQueue) -> None: ...

    def present(self, frame: "_RenderTexture") -> None: ...


class _RenderTexture:
    """Off-screen frame that layers draw into."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self.width = width
        self.height = height
        self.clear_color: Optional[str] = None
        self.items: List[Any] = []
        self.displayed = False

    def clear(self, color: str) -> None:
        self.clear_color = color
        self.items = []
        self.displayed = False

    def draw(self, item: Any) -> None:
        self.items.append(item)

    def display(self) -> None:
        self.displayed = True


def _read_file(path: str) -> bytes:
    return Path(path).read_bytes()


class System:
    """Owns the layers and drives them one frame at a time."""

    _instance: ClassVar[Optional["System"]] = None

    def __init__(self) -> None:
        self._window: Optional[_Window] = None
        self._width = 0
        self._height = 0
        self._layers = LayerArray()
        self._paused = False
        self._playing = True
        self._reset = False
        self._target = _RenderTexture()
        self.time_scale = 1.0
        self.textures: ResourceManager[bytes] = ResourceManager(_read_file, b"")
        self.fonts: ResourceManager[bytes] = ResourceManager(_read_file, b"")

    @classmethod
    def get_instance(cls) -> "System":
        """Return the process-wide system."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def layers(self) -> List[Layer]:
        """The layers currently active, overlays first."""
        return list(self._layers)

    def attach_layer(self, layer: Layer) -> None:
        """Queue ``layer`` for the next frame and let it set itself up."""
        self._layers.insert_layer(layer)
        layer.on_attach()

    def attach_overlay(self, overlay: Layer) -> None:
        """Queue ``overlay`` ahead of the layers and let it set itself up."""
        self._layers.insert_overlay(overlay)
        overlay.on_attach()

    def detach_layer(self, layer: Layer) -> None:
        """Queue ``layer`` for removal at the end of the frame."""
        self._layers.remove_layer(layer)
        layer.on_detach()

    def detach_overlay(self, overlay: Layer) -> None:
        """Queue ``overlay`` for removal at the end of the frame."""
        self._layers.remove_overlay(overlay)
        overlay.on_detach()

    def find_layer(self, class_name: str) -> Optional[Layer]:
        """Return the first active layer named ``class_name``, or None."""
        return next((layer for layer in self._layers if layer.name == class_name), None)

    def set_pause(self, enabled: bool) -> None:
        """Pause or resume; pausing sets the time scale to zero."""
        self._paused = enabled
        self.time_scale = 0.0 if enabled else 1.0

    def set_reset(self, enabled: bool) -> None:
        """Request (or cancel) a restart; a request ends the running loop."""
        self._playing = not enabled
        self._reset = enabled

    def is_reset(self) -> bool:
        """True while a restart is pending."""
        return self._reset

    def is_paused(self) -> bool:
        """True while the game is paused."""
        return self._paused

    def exit_program(self) -> None:
        """Stop the loop without restarting."""
        self._playing = False
        self._reset = False

    def init(self, info: WindowInfo, window: _Window) -> None:
        """Open ``window`` at the size ``info`` asks for; ignored once initialised."""
        if self._window is not None:
            return
        self._window = window
        window.create()
        self._width = info.width
        self._height = info.height
        self._target = _RenderTexture(info.width, info.height)

    def _require_window(self) -> _Window:
        if self._window is None:
            raise RuntimeError("system has not been initialised with a window")
        return self._window

    def step(self, dt: float) -> None:
        """Run one frame: insert, dispatch events, update, collide, collect, draw."""
        window = self._require_window()
        self.time_scale = 0.0 if self._paused else 1.0
        self._layers.apply_insertions()

        queue = EventQueue()
        window.poll_events(queue)
        queue.dispatch_to(self._layers)

        for layer in self._layers:
            layer.on_update(dt)

        colliders = ColliderManager.get_instance()
        for first in colliders:
            for second in colliders:
                first.is_collided(second)

        self._layers.collect_garbage()

        target = self._target
        target.clear(_CLEAR_COLOR)
        for layer in self._layers:
            layer.on_draw(target)
        for layer in self._layers:
            layer.on_ui(target)
        for collider in colliders:
            if collider.display:
                target.draw(collider)
        target.display()

        for layer in self._layers:
            layer.on_imgui()
        window.present(target)

    def run(self) -> None:
        """Step frames until the game stops playing or the window closes."""
        window = self._require_window()
        last = time.perf_counter()
        while self._playing and window.is_open():
            now = time.perf_counter()
            dt, last = now - last, now
            self.step(dt)

    def reset(self) -> None:
        """Carry out a pending restart: drop all layers and loaded resources."""
        if not self._reset:
            return
        self.time_scale = 1.0
        self._playing = True
        self._paused = False
        self._reset = False
        self._layers.release()
        self._layers = LayerArray()
        self.textures.unload_all()
        self.fonts.unload_all()

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height


def begin_process(
    create_application: Callable[[], WindowInfo],
    runtime: Callable[[], None],
    window: _Window,
) -> System:
    """Start the shared system and run it, restarting for as long as a reset is requested."""
    info = create_application()
    system = System.get_instance()
    system.init(info, window)
    while True:
        system.reset()
        runtime()
        system.run()
        if not system.is_reset():
            break
    system.reset()
    return system