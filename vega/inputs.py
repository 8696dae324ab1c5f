"""Per-frame keyboard state: keys pressed, held and released."""

from __future__ import annotations

from typing import Hashable, List

from .events import EventType, InputEvent


class InputManager:
    """Tracks key state from the stream of window events."""

    def __init__(self) -> None:
        self._down: List[Hashable] = []
        self._held: List[Hashable] = []
        self._up: List[Hashable] = []

    def clear(self) -> None:
        """Forget this frame's presses and releases; held keys stay held."""
        self._down.clear()
        self._up.clear()

    def update_event(self, event: InputEvent) -> None:
        """Fold one window event into the key state."""
        if event.type is EventType.KEY_PRESSED:
            if event.key not in self._held:
                self._held.append(event.key)
                self._down.append(event.key)
        elif event.type is EventType.KEY_RELEASED:
            self._held = [key for key in self._held if key != event.key]
            self._up.append(event.key)

    def get_key_down(self, key: Hashable) -> bool:
        """True if ``key`` went down during this frame."""
        return key in self._down

    def get_key(self, key: Hashable) -> bool:
        """True while ``key`` is held."""
        return key in self._held

    def get_key_up(self, key: Hashable) -> bool:
        """True if ``key`` was released during this frame."""
        return key in self._up