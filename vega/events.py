"""Input events and the per-frame queue that hands them to layers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Hashable, Iterable, Iterator, List, Optional, Protocol, Union


class EventType(Enum):
    """Kinds of window input events."""

    CLOSED = auto()
    RESIZED = auto()
    KEY_PRESSED = auto()
    KEY_RELEASED = auto()
    TEXT_ENTERED = auto()
    MOUSE_BUTTON_PRESSED = auto()
    MOUSE_BUTTON_RELEASED = auto()
    MOUSE_MOVED = auto()


@dataclass(frozen=True)
class InputEvent:
    """A raw event from the window: its type and, for key events, the key."""

    type: EventType
    key: Optional[Hashable] = None


class _EventHandler(Protocol):
    def on_event(self, event: "Event") -> None: ...


class Event:
    """An input event that a layer may mark as used to stop its propagation."""

    def __init__(self, source: Union[InputEvent, "Event"]) -> None:
        if isinstance(source, Event):
            self._event = source._event
            self._used = source._used
        else:
            self._event = source
            self._used = False

    def get(self) -> InputEvent:
        """Return the wrapped raw event."""
        return self._event

    def use(self) -> None:
        """Mark the event as consumed."""
        self._used = True

    @property
    def used(self) -> bool:
        """Whether a handler has consumed the event."""
        return self._used

    def __repr__(self) -> str:
        return f"Event({self._event!r}, used={self._used})"


class EventQueue:
    """Events gathered during one frame."""

    def __init__(self) -> None:
        self._events: List[Event] = []

    def push(self, event: InputEvent) -> None:
        """Append a raw event to the queue."""
        self._events.append(Event(event))

    def dispatch_to(self, layers: Iterable[_EventHandler]) -> None:
        """Offer each event to the layers in order until one uses it."""
        layers = list(layers)
        for event in self._events:
            for layer in layers:
                if event.used:
                    break
                layer.on_event(event)

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(self._events)