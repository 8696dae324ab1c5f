"""Score display, state banners and the draining time bar."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from ..layer import Layer
from ..resources import ResourceManager
from ..system import System
from .player import Player

Vector2 = Tuple[float, float]

_FONT = "res/fonts/KOMIKAP_.ttf"
_TIME_BAR_WIDTH = 400.0
_TIME_BAR_HEIGHT = 80.0
_TIME_BAR_DURATION = 3.0


@dataclass
class _Text:
    string: str = ""
    character_size: int = 30
    fill_color: str = "white"
    position: Vector2 = (0.0, 0.0)
    origin: Vector2 = (0.0, 0.0)
    font: Any = None


@dataclass
class _RectangleShape:
    size: Vector2 = (0.0, 0.0)
    fill_color: str = "white"
    position: Vector2 = (0.0, 0.0)


def _text_bounds(font: Any, string: str, size: int) -> Vector2:
    measure = getattr(font, "measure", None)
    if callable(measure):
        width, height = measure(string, size)
        return float(width), float(height)
    return 0.0, 0.0


class UI(Layer):
    """Heads-up display: score, pause/game-over banners and the time bar."""

    def __init__(
        self,
        system: Optional[System] = None,
        fonts: Optional[ResourceManager[Any]] = None,
    ) -> None:
        super().__init__()
        self._system = System.get_instance() if system is None else system
        self._fonts = self._system.fonts if fonts is None else fonts
        self.score = 0
        self.score_text = _Text()
        self.game_start = _Text()
        self.game_over = _Text()
        self.state = _Text()
        self.time_bar = _RectangleShape()
        self.time_bar_width = 0.0
        self._time_bar_speed = 0.0

    def _banner(self, font: Any, string: str) -> _Text:
        width, height = _text_bounds(font, string, 70)
        return _Text(
            string=string,
            character_size=70,
            fill_color="white",
            position=(self._system.width * 0.5, self._system.height * 0.4),
            origin=(width * 0.5, height * 0.5),
            font=font,
        )

    def on_attach(self) -> None:
        self._fonts.load(_FONT)
        font = self._fonts.get(_FONT)
        self.score_text = _Text("Score = 0", 100, "white", (10.0, 10.0), font=font)
        self.state = self._banner(font, "PAUSE!")
        self.game_over = self._banner(font, "GAME OVER!")
        self.game_start = self._banner(font, "PRESS ENTER TO START!")

        self.time_bar_width = _TIME_BAR_WIDTH
        self.time_bar = _RectangleShape(
            size=(_TIME_BAR_WIDTH, _TIME_BAR_HEIGHT),
            fill_color="red",
            position=(
                self._system.width * 0.5 - _TIME_BAR_WIDTH * 0.5,
                float(self._system.height) - _TIME_BAR_HEIGHT * 2.0,
            ),
        )
        self._time_bar_speed = self.time_bar_width / _TIME_BAR_DURATION
        self.score = 0

    def on_event(self, event: Any) -> None:
        """The display does not react to input."""

    def on_update(self, dt: float) -> None:
        self.score_text.string = f"Score = {self.score}"
        width, height = self.time_bar.size
        width -= self._time_bar_speed * dt
        if width < 0.0:
            width = 0.0
            player = self._system.find_layer("Player")
            if isinstance(player, Player):
                player.dead(True)
                self.state.string = "Game Over"
        self.time_bar.size = (width, height)

    def on_ui(self, device: Any) -> None:
        device.draw(self.score_text)
        player = self._system.find_layer("Player")
        application = self._system.find_layer("Application")
        is_first_start = getattr(application, "is_first_start", None)
        if callable(is_first_start) and is_first_start():
            device.draw(self.game_start)
        elif isinstance(player, Player) and not player.is_alive():
            device.draw(self.game_over)
        elif self._system.is_paused():
            device.draw(self.state)
        device.draw(self.time_bar)

    @property
    def name(self) -> str:
        return "UI"

    def add_score(self, add: int) -> None:
        """Add ``add`` points to the score."""
        self.score += add

    def regain_timebar(self, width: float) -> None:
        """Lengthen the time bar by ``width``, up to its full width."""
        regain = min(self.time_bar.size[0] + width, self.time_bar_width)
        self.time_bar.size = (regain, self.time_bar.size[1])