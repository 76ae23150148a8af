"""Overall game state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class GameState(Enum):
    """Which screen the game is on."""

    MENU = auto()
    PLAYING = auto()
    PAUSED = auto()
    GAME_OVER = auto()


@dataclass
class Game:
    """State shared across screens: current screen, loaded textures, quit flag."""

    game_state: GameState = GameState.MENU
    textures: list[Any] = field(default_factory=list)
    should_close: bool = False

    def start(self) -> None:
        """Switch to play."""
        self.game_state = GameState.PLAYING

    def quit(self) -> None:
        """Ask the main loop to stop."""
        self.should_close = True