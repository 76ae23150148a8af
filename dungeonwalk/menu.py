"""The main menu: a title and clickable buttons."""

from __future__ import annotations

from dataclasses import dataclass, field

from dungeonwalk.constants import BLUE, PINK, RED, SKYBLUE, WINDOW_WIDTH, Color
from dungeonwalk.game import Game
from dungeonwalk.vectors import Rectangle, Vector2

START_LABEL = "Start Game"
QUIT_LABEL = "Quit"
TITLE = "DUNGEONS"


@dataclass
class Button:
    """A labelled rectangle that highlights while the mouse is over it."""

    bounds: Rectangle
    text: str
    color: Color
    hover_color: Color
    hovered: bool = False

    def current_color(self) -> Color:
        """Colour to draw the button with."""
        return self.hover_color if self.hovered else self.color


@dataclass
class MainMenu:
    """Layout and buttons of the main menu."""

    button_width: float = 200.0
    button_height: float = 50.0
    start_y: float = 300.0
    spacing: float = 20.0
    buttons: list[Button] = field(default_factory=list)
    title: str = TITLE

    def update(self, game: Game, mouse_position: Vector2, clicked: bool) -> None:
        """Refresh hover state and act on a click over a button."""
        for button in self.buttons:
            button.hovered = button.bounds.contains(mouse_position)
            if button.hovered and clicked:
                if button.text == START_LABEL:
                    game.start()
                elif button.text == QUIT_LABEL:
                    game.quit()


def create_main_menu() -> MainMenu:
    """The main menu with its Start Game and Quit buttons, centred horizontally."""
    menu = MainMenu()
    x = WINDOW_WIDTH / 2 - menu.button_width / 2
    menu.buttons.append(
        Button(
            Rectangle(x, menu.start_y, menu.button_width, menu.button_height),
            START_LABEL,
            BLUE,
            SKYBLUE,
        )
    )
    menu.buttons.append(
        Button(
            Rectangle(
                x,
                menu.start_y + menu.button_height + menu.spacing,
                menu.button_width,
                menu.button_height,
            ),
            QUIT_LABEL,
            RED,
            PINK,
        )
    )
    return menu