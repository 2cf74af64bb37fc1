"""
Debounced menu overlay
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, List, Optional, Sequence

from .config import MENU_CONFIG
from .controls import Action

if TYPE_CHECKING:
    from .game import Game

OVERLAY_COLOR = (102, 102, 102, 128)
TEXT_COLOR = (0, 204, 0, 255)


@dataclass
class MenuItem:
    label: str
    on_activate: Callable[[], None]


class MenuPanel:
    """
    Cyclic selector over labelled actions.

    Input is accepted only once the accumulated elapsed time reaches
    `input_delay`; every accepted input resets the accumulator.
    """

    def __init__(
        self,
        game: "Game",
        input_delay: float = MENU_CONFIG["input_delay"],
        item_height: int = MENU_CONFIG["item_height"],
        gap: int = MENU_CONFIG["gap"],
    ):
        self.game = game
        self.input_delay = input_delay
        self.item_height = item_height
        self.gap = gap
        self.items: List[MenuItem] = []
        self.title: Optional[str] = None
        self.active_item = 0
        self.last_input = 0.0

    def init(self, items: Sequence[MenuItem], title: Optional[str] = None):
        self.items = list(items)
        self.title = title
        self.active_item = 0
        self.last_input = 0.0

    @property
    def labels(self) -> List[str]:
        return [item.label for item in self.items]

    def update(self, dt: float):
        if not self.items:
            return
        self.last_input += dt
        if self.last_input < self.input_delay:
            return

        inp = self.game.input
        if inp.is_pressed(Action.ACTIVATE):
            self.last_input = 0.0
            self.items[self.active_item].on_activate()
        elif inp.is_pressed(Action.UP):
            self.active_item = (self.active_item - 1) % len(self.items)
            self.last_input = 0.0
        elif inp.is_pressed(Action.DOWN):
            self.active_item = (self.active_item + 1) % len(self.items)
            self.last_input = 0.0

    def render(self, surface):
        surface.save()
        surface.fill_rect(0, 0, self.game.width, self.game.height, OVERLAY_COLOR)

        center_x = self.game.width * 0.5
        top = self.game.height * 0.5 - self.item_height * 0.5
        if self.title:
            width = surface.measure_text(self.title, self.item_height)
            surface.fill_text(
                self.title, center_x - width * 0.5, top - (self.item_height + self.gap) * 2,
                TEXT_COLOR, self.item_height,
            )

        for index, item in enumerate(self.items):
            width = surface.measure_text(item.label, self.item_height)
            x = center_x - width * 0.5
            y = top + (self.item_height + self.gap) * index
            surface.fill_text(item.label, x, y, TEXT_COLOR, self.item_height)
            if index == self.active_item:
                # underline
                overhang, padding = 4, 3
                surface.fill_rect(x - overhang, y + padding, width + overhang * 2, 1, TEXT_COLOR)
        surface.restore()
