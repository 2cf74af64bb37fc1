"""HUD panels: score and remaining lives"""

from __future__ import annotations
from typing import TYPE_CHECKING, Optional

from .entities import SPRITE
from .menu import TEXT_COLOR

if TYPE_CHECKING:
    from .entities import Player
    from .game import Game


class ScorePanel:
    def __init__(self, game: "Game", font_size: int = 24):
        self.game = game
        self.font_size = font_size
        self.player: Optional["Player"] = None
        self.x = 0.0
        self.y = 0.0

    def init(self, player: "Player", x: float, y: float):
        self.player = player
        self.x = x
        self.y = y

    def render(self, surface):
        if self.player is None:
            return
        surface.save()
        surface.fill_text(str(self.player.score), self.x, self.y, TEXT_COLOR, self.font_size)
        surface.restore()


class LivesPanel:
    """Row of ship icons growing leftwards from (x, y), the bottom-right corner"""

    def __init__(self, game: "Game", icon_size: int = 16, margin: int = 3):
        self.game = game
        self.icon_size = icon_size
        self.margin = margin
        self.player: Optional["Player"] = None
        self.x = 0.0
        self.y = 0.0
        self.img = game.assets.get_image("icons")

    def init(self, player: "Player", x: float, y: float):
        self.player = player
        self.x = x
        self.y = y

    def render(self, surface):
        if self.img is None or self.player is None:
            return
        size = self.icon_size
        surface.save()
        for i in range(max(self.player.lives, 0)):
            surface.draw_image_region(
                self.img,
                (0, 0, SPRITE, SPRITE),
                (self.x - size * (i + 1) - self.margin * i, self.y - size, size, size),
            )
        surface.restore()
