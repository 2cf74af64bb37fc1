"""
Arcade front end: draw surface, frame driver and keyboard wiring

Play:
    python -m arena --assets ./assets
    python -m arena --debug-hitboxes   # no sprite sheets needed
"""

from __future__ import annotations

import argparse
import logging
import math
from typing import Dict, List, Optional, Tuple

import arcade

from .assets import AssetManager
from .config import CONTROLS, FIELD_CONFIG
from .controls import Action, KeyboardInputController
from .game import Game
from .geometry import seed_everything


BG = (18, 18, 22)


def build_bindings(controls: Dict[str, str] = CONTROLS) -> Dict[int, Action]:
    """Map arcade key codes to actions using key names like 'W' or 'SPACE'"""
    bindings = {}
    for action, key_name in controls.items():
        key = getattr(arcade.key, key_name, None)
        if key is None:
            raise ValueError(f"Unknown key '{key_name}' bound to {action}")
        bindings[key] = Action(action)
    return bindings


class ArcadeSurface:
    """
    Canvas-style drawing on an arcade window.

    Callers use field coordinates (origin top-left, y down) with a
    translate/rotate transform stack; this class converts to arcade's
    bottom-left origin.
    """

    def __init__(self, window: arcade.Window):
        self.window = window
        self._tx = 0.0
        self._ty = 0.0
        self._angle = 0.0
        self._stack: List[Tuple[float, float, float]] = []
        self._textures: Dict[Tuple[int, Tuple], arcade.Texture] = {}
        self._text_widths: Dict[Tuple[str, int], float] = {}

    # Transform state

    def save(self):
        self._stack.append((self._tx, self._ty, self._angle))

    def restore(self):
        if self._stack:
            self._tx, self._ty, self._angle = self._stack.pop()

    def translate(self, x: float, y: float):
        c, s = math.cos(self._angle), math.sin(self._angle)
        self._tx += x * c - y * s
        self._ty += x * s + y * c

    def rotate(self, angle: float):
        self._angle += angle

    def _to_field(self, x: float, y: float) -> Tuple[float, float]:
        c, s = math.cos(self._angle), math.sin(self._angle)
        return self._tx + x * c - y * s, self._ty + x * s + y * c

    def _flip(self, y: float) -> float:
        return self.window.height - y

    # Drawing

    def clear_rect(self, x: float, y: float, width: float, height: float):
        if x <= 0 and y <= 0 and width >= self.window.width and height >= self.window.height:
            self.window.clear(color=BG)
        else:
            self.fill_rect(x, y, width, height, BG)

    def _texture(self, image, src) -> arcade.Texture:
        key = (id(image), tuple(src))
        texture = self._textures.get(key)
        if texture is None:
            sx, sy, sw, sh = src
            texture = arcade.Texture(image.crop((sx, sy, sx + sw, sy + sh)))
            self._textures[key] = texture
        return texture

    def draw_image_region(self, image, src, dest):
        if image is None:
            return
        dx, dy, dw, dh = dest
        cx, cy = self._to_field(dx + dw * 0.5, dy + dh * 0.5)
        arcade.draw_texture_rect(
            self._texture(image, src),
            arcade.XYWH(cx, self._flip(cy), dw, dh),
            angle=math.degrees(self._angle),
            pixelated=True,
        )

    def fill_rect(self, x: float, y: float, width: float, height: float, color):
        left = self._tx + x
        top = self._ty + y
        arcade.draw_lrbt_rectangle_filled(
            left, left + width, self._flip(top + height), self._flip(top), color
        )

    def stroke_rect(self, x: float, y: float, width: float, height: float, color):
        left = self._tx + x
        top = self._ty + y
        arcade.draw_lrbt_rectangle_outline(
            left, left + width, self._flip(top + height), self._flip(top), color, 1
        )

    def fill_text(self, text: str, x: float, y: float, color, size: int):
        arcade.draw_text(
            text, self._tx + x, self._flip(self._ty + y), color, size, anchor_y="baseline"
        )

    def measure_text(self, text: str, size: int) -> float:
        key = (text, size)
        width = self._text_widths.get(key)
        if width is None:
            width = arcade.Text(text, 0, 0, font_size=size).content_width
            self._text_widths[key] = width
        return width


class ArenaWindow(arcade.Window):
    """Calls the game once per refresh: update with elapsed ms, then render"""

    def __init__(self, game: Game, title: str = "Arena"):
        super().__init__(game.width, game.height, title)
        self.game = game
        self.surface = ArcadeSurface(self)
        self._first_frame = True

    def on_update(self, delta_time: float):
        dt = 0.0 if self._first_frame else delta_time * 1000.0
        self._first_frame = False
        self.game.update(dt)

    def on_draw(self):
        self.game.render(self.surface)

    def on_key_press(self, key: int, modifiers: int):
        if isinstance(self.game.input, KeyboardInputController):
            self.game.input.on_key_press(key)

    def on_key_release(self, key: int, modifiers: int):
        if isinstance(self.game.input, KeyboardInputController):
            self.game.input.on_key_release(key)


def make_game(
    width: int = FIELD_CONFIG["width"],
    height: int = FIELD_CONFIG["height"],
    assets_dir: Optional[str] = None,
    debug_hitboxes: bool = False,
) -> Game:
    assets = AssetManager()
    assets.init(assets_dir)
    return Game(
        width=width,
        height=height,
        input_controller=KeyboardInputController(build_bindings()),
        assets=assets,
        debug_hitboxes=debug_hitboxes,
    )


def main():
    parser = argparse.ArgumentParser(description="Play the arena shooter")
    parser.add_argument("--width", type=int, default=FIELD_CONFIG["width"])
    parser.add_argument("--height", type=int, default=FIELD_CONFIG["height"])
    parser.add_argument("--assets", type=str, default=None,
                        help="Directory with player_ships.png, enemy_ships.png, icons.png")
    parser.add_argument("--debug-hitboxes", action="store_true",
                        help="Outline every hitbox")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", type=str, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    seed_everything(args.seed)

    if args.assets is None and not args.debug_hitboxes:
        print("No --assets directory given, enabling --debug-hitboxes so the ships are visible")
        args.debug_hitboxes = True

    game = make_game(args.width, args.height, args.assets, args.debug_hitboxes)
    ArenaWindow(game)
    arcade.run()


if __name__ == "__main__":
    main()
