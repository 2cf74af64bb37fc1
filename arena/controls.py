"""
Input actions and the controllers the game queries each tick
"""

from __future__ import annotations
from enum import Enum
from typing import Dict, Iterable, Set


class Action(str, Enum):
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    ROTATE_LEFT = "ROTATE_LEFT"
    ROTATE_RIGHT = "ROTATE_RIGHT"
    FIRE = "FIRE"
    PAUSE = "PAUSE"
    ACTIVATE = "ACTIVATE"


class InputController:
    """Set of currently held actions"""

    def __init__(self):
        self._pressed: Set[Action] = set()

    def is_pressed(self, action: Action) -> bool:
        return action in self._pressed

    def press(self, action: Action):
        self._pressed.add(Action(action))

    def release(self, action: Action):
        self._pressed.discard(Action(action))

    def reset(self):
        """Forget every held action (avoids stuck keys after a restart)"""
        self._pressed.clear()


class KeyboardInputController(InputController):
    """
    Translates raw key events into actions.

    `bindings` maps key codes (e.g. arcade.key.W) to actions; unbound keys
    are ignored.
    """

    def __init__(self, bindings: Dict[int, Action]):
        super().__init__()
        self.bindings = dict(bindings)

    def on_key_press(self, key: int):
        action = self.bindings.get(key)
        if action is not None:
            self.press(action)

    def on_key_release(self, key: int):
        action = self.bindings.get(key)
        if action is not None:
            self.release(action)


class ScriptedInput(InputController):
    """Input driven by code (agents, tests, demos)"""

    def set_pressed(self, actions: Iterable[Action]):
        self._pressed = {Action(a) for a in actions}
