"""Arena - a small asteroids-style shooter: simulation core, arcade front end and agent environment"""

from .controls import Action, KeyboardInputController, ScriptedInput
from .entities import Player, Enemy, Projectile, Explosion, EntitySnapshot
from .game import Game, GameState
from .geometry import Hitbox, hitbox, overlaps

__all__ = [
    'Action', 'KeyboardInputController', 'ScriptedInput',
    'Player', 'Enemy', 'Projectile', 'Explosion', 'EntitySnapshot',
    'Game', 'GameState',
    'Hitbox', 'hitbox', 'overlaps',
]
