"""
Game - owns every entity, runs the per-tick simulation and the coarse states
-----------------------------------------------------------------------------
States:
    MENU -> PLAYING -> PLAYER_KILLED -> PLAYING  (while lives remain)
                    -> GAME_OVER -> PLAYING      (NEW GAME) or MENU (MAIN MENU)
    PLAYING / PLAYER_KILLED <-> PAUSED           (PAUSE key, rising edge)

Tick order while playing: player, projectiles, enemies, spawn, respawn check,
explosions. Enemies resolve projectile hits against projectiles that already
moved this tick.
"""

from __future__ import annotations

import logging
import math
import random
from enum import Enum
from typing import Callable, Dict, List, Optional, Any

from .assets import AssetManager
from .config import (
    FIELD_CONFIG,
    PLAYER_CONFIG,
    ENEMY_CONFIG,
    PROJECTILE_CONFIG,
    EXPLOSION_CONFIG,
    SPAWN_CONFIG,
    MENU_CONFIG,
)
from .controls import Action, InputController, ScriptedInput
from .entities import Player, Enemy, Projectile, Explosion, EntitySnapshot
from .menu import MenuItem, MenuPanel
from .panels import ScorePanel, LivesPanel
from .spawn import SpawnScheduler, calculate_spawn_point, random_between

logger = logging.getLogger(__name__)

HITBOX_COLORS = {
    "player": (0, 0, 255, 255),
    "enemy": (255, 0, 0, 255),
    "projectile": (255, 255, 0, 255),
    "explosion": (255, 165, 0, 255),
}


class GameState(Enum):
    MENU = "menu"
    PLAYING = "playing"
    PLAYER_KILLED = "player_killed"
    PAUSED = "paused"
    GAME_OVER = "game_over"


MENU_STATES = (GameState.MENU, GameState.PAUSED, GameState.GAME_OVER)


class Game:
    """Arena shooter orchestrator"""

    def __init__(
        self,
        width: int = FIELD_CONFIG["width"],
        height: int = FIELD_CONFIG["height"],
        input_controller: Optional[InputController] = None,
        assets: Optional[AssetManager] = None,
        spawn_frequency: float = SPAWN_CONFIG["frequency"],
        max_enemies: int = SPAWN_CONFIG["max_enemies"],
        spawn_margin: float = SPAWN_CONFIG["margin"],
        player_config: Optional[Dict[str, Any]] = None,
        enemy_config: Optional[Dict[str, Any]] = None,
        projectile_config: Optional[Dict[str, Any]] = None,
        explosion_config: Optional[Dict[str, Any]] = None,
        menu_delay: float = MENU_CONFIG["input_delay"],
        on_credits: Optional[Callable[[], None]] = None,
        rng=None,
        debug_hitboxes: bool = False,
    ):
        if width <= 0 or height <= 0:
            raise ValueError(f"Field size must be positive, got {width}x{height}")

        # Arena
        self.width = width
        self.height = height

        # Collaborators
        self.input = input_controller if input_controller is not None else ScriptedInput()
        self.assets = assets if assets is not None else AssetManager()
        self.rng = rng if rng is not None else random

        # Entity config
        self.player_config = {**PLAYER_CONFIG, **(player_config or {})}
        self.enemy_config = {**ENEMY_CONFIG, **(enemy_config or {})}
        self.projectile_config = {**PROJECTILE_CONFIG, **(projectile_config or {})}
        self.explosion_config = {**EXPLOSION_CONFIG, **(explosion_config or {})}

        self.spawner = SpawnScheduler(spawn_frequency, max_enemies)
        self.spawn_margin = spawn_margin
        self.debug_hitboxes = debug_hitboxes

        # World state
        self.player: Optional[Player] = None
        self.projectiles: List[Projectile] = []
        self.enemies: List[Enemy] = []
        self.explosions: List[Explosion] = []

        self.state = GameState.MENU
        self._resume_state = GameState.PLAYING
        self._pause_held = False

        # Overlays
        self.menu = MenuPanel(self, input_delay=menu_delay)
        self.score_panel = ScorePanel(self)
        self.lives_panel = LivesPanel(self)
        self.on_credits = on_credits if on_credits is not None else self.show_credits

        self.show_main_menu()

    # ----------------------------
    # Read-only views
    # ----------------------------

    @property
    def score(self) -> int:
        return self.player.score if self.player is not None else 0

    @property
    def lives(self) -> int:
        return self.player.lives if self.player is not None else 0

    @property
    def showing_menu(self) -> bool:
        return self.state in MENU_STATES

    @property
    def field_visible(self) -> bool:
        """Whether player, projectiles and enemies are drawn this frame"""
        if self.player is None:
            return False
        if self.state is GameState.PAUSED:
            return self._resume_state is GameState.PLAYING
        return self.state is GameState.PLAYING

    def snapshot(self) -> List[EntitySnapshot]:
        views = []
        if self.field_visible:
            views.append(self.player.snapshot())
            views += [p.snapshot() for p in self.projectiles]
            views += [e.snapshot() for e in self.enemies]
        views += [x.snapshot() for x in self.explosions]
        return views

    # ----------------------------
    # Frame
    # ----------------------------

    def on_loop(self, dt: float, surface):
        """One frame: simulate then draw"""
        self.update(dt)
        self.render(surface)

    def update(self, dt: float):
        pause_pressed = self.input.is_pressed(Action.PAUSE)
        pause_edge = pause_pressed and not self._pause_held
        self._pause_held = pause_pressed

        if pause_edge and self.state in (GameState.PLAYING, GameState.PLAYER_KILLED):
            self.pause_game()
            return
        if pause_edge and self.state is GameState.PAUSED:
            self.resume_game()
            return

        if self.showing_menu:
            # The last explosion keeps playing under the game over menu
            if self.state is GameState.GAME_OVER:
                self._update_explosions(dt)
            self.menu.update(dt)
            return

        if self.state is GameState.PLAYING:
            self.player.update(dt)
            # Snapshots: entities may remove themselves or each other mid-pass
            for projectile in list(self.projectiles):
                if projectile in self.projectiles:
                    projectile.update(dt)
            for enemy in list(self.enemies):
                if enemy in self.enemies:
                    enemy.update(dt)
            if self.state is GameState.PLAYING:
                self.spawn_enemy(dt)

        if self.state is GameState.PLAYER_KILLED and not self.explosions:
            self.respawn()

        self._update_explosions(dt)

    def _update_explosions(self, dt: float):
        for explosion in list(self.explosions):
            if explosion in self.explosions:
                explosion.update(dt)

    def render(self, surface):
        surface.clear_rect(0, 0, self.width, self.height)
        if self.field_visible:
            self.player.render(surface)
            for projectile in self.projectiles:
                projectile.render(surface)
            for enemy in self.enemies:
                enemy.render(surface)
        for explosion in self.explosions:
            explosion.render(surface)

        if self.debug_hitboxes:
            for view in self.snapshot():
                surface.stroke_rect(
                    view.x - view.width * 0.5,
                    view.y - view.height * 0.5,
                    view.width,
                    view.height,
                    HITBOX_COLORS[view.kind],
                )

        self.lives_panel.render(surface)
        self.score_panel.render(surface)
        if self.showing_menu:
            self.menu.render(surface)

    # ----------------------------
    # Spawning
    # ----------------------------

    def spawn_enemy(self, dt: float):
        if not self.spawner.ready(dt, len(self.enemies)):
            return
        point = calculate_spawn_point(self.width, self.height, self.spawn_margin, rng=self.rng)
        speed_lo, speed_hi = self.enemy_config["speed_range"]
        kind_lo, kind_hi = self.enemy_config["kind_range"]
        enemy = Enemy(
            self,
            point.x,
            point.y,
            point.direction,
            speed=math.floor(random_between(self.rng, speed_lo, speed_hi)),
            kind=math.floor(random_between(self.rng, kind_lo, kind_hi)),
            width=self.enemy_config["width"],
            height=self.enemy_config["height"],
        )
        self.add_enemy(enemy)
        self.spawner.reset()

    # ----------------------------
    # Collections
    # ----------------------------

    def add_projectile(self, projectile: Projectile):
        self.projectiles.append(projectile)

    def remove_projectile(self, projectile: Projectile):
        if projectile in self.projectiles:
            self.projectiles.remove(projectile)

    def add_enemy(self, enemy: Enemy):
        self.enemies.append(enemy)

    def remove_enemy(self, enemy: Enemy):
        if enemy not in self.enemies:
            return
        self.enemies.remove(enemy)
        self.spawner.reset()

    def add_explosion(self, explosion: Explosion):
        self.explosions.append(explosion)

    def remove_explosion(self, explosion: Explosion):
        if explosion in self.explosions:
            self.explosions.remove(explosion)

    def enemy_killed(self, enemy: Enemy, projectile: Projectile):
        self.remove_enemy(enemy)
        self.remove_projectile(projectile)
        if self.player is not None:
            self.player.increase_score(1)

    # ----------------------------
    # State transitions
    # ----------------------------

    def start_game(self):
        self.input.reset()
        self.player = Player(self, self.width * 0.5, self.height * 0.5, **self.player_config)
        self.lives_panel.init(self.player, self.width - 10, self.height - 10)
        self.score_panel.init(self.player, 8, 24)
        self.respawn()
        self.spawner.expire()
        logger.debug("Game started")

    def respawn(self):
        self.player.place(self.width * 0.5, self.height * 0.5)
        self.projectiles = []
        self.enemies = []
        self.explosions = []
        self.state = GameState.PLAYING
        logger.debug("Player respawned, %d lives left", self.player.lives)

    def _explode_enemies(self):
        for enemy in list(self.enemies):
            enemy.explode()
            self.remove_enemy(enemy)

    def kill_player(self):
        self._explode_enemies()
        self.state = GameState.PLAYER_KILLED
        logger.debug("Player killed, %d lives left", self.lives)

    def end_game(self):
        self._explode_enemies()
        self.state = GameState.GAME_OVER
        self.menu.init(
            [
                MenuItem("NEW GAME", self.start_game),
                MenuItem("MAIN MENU", self.show_main_menu),
            ],
            title="GAME OVER",
        )
        logger.debug("Game over, final score %d", self.score)

    def pause_game(self):
        self._resume_state = self.state
        self.state = GameState.PAUSED
        self.menu.init(
            [
                MenuItem("RESUME", self.resume_game),
                MenuItem("RESTART", self.start_game),
            ],
            title="PAUSED",
        )
        logger.debug("Paused")

    def resume_game(self):
        self.state = self._resume_state
        logger.debug("Resumed")

    def show_main_menu(self):
        self.state = GameState.MENU
        self.menu.init(
            [
                MenuItem("START", self.start_game),
                MenuItem("CREDITS", lambda: self.on_credits()),
            ]
        )

    def show_credits(self):
        self.menu.init([MenuItem("BACK", self.show_main_menu)], title="CREDITS")
