"""
Game entities

Every entity keeps a non-owning reference to the Game it lives in; the game
answers field-size queries and owns the collections entities add themselves
to or remove themselves from.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .config import PLAYER_CONFIG, ENEMY_CONFIG, PROJECTILE_CONFIG, EXPLOSION_CONFIG
from .controls import Action
from .geometry import Hitbox, hitbox, overlaps, clamp, heading_vector

if TYPE_CHECKING:
    from .game import Game

SPRITE = 8  # sprite sheet cell size (px)


@dataclass(frozen=True)
class EntitySnapshot:
    """Read-only view of a live entity for renderers and agents"""
    kind: str
    x: float
    y: float
    width: float
    height: float
    heading: float
    variant: int


class Player:
    """The ship steered by the input controller"""

    def __init__(
        self,
        game: "Game",
        x: float,
        y: float,
        width: float = PLAYER_CONFIG["width"],
        height: float = PLAYER_CONFIG["height"],
        speed: float = PLAYER_CONFIG["speed"],
        rotation_speed: float = PLAYER_CONFIG["rotation_speed"],
        lives: int = PLAYER_CONFIG["lives"],
        fire_frequency: float = PLAYER_CONFIG["fire_frequency"],
        kind: int = PLAYER_CONFIG["kind"],
    ):
        self.game = game
        self.width = width
        self.height = height
        self.speed = speed
        self.rotation_speed = math.radians(rotation_speed)
        self.lives = lives
        self.score = 0
        self.shots_fired = 0
        self.fire_frequency = fire_frequency
        self.kind = kind
        self.img = game.assets.get_image("player_ships")
        self.place(x, y)

    def place(self, x: float, y: float):
        """Put the ship at (x, y) facing up with a ready gun"""
        self.x = x
        self.y = y
        self.heading = 0.0
        self.time_since_last_shot = math.inf

    def update(self, dt: float):
        inp = self.game.input

        rotation = 0
        if inp.is_pressed(Action.ROTATE_LEFT):
            rotation = -1
        if inp.is_pressed(Action.ROTATE_RIGHT):
            rotation = 1
        self.heading += self.rotation_speed * rotation

        # Directions are relative to the heading and simply add up
        fwd_x, fwd_y = heading_vector(self.heading)
        side_x, side_y = math.cos(self.heading), math.sin(self.heading)
        x_move, y_move = 0.0, 0.0
        if inp.is_pressed(Action.RIGHT):
            x_move += side_x * self.speed
            y_move += side_y * self.speed
        if inp.is_pressed(Action.LEFT):
            x_move -= side_x * self.speed
            y_move -= side_y * self.speed
        if inp.is_pressed(Action.UP):
            x_move += fwd_x * self.speed
            y_move += fwd_y * self.speed
        if inp.is_pressed(Action.DOWN):
            x_move -= fwd_x * self.speed
            y_move -= fwd_y * self.speed

        half_w = self.width * 0.5
        half_h = self.height * 0.5
        self.x = clamp(self.x + x_move, half_w, self.game.width - half_w)
        self.y = clamp(self.y + y_move, half_h, self.game.height - half_h)

        self.time_since_last_shot += dt
        if inp.is_pressed(Action.FIRE) and self.time_since_last_shot >= self.fire_frequency:
            self.fire()

        # Collision with enemies
        box = self.hitbox()
        if any(overlaps(box, enemy.hitbox()) for enemy in self.game.enemies):
            self.hit()

    def fire(self):
        projectile = Projectile(self.game, self.x, self.y, self.heading, **self.game.projectile_config)
        self.game.add_projectile(projectile)
        self.time_since_last_shot = 0.0
        self.shots_fired += 1

    def hit(self):
        self.lives -= 1
        self.game.add_explosion(
            Explosion(self.game, self.x, self.y, self.width, self.height, **self.game.explosion_config)
        )
        if self.lives > 0:
            self.game.kill_player()
        else:
            self.game.end_game()

    def increase_score(self, points: int):
        self.score += points

    def hitbox(self) -> Hitbox:
        return hitbox(self.x, self.y, self.width, self.height)

    def snapshot(self) -> EntitySnapshot:
        return EntitySnapshot("player", self.x, self.y, self.width, self.height, self.heading, self.kind)

    def render(self, surface):
        if self.img is None:
            return
        surface.save()
        surface.translate(self.x, self.y)
        surface.rotate(self.heading)
        surface.draw_image_region(
            self.img,
            (0, self.kind * SPRITE, SPRITE, SPRITE),
            (-self.width * 0.5, -self.height * 0.5, self.width, self.height),
        )
        surface.restore()


class Enemy:
    """Drifts in a straight line and bounces off the field edges"""

    def __init__(
        self,
        game: "Game",
        x: float,
        y: float,
        direction: float,
        speed: float,
        kind: int = 0,
        width: float = ENEMY_CONFIG["width"],
        height: float = ENEMY_CONFIG["height"],
    ):
        self.game = game
        self.x = x
        self.y = y
        self.heading = math.radians(direction)
        self.speed = speed
        self.kind = kind
        self.width = width
        self.height = height
        self.img = game.assets.get_image("enemy_ships")

    def update(self, dt: float):
        step_x, _ = heading_vector(self.heading)
        new_x = self.x + self.speed * step_x
        half_w = self.width * 0.5
        if half_w <= new_x <= self.game.width - half_w:
            self.x = new_x
        else:
            self.heading *= -1

        _, step_y = heading_vector(self.heading)
        new_y = self.y + self.speed * step_y
        half_h = self.height * 0.5
        if half_h <= new_y <= self.game.height - half_h:
            self.y = new_y
        else:
            self.heading = (math.pi if self.heading >= 0 else -math.pi) - self.heading

        box = self.hitbox()
        for projectile in self.game.projectiles:
            if overlaps(box, projectile.hitbox()):
                self.explode()
                self.game.enemy_killed(self, projectile)
                break

    def explode(self):
        self.game.add_explosion(
            Explosion(self.game, self.x, self.y, self.width, self.height, **self.game.explosion_config)
        )

    def hitbox(self) -> Hitbox:
        return hitbox(self.x, self.y, self.width, self.height)

    def snapshot(self) -> EntitySnapshot:
        return EntitySnapshot("enemy", self.x, self.y, self.width, self.height, self.heading, self.kind)

    def render(self, surface):
        if self.img is None:
            return
        # enemy_ships is 6 rows tall, kinds run down the columns
        sx = self.kind // 6
        sy = self.kind % 6
        surface.save()
        surface.translate(self.x, self.y)
        surface.rotate(self.heading)
        surface.draw_image_region(
            self.img,
            (sx * SPRITE, sy * SPRITE, SPRITE, SPRITE),
            (-self.width * 0.5, -self.height * 0.5, self.width, self.height),
        )
        surface.restore()


class Projectile:
    """Travels straight ahead and vanishes at the field edge"""

    def __init__(
        self,
        game: "Game",
        x: float,
        y: float,
        heading: float,
        width: float = PROJECTILE_CONFIG["width"],
        height: float = PROJECTILE_CONFIG["height"],
        speed: float = PROJECTILE_CONFIG["speed"],
    ):
        self.game = game
        self.x = x
        self.y = y
        self.heading = heading
        self.width = width
        self.height = height
        self.speed = speed
        self.img = game.assets.get_image("icons")

    def update(self, dt: float):
        step_x, step_y = heading_vector(self.heading)
        new_x = self.x + self.speed * step_x
        new_y = self.y + self.speed * step_y
        half_w = self.width * 0.5
        half_h = self.height * 0.5
        if not (half_w <= new_x <= self.game.width - half_w) or not (
            half_h <= new_y <= self.game.height - half_h
        ):
            self.game.remove_projectile(self)
            return
        self.x = new_x
        self.y = new_y

    def hitbox(self) -> Hitbox:
        return hitbox(self.x, self.y, self.width, self.height)

    def snapshot(self) -> EntitySnapshot:
        return EntitySnapshot("projectile", self.x, self.y, self.width, self.height, self.heading, 0)

    def render(self, surface):
        if self.img is None:
            return
        surface.save()
        surface.translate(self.x, self.y)
        surface.rotate(self.heading)
        surface.draw_image_region(
            self.img,
            (0, 2 * SPRITE, 3, 3),
            (-self.width * 0.5, -self.height * 0.5, self.width, self.height),
        )
        surface.restore()


class Explosion:
    """Short animation left behind by a destroyed ship"""

    def __init__(
        self,
        game: "Game",
        x: float,
        y: float,
        width: float,
        height: float,
        frame_ticks: int = EXPLOSION_CONFIG["frame_ticks"],
        max_frame: int = EXPLOSION_CONFIG["max_frame"],
    ):
        self.game = game
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.frame_ticks = frame_ticks
        self.max_frame = max_frame
        self.frame = 0
        self.current_frame = 0
        self.img = game.assets.get_image("icons")

    def update(self, dt: float):
        self.frame += 1
        if self.frame >= self.frame_ticks:
            self.current_frame += 1
            self.frame = 0
        if self.current_frame > self.max_frame:
            self.game.remove_explosion(self)

    def snapshot(self) -> EntitySnapshot:
        return EntitySnapshot("explosion", self.x, self.y, self.width, self.height, 0.0, self.current_frame)

    def render(self, surface):
        if self.img is None:
            return
        surface.save()
        surface.translate(self.x, self.y)
        surface.draw_image_region(
            self.img,
            (SPRITE * self.current_frame, SPRITE, SPRITE, SPRITE),
            (-self.width * 0.5, -self.height * 0.5, self.width, self.height),
        )
        surface.restore()
