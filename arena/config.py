"""
Default tunables for the arena shooter
Every class takes these as keyword defaults; override by passing kwargs.
"""

# Play field (pixels, origin top-left)
FIELD_CONFIG = {
    "width": 640,
    "height": 480,
}

# ==============================================================================
# ENTITIES
# ==============================================================================

PLAYER_CONFIG = {
    "width": 32,
    "height": 32,
    "speed": 5,             # px per tick
    "rotation_speed": 6,    # degrees per tick
    "lives": 3,
    "fire_frequency": 250,  # ms between projectiles
    "kind": 0,              # sprite row in player_ships
}

ENEMY_CONFIG = {
    "width": 25,
    "height": 25,
    "speed_range": (1, 5),   # random integer in [lo, hi)
    "kind_range": (0, 35),   # sprite index in enemy_ships, cosmetic only
}

PROJECTILE_CONFIG = {
    "width": 6,
    "height": 24,
    "speed": 10,  # px per tick
}

EXPLOSION_CONFIG = {
    "frame_ticks": 12,  # ticks per animation frame
    "max_frame": 3,
}

SPAWN_CONFIG = {
    "frequency": 1000,  # ms between enemies
    "max_enemies": 5,   # live enemies at one time
    "margin": 25,       # distance of the spawn point from the edge
}

MENU_CONFIG = {
    "input_delay": 250,  # ms debounce window
    "item_height": 32,
    "gap": 16,
}

# ==============================================================================
# INPUT
# ==============================================================================

# Action -> arcade key name (see arcade.key)
CONTROLS = {
    "UP": "W",
    "DOWN": "S",
    "LEFT": "A",
    "RIGHT": "D",
    "ROTATE_LEFT": "Q",
    "ROTATE_RIGHT": "E",
    "FIRE": "SPACE",
    "PAUSE": "ESCAPE",
    "ACTIVATE": "ENTER",
}

# ==============================================================================
# AGENT ENVIRONMENT
# ==============================================================================

ENV_CONFIG = {
    "width": 640,
    "height": 480,
    "frame_ms": 1000 / 60,
    "max_steps": 3600,  # 60s at 60 FPS
    "k_enemies": 5,
}

REWARD_CONFIG = {
    "R_KILL": 1.0,    # per point of score
    "R_LIFE": 5.0,    # per life lost
    "R_SHOT": 0.01,   # per projectile fired
    "R_TIME": 0.001,  # per step
}
