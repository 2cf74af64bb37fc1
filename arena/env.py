"""
ArenaEnv - the arena shooter as a Gymnasium environment
-------------------------------------------------------
- Drives Game headlessly: each step presses a set of actions and advances one
  fixed-length frame
- MultiDiscrete action space: [thrust(3), strafe(3), rotate(3), fire(2)]
- Vector observation: player state + top-K nearest enemies
- Reward: enemies destroyed, lives lost, shots fired, time
- Episode ends at GAME_OVER (terminated) or after max_steps (truncated)

Quick test:
    python -m arena.env --episodes 3
"""

from __future__ import annotations

import argparse
import math
import random
from typing import Any, Dict, List, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import ENV_CONFIG, REWARD_CONFIG
from .controls import Action, ScriptedInput
from .game import Game, GameState
from .geometry import clamp, seed_everything

# Action components -> held actions (index 0 means "nothing")
THRUST = [None, Action.UP, Action.DOWN]
STRAFE = [None, Action.LEFT, Action.RIGHT]
ROTATE = [None, Action.ROTATE_LEFT, Action.ROTATE_RIGHT]


class ArenaEnv(gym.Env):
    """Arena shooter environment"""

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        width: int = ENV_CONFIG["width"],
        height: int = ENV_CONFIG["height"],
        frame_ms: float = ENV_CONFIG["frame_ms"],
        max_steps: int = ENV_CONFIG["max_steps"],
        k_enemies: int = ENV_CONFIG["k_enemies"],
        reward_config: Optional[Dict[str, float]] = None,
        game_kwargs: Optional[Dict[str, Any]] = None,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unsupported render_mode {render_mode!r}"
        self.render_mode = render_mode

        self.width = width
        self.height = height
        self.frame_ms = frame_ms
        self.max_steps = max_steps
        self.k_enemies = k_enemies
        self.reward_config = {**REWARD_CONFIG, **(reward_config or {})}
        self.game_kwargs = dict(game_kwargs or {})

        self.action_space = spaces.MultiDiscrete([3, 3, 3, 2])

        # Player: pos(2) heading sin/cos(2) lives(1) gun ready(1)
        # Each enemy: rel pos(2) heading sin/cos(2)
        obs_dim = 6 + self.k_enemies * 4
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self.input = ScriptedInput()
        self.game: Game = None  # type: ignore
        self._window = None
        self._step_count = 0
        self._rng = random.Random()

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)
        self._rng.seed(seed)

        self._step_count = 0
        self.game = Game(
            width=self.width,
            height=self.height,
            input_controller=self.input,
            rng=self._rng,
            **self.game_kwargs,
        )
        self.game.start_game()
        if self._window is not None:
            self._window.game = self.game

        return self._get_obs(), self._get_info()

    def step(self, action):
        thrust, strafe, rotate, fire = (int(a) for a in action)
        held = [THRUST[thrust], STRAFE[strafe], ROTATE[rotate]]
        if fire:
            held.append(Action.FIRE)
        self.input.set_pressed(a for a in held if a is not None)

        score_before = self.game.score
        lives_before = self.game.lives
        shots_before = self._shots_fired()

        self.game.update(self.frame_ms)

        events = {
            "kill": float(self.game.score - score_before),
            "life": float(lives_before - self.game.lives),
            "shot": float(max(self._shots_fired() - shots_before, 0)),
        }
        reward = self._compute_reward(events)

        terminated = self.game.state is GameState.GAME_OVER
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def _shots_fired(self) -> int:
        return self.game.player.shots_fired if self.game.player is not None else 0

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        player = self.game.player
        lives_max = max(1, self.game.player_config["lives"])
        gun_ready = player.time_since_last_shot >= player.fire_frequency

        obs_parts = [
            (player.x / self.width) * 2 - 1,
            (player.y / self.height) * 2 - 1,
            math.sin(player.heading),
            math.cos(player.heading),
            clamp(player.lives / lives_max, 0, 1) * 2 - 1,
            1.0 if gun_ready else -1.0,
        ]

        enemies_sorted = sorted(
            self.game.enemies,
            key=lambda e: (e.x - player.x) ** 2 + (e.y - player.y) ** 2
        )
        for i in range(self.k_enemies):
            if i < len(enemies_sorted):
                e = enemies_sorted[i]
                obs_parts += [
                    clamp((e.x - player.x) / self.width, -1, 1),
                    clamp((e.y - player.y) / self.height, -1, 1),
                    math.sin(e.heading),
                    math.cos(e.heading),
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _compute_reward(self, events: Dict[str, float]) -> float:
        rc = self.reward_config
        reward = 0.0
        reward += rc["R_KILL"] * events["kill"]
        reward -= rc["R_LIFE"] * events["life"]
        reward -= rc["R_SHOT"] * events["shot"]
        reward -= rc["R_TIME"]
        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "lives": self.game.lives,
            "state": self.game.state.value,
            "num_enemies": len(self.game.enemies),
            "num_projectiles": len(self.game.projectiles),
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None
        if self._window is None:
            # Imported lazily so headless training never opens a GL context
            from .window import ArenaWindow
            self._window = ArenaWindow(self.game, "ArenaEnv")
        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = False, seed: Optional[int] = None) -> Dict[str, Any]:
    """Run a random episode and return its totals"""
    env = ArenaEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0
    steps = 0

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward
        steps += 1

    env.close()
    return {"return": total, "length": steps, "score": info["score"]}


def main():
    parser = argparse.ArgumentParser(description="Run random-policy episodes")
    parser.add_argument("--episodes", type=int, default=1)
    parser.add_argument("--render", action="store_true")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    results: List[Dict[str, Any]] = []
    for episode in range(args.episodes):
        seed = args.seed + episode if args.seed is not None else None
        result = run_random_episode(render=args.render, seed=seed)
        results.append(result)
        print(f"Episode {episode + 1}/{args.episodes}: "
              f"Return = {result['return']:.2f}, Length = {result['length']}, "
              f"Score = {result['score']}")

    returns = [r["return"] for r in results]
    print(f"Mean Return: {np.mean(returns):.2f} ± {np.std(returns):.2f}")


if __name__ == "__main__":
    main()
