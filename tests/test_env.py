import numpy as np
import pytest

from arena.entities import Enemy
from arena.env import ArenaEnv, run_random_episode


@pytest.fixture
def env():
    e = ArenaEnv(max_steps=200)
    yield e
    e.close()


def test_reset_returns_valid_observation(env):
    obs, info = env.reset(seed=0)
    assert obs.shape == (6 + 5 * 4,)
    assert obs.dtype == np.float32
    assert env.observation_space.contains(obs)
    assert info["lives"] == 3
    assert info["state"] == "playing"


def test_idle_step_costs_time_only(env):
    env.reset(seed=0)
    obs, reward, terminated, truncated, info = env.step(np.array([0, 0, 0, 0]))
    assert reward == pytest.approx(-0.001)
    assert not terminated
    assert not truncated
    assert info["num_enemies"] == 1


def test_firing_is_penalised(env):
    env.reset(seed=0)
    _, reward, _, _, info = env.step(np.array([0, 0, 0, 1]))
    assert reward == pytest.approx(-0.011)
    assert info["num_projectiles"] == 1


def test_thrust_moves_player(env):
    env.reset(seed=0)
    env.step(np.array([1, 0, 0, 0]))
    assert env.game.player.y == pytest.approx(235)


def test_losing_last_life_terminates(env):
    env.reset(seed=0)
    player = env.game.player
    player.lives = 1
    env.game.add_enemy(Enemy(env.game, player.x, player.y, 0, speed=0))
    _, reward, terminated, _, info = env.step(np.array([0, 0, 0, 0]))
    assert terminated
    assert reward == pytest.approx(-5.001)
    assert info["state"] == "game_over"


def test_truncates_at_max_steps():
    env = ArenaEnv(max_steps=3)
    env.reset(seed=1)
    truncated = False
    for _ in range(3):
        _, _, _, truncated, _ = env.step(np.array([0, 0, 0, 0]))
    assert truncated


def test_observations_stay_in_bounds(env):
    env.reset(seed=2)
    env.action_space.seed(2)
    for _ in range(200):
        obs, _, terminated, truncated, _ = env.step(env.action_space.sample())
        assert env.observation_space.contains(obs)
        if terminated or truncated:
            break


def test_rejects_unknown_render_mode():
    with pytest.raises(AssertionError):
        ArenaEnv(render_mode="rgb_array")


def test_random_episode_runs_headless():
    result = run_random_episode(render=False, seed=3)
    assert result["length"] > 0
    assert result["score"] >= 0
