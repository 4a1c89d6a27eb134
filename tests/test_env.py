"""Tests for game.shmup.shmup_env — gymnasium adapter (headless)."""

import numpy as np
import pytest

from game.shmup.shmup_env import ShmupEnv, action_to_input, run_random_episode


@pytest.fixture
def env():
    e = ShmupEnv(max_steps=300)
    yield e
    e.close()


@pytest.mark.unit
class TestActions:
    def test_stay(self):
        inp = action_to_input(0, 0)
        assert not (inp.up or inp.down or inp.left or inp.right or inp.fire)

    def test_diagonal_and_fire(self):
        inp = action_to_input(2, 1)
        assert inp.up and inp.right and inp.fire
        assert not (inp.down or inp.left)


@pytest.mark.unit
class TestShmupEnv:
    def test_reset_observation(self, env):
        obs, info = env.reset(seed=3)
        assert obs.dtype == np.float32
        assert env.observation_space.contains(obs)
        assert info["hp"] == 100 and info["score"] == 0

    def test_step_contract(self, env):
        env.reset(seed=3)
        obs, reward, terminated, truncated, info = env.step(np.array([3, 1]))
        assert env.observation_space.contains(obs)
        assert isinstance(reward, float)
        assert not terminated and not truncated
        assert info["step"] == 1
        assert info["num_projectiles"] == 1

    def test_truncates_at_max_steps(self, env):
        env.reset(seed=3)
        env.sim.spawner.base_rate = 10 ** 9
        truncated = False
        steps = 0
        while not truncated:
            _, _, terminated, truncated, _ = env.step(np.array([0, 0]))
            steps += 1
            assert not terminated
        assert steps == 300

    def test_observations_stay_in_bounds(self, env):
        env.reset(seed=11)
        env.action_space.seed(11)
        for _ in range(300):
            obs, _, terminated, truncated, _ = env.step(env.action_space.sample())
            assert env.observation_space.contains(obs)
            if terminated or truncated:
                break

    def test_random_episode(self):
        total = run_random_episode(render=False, seed=1, max_steps=200)
        assert isinstance(total, float)
