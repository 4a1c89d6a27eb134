"""Shared fixtures for the shmup test suite."""

from __future__ import annotations

import random

import pytest

from game.shmup.collisions import CollisionResolver
from game.shmup.enemy_ai import EnemyAI
from game.shmup.physics import ProjectileAndLaserStepper
from game.shmup.powerups import PowerUpEffects
from game.shmup.spawner import SpawnDirector
from game.shmup.world import EntityWorld


class ScriptedRandom(random.Random):
    """Random source that replays scripted `random()` rolls, then a default.

    `randrange` always returns its lower bound so enemy shoot offsets are 0
    and never consume scripted rolls.
    """

    def __init__(self, values=(), default: float = 0.99):
        super().__init__(0)
        self.values = list(values)
        self.default = default

    def random(self):
        return self.values.pop(0) if self.values else self.default

    def randrange(self, start, stop=None, step=1):
        return 0 if stop is None else start


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def world():
    return EntityWorld(rng=ScriptedRandom(), fx_rng=random.Random(7))


@pytest.fixture
def spawner():
    return SpawnDirector()


@pytest.fixture
def ai(spawner):
    return EnemyAI(spawner)


@pytest.fixture
def stepper():
    return ProjectileAndLaserStepper()


@pytest.fixture
def resolver(spawner):
    return CollisionResolver(spawner, PowerUpEffects())
