"""Tests for game.shmup.spawner — cadence, type roll and drop bands."""

import pytest

from game.shmup.constants import (
    BOMB,
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    DESTROYER,
    ENEMY_STATS,
    ENTERING,
    FIGHTER,
    HEART,
    KAMIKAZE,
    MULTISHOT,
    SCOUT,
    SHIELD,
)
from game.shmup.spawner import choose_type, roll_drop, spawn_rate


@pytest.mark.unit
class TestSpawnRate:
    @pytest.mark.parametrize("score,expected", [
        (0, 100),
        (49, 100),
        (50, 99),
        (3000, 40),
        (3500, 30),
        (10 ** 6, 30),
    ])
    def test_cadence(self, score, expected):
        assert spawn_rate(score) == expected

    def test_never_below_floor(self):
        assert all(spawn_rate(s) >= 30 for s in range(0, 20000, 37))


@pytest.mark.unit
class TestChooseType:
    @pytest.mark.parametrize("score,roll,expected", [
        (0, 0.99, SCOUT),
        (499, 0.99, SCOUT),
        (500, 0.6, SCOUT),
        (500, 0.61, FIGHTER),
        (500, 0.95, FIGHTER),
        (1000, 0.85, KAMIKAZE),
        (1000, 0.7, FIGHTER),
        (1000, 0.95, KAMIKAZE),
        (1500, 0.95, DESTROYER),
        (1500, 0.85, KAMIKAZE),
        (1500, 0.65, FIGHTER),
        (1500, 0.5, SCOUT),
    ])
    def test_override_order(self, score, roll, expected):
        assert choose_type(score, roll) == expected


@pytest.mark.unit
class TestRollDrop:
    @pytest.mark.parametrize("roll,expected", [
        (0.0, BOMB),
        (0.01, BOMB),
        (0.02, SHIELD),
        (0.04, SHIELD),
        (0.06, MULTISHOT),
        (0.07, MULTISHOT),
        (0.1, HEART),
        (0.22, HEART),
        (0.24, None),
        (0.99, None),
    ])
    def test_bands(self, roll, expected):
        assert roll_drop(roll) == expected


@pytest.mark.unit
class TestSpawnDirector:
    def test_no_spawn_off_cadence(self, world, spawner):
        assert spawner.maybe_spawn(world, 99, 0) is None
        assert not world.enemies

    def test_spawn_on_cadence(self, world, spawner, scripted):
        world.rng = scripted([0.5, 0.99])
        enemy = spawner.maybe_spawn(world, 100, 0)
        assert enemy.type == SCOUT
        assert enemy.x == CANVAS_WIDTH + 50
        assert enemy.y == pytest.approx(50 + 0.5 * (CANVAS_HEIGHT - 100))
        assert enemy.state == ENTERING
        assert world.enemy(enemy.id) is enemy

    def test_spawn_type_uses_score(self, world, spawner, scripted):
        world.rng = scripted([0.5, 0.95])
        enemy = spawner.maybe_spawn(world, 40, 3000)
        assert enemy.type == DESTROYER

    def test_spawn_stats(self, world, spawner):
        e = spawner.spawn_enemy(world, FIGHTER, 10, 20)
        stats = ENEMY_STATS[FIGHTER]
        assert (e.width, e.height, e.hp, e.max_hp) == (stats["width"], stats["height"], stats["hp"], stats["hp"])

    def test_shoot_offset_range(self, spawner):
        import random

        from game.shmup.world import EntityWorld

        w = EntityWorld(rng=random.Random(3))
        offsets = {spawner.spawn_enemy(w, SCOUT, 0, 0).shoot_offset for _ in range(300)}
        assert min(offsets) >= 0 and max(offsets) < 120
        assert len(offsets) > 1

    def test_unknown_type(self, world, spawner):
        with pytest.raises(ValueError):
            spawner.spawn_enemy(world, "MOTHERSHIP", 0, 0)

    def test_drop_inserts_powerup(self, world, spawner, scripted):
        world.rng = scripted([0.1])
        pu = spawner.maybe_drop(world, 300, 200)
        assert pu.type == HEART
        assert world.powerups == [pu]

    def test_no_drop(self, world, spawner):
        assert spawner.maybe_drop(world, 300, 200) is None
        assert world.powerups == []
