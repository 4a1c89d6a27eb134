"""Tests for game.shmup.world — EntityWorld collections and id arena."""

import pytest

from game.shmup.constants import COLORS, SCOUT
from game.shmup.entities import Enemy, Laser, Player, PowerUp, Projectile
from game.shmup.world import EntityWorld


def _enemy(**kwargs) -> Enemy:
    base = dict(type=SCOUT, x=500, y=300, width=40, height=30, hp=20, max_hp=20)
    base.update(kwargs)
    return Enemy(**base)


def _bullet(**kwargs) -> Projectile:
    base = dict(x=0, y=0, vx=0, vy=0, width=4, height=4, color=COLORS["white"])
    base.update(kwargs)
    return Projectile(**base)


@pytest.mark.unit
class TestInsert:
    def test_assigns_unique_ids(self, world):
        a = world.insert(_enemy())
        b = world.insert(_enemy())
        c = world.insert(_bullet())
        assert len({a.id, b.id, c.id}) == 3

    def test_enemies_keyed_by_id(self, world):
        e = world.insert(_enemy())
        assert world.enemy(e.id) is e

    def test_preserves_insertion_order(self, world):
        bullets = [world.insert(_bullet(x=i)) for i in range(5)]
        assert world.projectiles == bullets

    def test_keeps_explicit_id(self, world):
        e = world.insert(_enemy(id=999))
        assert world.enemy(999) is e

    def test_generated_ids_skip_explicit_ones(self, world):
        explicit = world.insert(_enemy(id=2))
        first = world.insert(_enemy())
        second = world.insert(_enemy())
        assert len(world.enemies) == 3
        assert world.enemy(2) is explicit
        assert len({explicit.id, first.id, second.id}) == 3

    def test_rejects_duplicate_enemy_id(self, world):
        world.insert(_enemy(id=5))
        with pytest.raises(ValueError):
            world.insert(_enemy(id=5))

    def test_rejects_unknown_type(self, world):
        with pytest.raises(ValueError):
            world.insert(Player())

    def test_ids_not_reused_after_removal(self, world):
        first = world.insert(_enemy())
        world.remove_where("enemies", lambda e: True)
        second = world.insert(_enemy())
        assert second.id != first.id


@pytest.mark.unit
class TestRemoveWhere:
    def test_removes_matching(self, world):
        for i in range(4):
            world.insert(_bullet(x=i))
        removed = world.remove_where("projectiles", lambda p: p.x % 2 == 0)
        assert removed == 2
        assert [p.x for p in world.projectiles] == [1, 3]

    def test_removes_enemies(self, world):
        keep = world.insert(_enemy(hp=5))
        world.insert(_enemy(hp=0))
        assert world.remove_where("enemies", lambda e: e.hp <= 0) == 1
        assert list(world.enemies.values()) == [keep]

    def test_unknown_kind(self, world):
        with pytest.raises(ValueError):
            world.remove_where("stars", lambda s: True)


@pytest.mark.unit
class TestLookup:
    def test_absent_enemy(self, world):
        assert world.enemy(12345) is None
        assert world.living_enemy(12345) is None

    def test_dead_enemy_is_not_living(self, world):
        e = world.insert(_enemy(hp=0))
        assert world.enemy(e.id) is e
        assert world.living_enemy(e.id) is None
        assert world.living_enemies() == []

    def test_living_enemies_is_a_snapshot(self, world):
        world.insert(_enemy())
        snapshot = world.living_enemies()
        world.insert(_enemy())
        assert len(snapshot) == 1


@pytest.mark.unit
class TestEffects:
    def test_burst_count_and_life(self, world):
        world.burst(10, 20, COLORS["neon_red"], 7, 5)
        assert len(world.particles) == 7
        assert all(p.life == 1.0 and p.x == 10 and p.y == 20 for p in world.particles)

    def test_burst_does_not_consume_gameplay_rolls(self):
        import random

        w = EntityWorld(rng=random.Random(1), fx_rng=random.Random(2))
        before = w.rng.getstate()
        w.burst(0, 0, COLORS["white"], 50, 5)
        assert w.rng.getstate() == before

    def test_haptic_keeps_strongest(self, world):
        world.haptic(50)
        world.haptic(400)
        world.haptic(100)
        assert world.events["haptic_ms"] == 400

    def test_reset_clears_everything(self, world):
        world.insert(_enemy())
        world.insert(_bullet())
        world.insert(Laser(owner_id=1, y=10))
        world.insert(PowerUp(type="HEART", x=0, y=0))
        world.emit("kill")
        world.reset()
        assert not world.enemies and not world.projectiles and not world.lasers and not world.powerups
        assert world.events["kill"] == 0
