"""
EntityWorld - owner of every live entity in a run.

Enemies are kept in an id-keyed dict so lasers can resolve their owner by
id each tick; everything else lives in plain ordered lists. Removal only
happens through `remove_where`, which the simulator calls once per tick
after AI and collisions are done.
"""

from __future__ import annotations

import itertools
import random
from typing import Callable, Dict, List, Optional

from .entities import Enemy, Laser, Particle, Player, PowerUp, Projectile

EVENT_KEYS = (
    "player_shot",
    "enemy_shot",
    "laser_charge",
    "explosion",
    "crash",
    "bomb_throw",
    "powerup",
    "hit",
    "kill",
    "damage",
    "deflect",
    "flash",
    "haptic_ms",
)

_KIND_BY_TYPE = {
    Enemy: "enemies",
    Projectile: "projectiles",
    Laser: "lasers",
    Particle: "particles",
    PowerUp: "powerups",
}


def empty_events() -> Dict[str, float]:
    return {k: 0.0 for k in EVENT_KEYS}


class EntityWorld:
    """Live collections for one run"""

    def __init__(self, rng: Optional[random.Random] = None, fx_rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        # Cosmetic stream: particle bursts never consume gameplay rolls
        self.fx_rng = fx_rng or random.Random()
        self.player: Player = Player()
        self.enemies: Dict[int, Enemy] = {}
        self.projectiles: List[Projectile] = []
        self.lasers: List[Laser] = []
        self.particles: List[Particle] = []
        self.powerups: List[PowerUp] = []
        self.events: Dict[str, float] = empty_events()
        self._ids = itertools.count(1)

    def reset(self, player: Optional[Player] = None):
        self.player = player or Player()
        self.enemies = {}
        self.projectiles = []
        self.lasers = []
        self.particles = []
        self.powerups = []
        self.events = empty_events()
        self._ids = itertools.count(1)

    # ----------------------------
    # Insert / remove
    # ----------------------------

    def next_id(self) -> int:
        return next(self._ids)

    def _skip_past(self, used_id: int):
        # Generated ids must never collide with an explicit one
        upcoming = next(self._ids)
        self._ids = itertools.count(max(upcoming, used_id + 1))

    def insert(self, entity):
        """Append an entity to its collection, assigning an id when missing"""
        kind = _KIND_BY_TYPE.get(type(entity))
        if kind is None:
            raise ValueError(f"Unknown entity type: {type(entity).__name__}")

        if hasattr(entity, "id"):
            if entity.id is None:
                entity.id = self.next_id()
            else:
                if kind == "enemies" and entity.id in self.enemies:
                    raise ValueError(f"Enemy id already in use: {entity.id}")
                self._skip_past(entity.id)

        if kind == "enemies":
            self.enemies[entity.id] = entity
        else:
            getattr(self, kind).append(entity)
        return entity

    def remove_where(self, kind: str, predicate: Callable) -> int:
        """Drop entries of one collection matching `predicate`; returns count removed"""
        if kind not in _KIND_BY_TYPE.values():
            raise ValueError(f"Unknown entity kind: {kind}")

        if kind == "enemies":
            doomed = [eid for eid, e in self.enemies.items() if predicate(e)]
            for eid in doomed:
                del self.enemies[eid]
            return len(doomed)

        items = getattr(self, kind)
        kept = [e for e in items if not predicate(e)]
        setattr(self, kind, kept)
        return len(items) - len(kept)

    # ----------------------------
    # Lookup
    # ----------------------------

    def enemy(self, enemy_id: int) -> Optional[Enemy]:
        return self.enemies.get(enemy_id)

    def living_enemy(self, enemy_id: int) -> Optional[Enemy]:
        e = self.enemies.get(enemy_id)
        if e is None or e.hp <= 0:
            return None
        return e

    def living_enemies(self) -> List[Enemy]:
        """Snapshot list, safe to iterate while inserting"""
        return [e for e in self.enemies.values() if e.hp > 0]

    # ----------------------------
    # Effects
    # ----------------------------

    def burst(self, x: float, y: float, color, count: int = 10, speed: float = 5):
        """Spawn `count` particles flying out of (x, y)"""
        r = self.fx_rng
        for _ in range(count):
            self.particles.append(Particle(
                x=x,
                y=y,
                vx=(r.random() - 0.5) * speed,
                vy=(r.random() - 0.5) * speed,
                color=color,
                size=r.random() * 4 + 1,
            ))

    def emit(self, key: str, amount: float = 1.0):
        self.events[key] += amount

    def haptic(self, ms: float):
        # Strongest pulse of the tick wins
        self.events["haptic_ms"] = max(self.events["haptic_ms"], ms)
