"""
SpawnDirector - enemy cadence / type selection and power-up drops
"""

from __future__ import annotations

from typing import Optional

from loguru import logger

from .constants import (
    BOMB,
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    DESTROYER,
    DROP_CHANCE_BOMB,
    DROP_CHANCE_HEART,
    DROP_CHANCE_MULTISHOT,
    DROP_CHANCE_SHIELD,
    ENEMY_STATS,
    FIGHTER,
    HEART,
    KAMIKAZE,
    MULTISHOT,
    SCOUT,
    SHIELD,
    SHOOT_CADENCE,
    SPAWN_RATE_BASE,
    SPAWN_RATE_MIN,
)
from .entities import Enemy, PowerUp
from .world import EntityWorld

# Band order matters: Bomb is checked first
DROP_TABLE = (
    (BOMB, DROP_CHANCE_BOMB),
    (SHIELD, DROP_CHANCE_SHIELD),
    (MULTISHOT, DROP_CHANCE_MULTISHOT),
    (HEART, DROP_CHANCE_HEART),
)


def spawn_rate(score: int, base: int = SPAWN_RATE_BASE, minimum: int = SPAWN_RATE_MIN) -> int:
    """Ticks between spawns; shrinks by one every 50 points"""
    return max(minimum, base - score // 50)


def choose_type(score: int, roll: float) -> str:
    etype = SCOUT
    if score >= 500 and roll > 0.6:
        etype = FIGHTER
    if score >= 1000 and roll > 0.8:
        etype = KAMIKAZE
    if score >= 1500 and roll > 0.9:
        etype = DESTROYER
    return etype


def roll_drop(roll: float) -> Optional[str]:
    """Map one uniform roll onto the cumulative drop bands"""
    upper = 0.0
    for ptype, chance in DROP_TABLE:
        upper += chance
        if roll < upper:
            return ptype
    return None


class SpawnDirector:
    """Decides when enemies enter and what enemies leave behind"""

    def __init__(
        self,
        width: int = CANVAS_WIDTH,
        height: int = CANVAS_HEIGHT,
        base_rate: int = SPAWN_RATE_BASE,
        min_rate: int = SPAWN_RATE_MIN,
    ):
        self.width = width
        self.height = height
        self.base_rate = base_rate
        self.min_rate = min_rate

    def rate(self, score: int) -> int:
        return spawn_rate(score, self.base_rate, self.min_rate)

    def maybe_spawn(self, world: EntityWorld, tick: int, score: int) -> Optional[Enemy]:
        if tick % self.rate(score) != 0:
            return None

        rng = world.rng
        y = rng.uniform(50, self.height - 50)
        etype = choose_type(score, rng.random())
        return self.spawn_enemy(world, etype, self.width + 50, y)

    def spawn_enemy(self, world: EntityWorld, etype: str, x: float, y: float, **overrides) -> Enemy:
        stats = ENEMY_STATS.get(etype)
        if stats is None:
            raise ValueError(f"Unknown enemy type: {etype}")

        enemy = Enemy(
            type=etype,
            x=x,
            y=y,
            width=stats["width"],
            height=stats["height"],
            hp=stats["hp"],
            max_hp=stats["hp"],
            shoot_offset=world.rng.randrange(SHOOT_CADENCE),
            **overrides,
        )
        world.insert(enemy)
        logger.debug("spawned {} #{} at ({:.0f}, {:.0f})", etype, enemy.id, x, y)
        return enemy

    def maybe_drop(self, world: EntityWorld, cx: float, cy: float) -> Optional[PowerUp]:
        """Roll for a power-up centered on (cx, cy)"""
        ptype = roll_drop(world.rng.random())
        if ptype is None:
            return None
        pu = PowerUp(type=ptype, x=cx, y=cy)
        world.insert(pu)
        logger.debug("dropped {} at ({:.0f}, {:.0f})", ptype, cx, cy)
        return pu
