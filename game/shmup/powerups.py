"""
PowerUpEffects - what each pickup does to the player and the world
"""

from __future__ import annotations

from loguru import logger

from .constants import (
    BOMB,
    BOMB_KILL_CHANCE,
    COLORS,
    ENEMY_STATS,
    HEART,
    HEART_VALUE,
    MULTISHOT,
    MULTISHOT_DURATION,
    SHIELD,
    SHIELD_DURATION,
)
from .entities import PowerUp
from .world import EntityWorld


class PowerUpEffects:
    def __init__(
        self,
        heart_value: float = HEART_VALUE,
        shield_duration: int = SHIELD_DURATION,
        multishot_duration: int = MULTISHOT_DURATION,
        bomb_kill_chance: float = BOMB_KILL_CHANCE,
    ):
        self.heart_value = heart_value
        self.shield_duration = shield_duration
        self.multishot_duration = multishot_duration
        self.bomb_kill_chance = bomb_kill_chance
        self.handlers = {
            HEART: self.heart,
            SHIELD: self.shield,
            MULTISHOT: self.multishot,
            BOMB: self.bomb,
        }

    @staticmethod
    def wasted(pu: PowerUp, world: EntityWorld) -> bool:
        """A Heart at full hp is consumed with no effect, cue or burst"""
        return pu.type == HEART and world.player.hp >= world.player.max_hp

    def apply(self, pu: PowerUp, world: EntityWorld) -> int:
        """Apply a pickup; returns score credited by it"""
        if self.wasted(pu, world):
            return 0
        world.emit("powerup")
        return self.handlers[pu.type](world) or 0

    def heart(self, world: EntityWorld):
        player = world.player
        player.hp = min(player.max_hp, player.hp + self.heart_value)

    def shield(self, world: EntityWorld):
        world.player.shield_time = self.shield_duration

    def multishot(self, world: EntityWorld):
        world.player.multishot_time = self.multishot_duration

    def bomb(self, world: EntityWorld) -> int:
        """Area blast: each living enemy is independently rolled for destruction"""
        world.emit("flash")
        world.haptic(500)

        credited = 0
        for enemy in world.living_enemies():
            if world.rng.random() < self.bomb_kill_chance:
                enemy.hp = 0
                credited += ENEMY_STATS[enemy.type]["score"]
                world.burst(enemy.x + enemy.width / 2, enemy.y + enemy.height / 2, COLORS["neon_yellow"], 20, 8)
                world.emit("kill")
        if credited:
            world.emit("explosion")
        logger.debug("bomb credited {} points", credited)
        return credited
