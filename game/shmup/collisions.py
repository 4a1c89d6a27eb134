"""
CollisionResolver - the single overlap pass of a tick.

Passes run in a fixed order: pickups, player bullets, enemy bullets,
beams, ramming. The exposure gate is re-checked before every hit on the
player, so a bullet hit (invulnerability 30) shields the player from the
beam and ram passes that follow, while a beam hit resets invulnerability
to 0 and leaves the player open to a ram in the same tick.
"""

from __future__ import annotations

from loguru import logger

from .constants import (
    BULLET_INVULNERABILITY,
    CANVAS_WIDTH,
    COLORS,
    ENEMY,
    ENEMY_STATS,
    FIGHTER,
    FIRING,
    LASER_TICK_DAMAGE,
    PILOT,
    PLAYER,
    RAM_DAMAGE_TO_ENEMY,
    RAM_DAMAGE_TO_PLAYER,
    RAM_INVULNERABILITY,
)
from .physics import beam_rect
from .powerups import PowerUpEffects
from .spawner import SpawnDirector
from .utils import entities_intersect, rect_intersect, rect_of
from .world import EntityWorld

# Enemy bullets are tested against a hitbox inset from the player's sprite
PLAYER_HITBOX_INSET = 5


class CollisionResolver:
    def __init__(self, spawner: SpawnDirector, effects: PowerUpEffects, width: int = CANVAS_WIDTH):
        self.spawner = spawner
        self.effects = effects
        self.width = width

    def resolve(self, world: EntityWorld, tick: int) -> int:
        """Run every pass; returns score gained this tick"""
        gained = 0
        gained += self.player_vs_powerups(world)
        gained += self.bullets_vs_enemies(world)
        self.bullets_vs_player(world)
        self.beams_vs_player(world, tick)
        self.ram_vs_player(world)
        return gained

    # ----------------------------
    # Helpers
    # ----------------------------

    @staticmethod
    def exposed(world: EntityWorld) -> bool:
        p = world.player
        return p.invulnerable_time <= 0 and p.shield_time <= 0

    @staticmethod
    def damage_player(world: EntityWorld, amount: float):
        p = world.player
        p.hp = max(0.0, p.hp - amount)
        world.emit("damage", amount)

    # ----------------------------
    # Passes
    # ----------------------------

    def player_vs_powerups(self, world: EntityWorld) -> int:
        gained = 0
        player = world.player
        for pu in world.powerups:
            if pu.picked or not entities_intersect(player, pu):
                continue
            pu.picked = True
            if self.effects.wasted(pu, world):
                continue
            gained += self.effects.apply(pu, world)
            world.burst(pu.x, pu.y, COLORS["white"], 10, 2)
        return gained

    def bullets_vs_enemies(self, world: EntityWorld) -> int:
        gained = 0
        bullets = [b for b in world.projectiles if b.owner == PLAYER]
        for bullet in bullets:
            for enemy in world.living_enemies():
                if bullet.consumed:
                    break
                if not entities_intersect(bullet, enemy):
                    continue

                bullet.consumed = True
                enemy.hp -= bullet.damage
                world.emit("hit")
                world.burst(bullet.x, bullet.y, bullet.color, 3, 3)

                if enemy.hp <= 0:
                    gained += self.kill(world, enemy)
        return gained

    def kill(self, world: EntityWorld, enemy) -> int:
        score = ENEMY_STATS[enemy.type]["score"]
        cx, cy = enemy.x + enemy.width / 2, enemy.y + enemy.height / 2
        world.emit("kill")
        world.emit("explosion")
        world.burst(cx, cy, COLORS["neon_yellow"], 20, 8)

        if enemy.type == FIGHTER:
            self.spawner.spawn_enemy(world, PILOT, enemy.x, enemy.y)

        self.spawner.maybe_drop(world, cx, cy)
        logger.debug("{} #{} destroyed (+{})", enemy.type, enemy.id, score)
        return score

    def bullets_vs_player(self, world: EntityWorld):
        player = world.player
        px, py, pw, ph = rect_of(player)
        inset = PLAYER_HITBOX_INSET
        hitbox = (px + inset, py + inset, pw - 2 * inset, ph - 2 * inset)

        for bullet in world.projectiles:
            if bullet.owner != ENEMY or bullet.consumed:
                continue
            if player.invulnerable_time > 0:
                return
            if not rect_intersect(*rect_of(bullet), *hitbox):
                continue

            bullet.consumed = True
            if player.shield_time > 0:
                world.emit("deflect")
                world.burst(bullet.x, bullet.y, COLORS["neon_cyan"], 6, 4)
                continue

            self.damage_player(world, bullet.damage)
            player.invulnerable_time = BULLET_INVULNERABILITY
            world.emit("explosion")
            world.haptic(bullet.damage * 10)
            world.burst(px + pw / 2, py + ph / 2, COLORS["neon_red"], 10, 5)

    def beams_vs_player(self, world: EntityWorld, tick: int):
        player = world.player
        for laser in world.lasers:
            if laser.state != FIRING or laser.timer <= 0:
                continue
            # Owner may have died in the bullet pass of this tick
            if world.living_enemy(laser.owner_id) is None:
                continue
            if not self.exposed(world):
                return
            if not rect_intersect(*rect_of(player), *beam_rect(laser, self.width)):
                continue

            self.damage_player(world, LASER_TICK_DAMAGE)
            # Continuous damage: no invulnerability window
            player.invulnerable_time = 0
            world.burst(player.x + world.fx_rng.random() * player.width, player.y + player.height / 2,
                        COLORS["neon_red"], 2, 5)
            if tick % 10 == 0:
                world.haptic(50)

    def ram_vs_player(self, world: EntityWorld):
        player = world.player
        for enemy in world.living_enemies():
            if not self.exposed(world):
                return
            if not entities_intersect(player, enemy):
                continue

            self.damage_player(world, RAM_DAMAGE_TO_PLAYER)
            player.invulnerable_time = RAM_INVULNERABILITY
            enemy.hp -= RAM_DAMAGE_TO_ENEMY
            world.emit("crash")
            world.haptic(400)
            world.burst((player.x + enemy.x) / 2, (player.y + enemy.y) / 2, COLORS["white"], 20, 10)
