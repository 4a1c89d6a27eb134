"""
EnemyAI - one behavior function per enemy type.

Every behavior receives the enemy, the world and the current tick. It may
move the enemy, change its state, append projectiles/lasers, or spawn child
enemies through the SpawnDirector. Self-destruction is signalled by setting
hp to 0; the simulator prunes it at the end of the tick without scoring.
"""

from __future__ import annotations

import math

from loguru import logger

from .constants import (
    ATTACKING,
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    COLORS,
    CRASHING,
    DESTROYER,
    ENEMY,
    ENEMY_BULLET_SPEED,
    ENTERING,
    FIGHTER,
    HOVERING,
    KAMIKAZE,
    PARATROOPER,
    PARATROOPER_CADENCE,
    PILOT,
    RETREATING,
    SCOUT,
    SHOOT_CADENCE,
)
from .entities import Enemy, Laser, Projectile
from .spawner import SpawnDirector
from .utils import normalize
from .world import EntityWorld

STANDARD_SPEED = 4
PILOT_SPEED = 3
PILOT_ENTER_TICKS = 30
KAMIKAZE_SPEED = 9
KAMIKAZE_PURSUIT = 0.05
KAMIKAZE_TRIGGER_RANGE = 400
PARATROOPER_GRAVITY = 0.3
PARATROOPER_TERMINAL_VY = 2
PARATROOPER_DRAG = 0.98
PARATROOPER_LAUNCH_VX = -2
PARATROOPER_LAUNCH_VY = -10
PARATROOPER_BULLET_SPEED = 5


class EnemyAI:
    """Tagged-variant dispatch over enemy types"""

    def __init__(self, spawner: SpawnDirector, width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT):
        self.spawner = spawner
        self.width = width
        self.height = height
        self.behaviors = {
            SCOUT: self.standard,
            FIGHTER: self.standard,
            DESTROYER: self.standard,
            PILOT: self.pilot,
            KAMIKAZE: self.kamikaze,
            PARATROOPER: self.paratrooper,
        }

    def update(self, world: EntityWorld, tick: int):
        # Children spawned this tick are first updated on the next one
        for enemy in world.living_enemies():
            self.behaviors[enemy.type](enemy, world, tick)
            enemy.age += 1

    # ----------------------------
    # Standard ships
    # ----------------------------

    def target_x(self, enemy: Enemy) -> float:
        """Per-instance hover column"""
        return self.width - 200 - (enemy.id % 200)

    def standard(self, enemy: Enemy, world: EntityWorld, tick: int):
        if enemy.x > self.target_x(enemy):
            enemy.x -= STANDARD_SPEED
        else:
            enemy.state = HOVERING
            enemy.y += math.sin((tick + enemy.id) * 0.05) * 2

        if enemy.state != HOVERING or (tick + enemy.shoot_offset) % SHOOT_CADENCE != 0:
            return

        player = world.player
        roll = world.rng.random()

        if enemy.type == SCOUT:
            if roll > 0.3:
                world.insert(Projectile(
                    x=enemy.x,
                    y=enemy.y + enemy.height / 2,
                    vx=-ENEMY_BULLET_SPEED * 1.5,
                    vy=(player.y - enemy.y) * 0.01,
                    width=10,
                    height=10,
                    color=COLORS["neon_yellow"],
                    owner=ENEMY,
                    damage=10,
                ))
                world.emit("enemy_shot")
        elif enemy.type == FIGHTER:
            if roll > 0.4:
                for i in (-1, 0, 1):
                    world.insert(Projectile(
                        x=enemy.x,
                        y=enemy.y + enemy.height / 2,
                        vx=-ENEMY_BULLET_SPEED,
                        vy=i * 2,
                        width=12,
                        height=8,
                        color=COLORS["neon_pink"],
                        owner=ENEMY,
                        damage=15,
                    ))
                world.emit("enemy_shot")
        elif enemy.type == DESTROYER:
            if roll > 0.5:
                world.insert(Laser(owner_id=enemy.id, y=enemy.y + enemy.height / 2))
                world.emit("laser_charge")
                logger.debug("destroyer #{} charging laser", enemy.id)

    # ----------------------------
    # Pilot: ejected from a dead fighter
    # ----------------------------

    def pilot(self, enemy: Enemy, world: EntityWorld, tick: int):
        if enemy.state == ENTERING:
            enemy.x -= PILOT_SPEED
            if enemy.age + 1 >= PILOT_ENTER_TICKS:
                enemy.state = ATTACKING
        elif enemy.state == ATTACKING:
            player = world.player
            world.insert(Projectile(
                x=enemy.x,
                y=enemy.y,
                vx=-4,
                vy=(player.y - enemy.y) * 0.02,
                width=15,
                height=15,
                color=COLORS["white"],
                owner=ENEMY,
                damage=30,
                is_bomb=True,
            ))
            world.emit("bomb_throw")
            enemy.state = RETREATING
        else:
            enemy.x += 5
            enemy.y -= 2
            if enemy.x > self.width + 50:
                enemy.hp = 0

    # ----------------------------
    # Kamikaze: rush, then crash and drop a paratrooper
    # ----------------------------

    def kamikaze(self, enemy: Enemy, world: EntityWorld, tick: int):
        player = world.player

        if enemy.state == CRASHING:
            enemy.x -= 3
            enemy.vy += 0.2
            enemy.y += enemy.vy
            enemy.rotation += 0.15
            if enemy.y > self.height + 50:
                enemy.hp = 0
            return

        enemy.x -= KAMIKAZE_SPEED
        enemy.y += (player.y - enemy.y) * KAMIKAZE_PURSUIT

        if enemy.x > player.x and enemy.x - player.x < KAMIKAZE_TRIGGER_RANGE:
            enemy.state = CRASHING
            world.emit("crash")
            world.haptic(100)
            self.spawner.spawn_enemy(
                world, PARATROOPER, enemy.x, enemy.y,
                state=ATTACKING,
                vx=PARATROOPER_LAUNCH_VX,
                vy=PARATROOPER_LAUNCH_VY,
            )
            logger.debug("kamikaze #{} crashing", enemy.id)
        elif enemy.x < -100:
            enemy.hp = 0

    # ----------------------------
    # Paratrooper: falls, drifts, takes potshots
    # ----------------------------

    def paratrooper(self, enemy: Enemy, world: EntityWorld, tick: int):
        enemy.vy = min(enemy.vy + PARATROOPER_GRAVITY, PARATROOPER_TERMINAL_VY)
        enemy.vx = enemy.vx * PARATROOPER_DRAG + math.sin((enemy.age + enemy.id) * 0.1) * 0.05
        enemy.x += enemy.vx
        enemy.y += enemy.vy

        if enemy.y > self.height + 50:
            enemy.hp = 0
            return

        if (tick + enemy.shoot_offset) % PARATROOPER_CADENCE == 0:
            player = world.player
            cx, cy = enemy.x + enemy.width / 2, enemy.y + enemy.height / 2
            nx, ny = normalize(player.x + player.width / 2 - cx, player.y + player.height / 2 - cy)
            world.insert(Projectile(
                x=cx,
                y=cy,
                vx=nx * PARATROOPER_BULLET_SPEED,
                vy=ny * PARATROOPER_BULLET_SPEED,
                width=8,
                height=8,
                color=COLORS["neon_green"],
                owner=ENEMY,
                damage=5,
            ))
            world.emit("enemy_shot")
