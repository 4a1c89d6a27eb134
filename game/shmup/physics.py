"""
Ballistics, laser cycle, power-up drift and particle decay
"""

from __future__ import annotations

import math
from typing import Tuple

from loguru import logger

from .constants import (
    BOUNDS_MARGIN,
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    FIRING,
    LASER_FIRING_TICKS,
    POWERUP_SPEED,
    WARNING,
)
from .entities import Laser, Projectile
from .world import EntityWorld

BOMB_DRAG = 0.99
BOMB_GRAVITY = 0.05
PARTICLE_DECAY = 0.05


def beam_rect(laser: Laser, width: float = CANVAS_WIDTH) -> Tuple[float, float, float, float]:
    """Full-width band centered on the laser's y"""
    return 0.0, laser.y - laser.height / 2, width, laser.height


class ProjectileAndLaserStepper:
    """Advances everything that moves on its own"""

    def __init__(self, width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT, margin: float = BOUNDS_MARGIN):
        self.width = width
        self.height = height
        self.margin = margin

    def step(self, world: EntityWorld, tick: int):
        self.step_projectiles(world)
        self.step_lasers(world)
        self.step_powerups(world, tick)
        self.step_particles(world)

    def in_bounds(self, p: Projectile) -> bool:
        m = self.margin
        return -m < p.x < self.width + m and -m < p.y < self.height + m

    def step_projectiles(self, world: EntityWorld):
        for p in world.projectiles:
            if p.consumed:
                continue
            p.x += p.vx
            p.y += p.vy
            if p.is_bomb:
                p.vx *= BOMB_DRAG
                p.vy += BOMB_GRAVITY

    def step_lasers(self, world: EntityWorld):
        for laser in world.lasers:
            owner = world.living_enemy(laser.owner_id)
            if owner is None:
                # Lasers never outlive their owner
                laser.timer = 0
                continue

            laser.y = owner.y + owner.height / 2

            laser.timer -= 1
            if laser.state == WARNING and laser.timer <= 0:
                laser.state = FIRING
                laser.timer = LASER_FIRING_TICKS
                logger.debug("laser #{} firing", laser.id)

    def step_powerups(self, world: EntityWorld, tick: int):
        for pu in world.powerups:
            pu.x -= POWERUP_SPEED
            pu.y += math.sin(tick * 0.1) * 0.5

    def step_particles(self, world: EntityWorld):
        for p in world.particles:
            p.x += p.vx
            p.y += p.vy
            p.life -= PARTICLE_DECAY
