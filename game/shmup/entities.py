"""
Game entity dataclasses
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .constants import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    ENEMY,
    ENTERING,
    LASER_HEIGHT,
    LASER_WARNING_TICKS,
    PLAYER_HEIGHT,
    PLAYER_HP,
    PLAYER_START_X,
    PLAYER_WIDTH,
    POWERUP_SIZE,
    WARNING,
)

Color = Tuple[int, int, int]


@dataclass
class Player:
    """Player ship; timers are counted in ticks"""
    x: float = PLAYER_START_X
    y: float = CANVAS_HEIGHT / 2
    width: float = PLAYER_WIDTH
    height: float = PLAYER_HEIGHT
    vx: float = 0.0
    vy: float = 0.0
    hp: float = PLAYER_HP
    max_hp: float = PLAYER_HP
    last_shot_time: float = float("-inf")  # ms
    invulnerable_time: int = 0
    shield_time: int = 0
    multishot_time: int = 0


@dataclass
class Enemy:
    """Enemy ship; behavior is selected by `type`"""
    type: str
    x: float
    y: float
    width: float
    height: float
    hp: float
    max_hp: float
    id: Optional[int] = None
    state: str = ENTERING
    shoot_offset: int = 0
    vx: float = 0.0
    vy: float = 0.0
    rotation: float = 0.0
    age: int = 0  # updates since spawn


@dataclass
class Projectile:
    """Bullet or bomb fired by the player or an enemy"""
    x: float
    y: float
    vx: float
    vy: float
    width: float
    height: float
    color: Color
    owner: str = ENEMY
    damage: float = 10.0
    is_bomb: bool = False
    consumed: bool = False
    id: Optional[int] = None


@dataclass
class Laser:
    """Destroyer beam; `owner_id` is resolved against the world every tick"""
    owner_id: int
    y: float
    height: float = LASER_HEIGHT
    width: float = CANVAS_WIDTH
    state: str = WARNING
    timer: int = LASER_WARNING_TICKS
    id: Optional[int] = None


@dataclass
class Particle:
    """Decorative burst fragment, no gameplay effect"""
    x: float
    y: float
    vx: float
    vy: float
    color: Color
    size: float
    life: float = 1.0


@dataclass
class PowerUp:
    """Collectible dropped by destroyed enemies"""
    type: str
    x: float
    y: float
    width: float = POWERUP_SIZE
    height: float = POWERUP_SIZE
    vx: float = 0.0
    picked: bool = False
    id: Optional[int] = None
