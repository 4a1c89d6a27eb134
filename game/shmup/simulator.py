"""
Simulator - orchestrates one fixed tick of the shmup world
----------------------------------------------------------
Per tick:
    intents -> player move/fire -> timers -> spawn -> enemy AI
    -> physics -> collisions -> cleanup -> game-over check

The host calls `start()` once per run and `tick()` once per frame, then
reads `snapshot()` for rendering/HUD/audio. Outside the PLAYING state
`tick()` does nothing.
"""

from __future__ import annotations

import copy
import math
import random
import time
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from loguru import logger

from .constants import (
    BULLET_DAMAGE,
    BULLET_SPEED,
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    COLORS,
    FPS,
    GAME_OVER,
    MENU,
    PLAYER,
    PLAYER_SPEED,
    PLAYING,
    SHOOT_COOLDOWN,
    SPAWN_RATE_BASE,
    SPAWN_RATE_MIN,
)
from .collisions import CollisionResolver
from .enemy_ai import EnemyAI
from .entities import Player, Projectile
from .physics import ProjectileAndLaserStepper
from .powerups import PowerUpEffects
from .spawner import SpawnDirector
from .utils import clamp, normalize
from .world import EntityWorld, empty_events


@dataclass
class InputState:
    """Raw host input for one tick"""
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    fire: bool = False
    stick_x: float = 0.0
    stick_y: float = 0.0
    stick_active: bool = False


def resolve_intent(inp: InputState) -> Tuple[float, float, bool]:
    """Collapse keyboard + virtual stick into (dx, dy, fire); an active stick wins"""
    if inp.stick_active:
        dx, dy = inp.stick_x, inp.stick_y
        mag = math.hypot(dx, dy)
        if mag > 1.0:
            dx, dy = dx / mag, dy / mag
        return dx, dy, inp.fire

    dx = dy = 0.0
    if inp.up:
        dy = -1.0
    if inp.down:
        dy = 1.0
    if inp.left:
        dx = -1.0
    if inp.right:
        dx = 1.0
    dx, dy = normalize(dx, dy)
    return dx, dy, inp.fire


@dataclass(frozen=True)
class SimSnapshot:
    """Read-only view published after each tick"""
    tick: int
    state: str
    score: int
    hp: float
    max_hp: float
    shield_seconds: int
    multishot_seconds: int
    game_over: bool
    events: Dict[str, float] = field(default_factory=empty_events)
    player: Optional[Player] = None
    enemies: tuple = ()
    projectiles: tuple = ()
    lasers: tuple = ()
    particles: tuple = ()
    powerups: tuple = ()


def _seconds(frames: int) -> int:
    return math.ceil(frames / FPS) if frames > 0 else 0


class Simulator:
    """Fixed-tick simulation core"""

    def __init__(
        self,
        width: int = CANVAS_WIDTH,
        height: int = CANVAS_HEIGHT,
        spawn_rate_base: int = SPAWN_RATE_BASE,
        spawn_rate_min: int = SPAWN_RATE_MIN,
        shoot_cooldown_ms: float = SHOOT_COOLDOWN,
        seed: Optional[int] = None,
    ):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas must be positive, got {width}x{height}")

        self.width = width
        self.height = height
        self.shoot_cooldown_ms = shoot_cooldown_ms

        self.rng = random.Random(seed)
        self.world = EntityWorld(rng=self.rng, fx_rng=random.Random(seed))

        self.spawner = SpawnDirector(width, height, spawn_rate_base, spawn_rate_min)
        self.ai = EnemyAI(self.spawner, width, height)
        self.stepper = ProjectileAndLaserStepper(width, height)
        self.effects = PowerUpEffects()
        self.collisions = CollisionResolver(self.spawner, self.effects, width)

        self.state = MENU
        self.score = 0
        self.tick_count = 0

    # ----------------------------
    # Lifecycle
    # ----------------------------

    def start(self, seed: Optional[int] = None):
        """Begin a fresh run"""
        if seed is not None:
            self.rng.seed(seed)
            self.world.fx_rng.seed(seed)

        self.world.reset(Player(y=self.height / 2))
        self.score = 0
        self.tick_count = 0
        self.state = PLAYING
        logger.info("run started ({}x{})", self.width, self.height)
        return self.snapshot()

    @property
    def player(self) -> Player:
        return self.world.player

    @property
    def game_over(self) -> bool:
        return self.state == GAME_OVER

    def tick(self, inp: Optional[InputState] = None, now: Optional[float] = None) -> SimSnapshot:
        """Advance one tick. `now` is wall-clock ms, used only by the shot cooldown"""
        if self.state != PLAYING:
            return self.snapshot()

        world = self.world
        world.events = empty_events()
        self.tick_count += 1
        tick = self.tick_count

        dx, dy, fire = resolve_intent(inp or InputState())
        self._move_player(dx, dy)
        if fire:
            self._fire(time.monotonic() * 1000 if now is None else now)
        self._count_down_timers()

        self.spawner.maybe_spawn(world, tick, self.score)
        self.ai.update(world, tick)
        self.stepper.step(world, tick)
        self.score += self.collisions.resolve(world, tick)
        self._cleanup()

        if self.player.hp <= 0:
            self.player.hp = 0
            self.state = GAME_OVER
            logger.info("game over at tick {} with score {}", tick, self.score)

        return self.snapshot()

    # ----------------------------
    # Player
    # ----------------------------

    def _move_player(self, dx: float, dy: float):
        p = self.player
        p.vx = dx * PLAYER_SPEED
        p.vy = dy * PLAYER_SPEED
        p.x = clamp(p.x + p.vx, 0, self.width - p.width)
        p.y = clamp(p.y + p.vy, 0, self.height - p.height)

    def _fire(self, now: float):
        p = self.player
        if now - p.last_shot_time <= self.shoot_cooldown_ms:
            return
        p.last_shot_time = now

        spreads = (-2, 0, 2) if p.multishot_time > 0 else (0,)
        for vy in spreads:
            self.world.insert(Projectile(
                x=p.x + p.width,
                y=p.y + p.height / 2 - 2,
                vx=BULLET_SPEED,
                vy=vy,
                width=20,
                height=4,
                color=COLORS["neon_cyan"],
                owner=PLAYER,
                damage=BULLET_DAMAGE,
            ))
        self.world.emit("player_shot")

    def _count_down_timers(self):
        p = self.player
        if p.invulnerable_time > 0:
            p.invulnerable_time -= 1
        if p.shield_time > 0:
            p.shield_time -= 1
        if p.multishot_time > 0:
            p.multishot_time -= 1

    # ----------------------------
    # Cleanup
    # ----------------------------

    def _cleanup(self):
        world = self.world
        world.remove_where("enemies", lambda e: e.hp <= 0)
        world.remove_where("lasers", lambda l: l.timer <= 0 or world.living_enemy(l.owner_id) is None)
        world.remove_where("projectiles", lambda p: p.consumed or not self.stepper.in_bounds(p))
        world.remove_where("powerups", lambda pu: pu.picked or pu.x <= -50)
        world.remove_where("particles", lambda p: p.life <= 0)

    # ----------------------------
    # Outputs
    # ----------------------------

    def snapshot(self) -> SimSnapshot:
        world = self.world
        p = world.player
        return SimSnapshot(
            tick=self.tick_count,
            state=self.state,
            score=self.score,
            hp=p.hp,
            max_hp=p.max_hp,
            shield_seconds=_seconds(p.shield_time),
            multishot_seconds=_seconds(p.multishot_time),
            game_over=self.state == GAME_OVER,
            events=dict(world.events),
            player=copy.copy(p),
            enemies=tuple(copy.copy(e) for e in world.enemies.values()),
            projectiles=tuple(copy.copy(b) for b in world.projectiles),
            lasers=tuple(copy.copy(l) for l in world.lasers),
            particles=tuple(copy.copy(pt) for pt in world.particles),
            powerups=tuple(copy.copy(pu) for pu in world.powerups),
        )
