"""
Configuration for the simulator and the gym environment.
Values are passed straight through as keyword arguments.
"""

from .constants import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    SHOOT_COOLDOWN,
    SPAWN_RATE_BASE,
    SPAWN_RATE_MIN,
)

# Simulator parameters
SIM_CONFIG = {
    "width": CANVAS_WIDTH,
    "height": CANVAS_HEIGHT,
    "spawn_rate_base": SPAWN_RATE_BASE,
    "spawn_rate_min": SPAWN_RATE_MIN,
    "shoot_cooldown_ms": SHOOT_COOLDOWN,
}

# Environment parameters
ENV_CONFIG = {
    "max_steps": 3600,  # 60 seconds at 60 ticks/s
    "k_enemies": 5,
    "m_bullets": 5,
}

# Reward shaping for the env adapter
REWARD_CONFIG = {
    "R_SCORE": 0.01,     # per point scored
    "R_DAMAGE": 0.05,    # per hp lost
    "R_SHOT": 0.001,     # per player shot
    "R_TIME": 0.001,     # small survival bonus per tick
    "R_DEATH": 5.0,      # death penalty
}
