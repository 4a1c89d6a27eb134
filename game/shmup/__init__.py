"""Shmup module - side-scrolling shooter simulation core"""

from loguru import logger

from .simulator import InputState, SimSnapshot, Simulator, resolve_intent
from .shmup_env import ShmupEnv, run_random_episode

# Library default: silent until the host calls logger.enable("game.shmup")
logger.disable(__name__)

__all__ = ['Simulator', 'SimSnapshot', 'InputState', 'resolve_intent', 'ShmupEnv', 'run_random_episode']
