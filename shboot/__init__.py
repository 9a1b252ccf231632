"""Shboot - top-down arena shooter"""

from .config import ArenaConfig, DEFAULT_CONFIG
from .game import Arena, FrameInput, StepEvents
from .arena_env import ArenaEnv, run_random_episode

__all__ = ['ArenaConfig', 'DEFAULT_CONFIG', 'Arena', 'FrameInput', 'StepEvents', 'ArenaEnv', 'run_random_episode']
