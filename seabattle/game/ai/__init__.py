"""Opponent targeting policies."""

from seabattle.game.ai.hunt_target import HuntTargeting
from seabattle.game.ai.random_target import RandomTargeting
from seabattle.game.ai.selection import build_targeting_policy
from seabattle.game.ai.strategy import TargetingPolicy

__all__ = ["HuntTargeting", "RandomTargeting", "TargetingPolicy", "build_targeting_policy"]
