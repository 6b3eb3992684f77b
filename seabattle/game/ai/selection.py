"""Targeting policy selection from configuration."""

from __future__ import annotations

import logging
import random

from seabattle.game.ai.hunt_target import HuntTargeting
from seabattle.game.ai.random_target import RandomTargeting
from seabattle.game.ai.strategy import TargetingPolicy
from seabattle.game.core.models import BOARD_SIZE

logger = logging.getLogger(__name__)

DEFAULT_POLICY = "random"


def build_targeting_policy(
    name: str, rng: random.Random, size: int = BOARD_SIZE
) -> TargetingPolicy:
    """Construct a targeting policy by name; unknown names use the random baseline."""
    selected = name.strip().lower()
    if selected == HuntTargeting.name:
        return HuntTargeting(rng, size=size)
    if selected != RandomTargeting.name:
        logger.warning("unknown_targeting_policy name=%s fallback=%s", name, DEFAULT_POLICY)
    return RandomTargeting(rng)
