"""Application entry point."""

from __future__ import annotations

import logging
import random

from seabattle.game.ai.selection import build_targeting_policy
from seabattle.game.app.controller import TurnController
from seabattle.game.core.errors import InputAttemptsExhausted, InputClosed
from seabattle.game.core.rules import create_session
from seabattle.game.infra.config import load_default_env_files, load_game_config
from seabattle.game.infra.logging import setup_logging, shutdown_logging
from seabattle.game.ui.console import ConsoleInput, ConsolePresenter

logger = logging.getLogger(__name__)


def main() -> int:
    """Run one console game against the computer."""
    load_default_env_files()
    setup_logging()
    config = load_game_config()
    logger.info(
        "config seed=%s targeting=%s max_input_attempts=%s",
        config.seed,
        config.targeting,
        config.max_input_attempts,
    )

    print("Welcome to Battleship!")
    rng = random.Random(config.seed)
    session = create_session(rng)
    controller = TurnController(
        session,
        build_targeting_policy(config.targeting, rng),
        ConsoleInput(),
        ConsolePresenter(clear_screen=config.clear_screen),
        max_input_attempts=config.max_input_attempts,
    )
    try:
        controller.play()
    except (InputClosed, InputAttemptsExhausted, KeyboardInterrupt) as exc:
        logger.info("game_aborted reason=%s", type(exc).__name__)
        print("\nGame aborted.")
        return 1
    finally:
        shutdown_logging()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
