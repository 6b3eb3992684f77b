"""Application configuration and env loading."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILES: tuple[str, ...] = (
    "appdata/config/.env",
    "appdata/config/.env.local",
    ".env",
    ".env.local",
)


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Immutable per-run game configuration."""

    seed: int | None = None
    targeting: str = "random"
    max_input_attempts: int | None = None
    clear_screen: bool = True


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = _resolve_env_path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files in order; later files overwrite earlier ones.

    Default order: ``appdata/config/.env``, ``appdata/config/.env.local``,
    ``.env``, ``.env.local``.
    """
    to_load = tuple(paths) if paths is not None else DEFAULT_ENV_FILES
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def load_game_config() -> GameConfig:
    """Build game configuration from ``SEABATTLE_*`` environment variables."""
    attempts = _int("SEABATTLE_MAX_INPUT_ATTEMPTS", 0)
    return GameConfig(
        seed=_optional_int("SEABATTLE_SEED"),
        targeting=os.getenv("SEABATTLE_TARGETING", "random").strip().lower() or "random",
        max_input_attempts=attempts if attempts > 0 else None,
        clear_screen=_flag("SEABATTLE_CLEAR_SCREEN", default=True),
    )


def _flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _int(name: str, default: int) -> int:
    value = _optional_int(name)
    return default if value is None else value


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("invalid_int_env name=%s value=%r", name, raw)
        return None


def _resolve_env_path(path: str) -> Path:
    """Resolve env path from cwd, then project root."""
    candidate = Path(path)
    if candidate.exists():
        return candidate

    # Fallback for run configs with a different working directory.
    project_root = Path(__file__).resolve().parents[3]
    return project_root / path
