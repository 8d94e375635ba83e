"""Settings read from the environment (and a ``.env`` file, if present)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the CLI and simulation runner.

    Attributes:
        seed: Seed for shuffling; None for a fresh random game
        log_level: Name of the logging level
        max_turns: Turn cap before a simulated game is abandoned
        bot_delay: Pause between bot moves when watching, in seconds
        log_dir: Directory for JSON game logs
    """

    seed: int | None = None
    log_level: str = "INFO"
    max_turns: int = 1000
    bot_delay: float = 0.5
    log_dir: str = "logs/games"


def load_settings(env_file: str | Path | None = ".env") -> Settings:
    """Build settings from ``EIGHTS_*`` environment variables.

    Values already in the environment win over those in ``env_file``.
    """
    if env_file is not None and Path(env_file).exists():
        load_dotenv(env_file)

    seed = os.environ.get("EIGHTS_SEED")
    return Settings(
        seed=int(seed) if seed else None,
        log_level=os.environ.get("EIGHTS_LOG_LEVEL", "INFO").upper(),
        max_turns=int(os.environ.get("EIGHTS_MAX_TURNS", "1000")),
        bot_delay=float(os.environ.get("EIGHTS_BOT_DELAY", "0.5")),
        log_dir=os.environ.get("EIGHTS_LOG_DIR", "logs/games"),
    )
