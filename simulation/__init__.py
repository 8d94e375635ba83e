"""Headless bot-vs-bot simulation."""

from simulation.runner import (
    GameLog,
    GameResult,
    GameRunner,
    MoveRecord,
    run_batch,
    save_game_log,
    summarize,
)

__all__ = [
    "GameResult",
    "GameLog",
    "GameRunner",
    "MoveRecord",
    "run_batch",
    "save_game_log",
    "summarize",
]
