"""Game runner for Eights simulations."""

from __future__ import annotations

import json
import logging
import time
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Sequence

from eights_engine.game import check_invariants, run_bot_turn
from eights_engine.state import NUM_SEATS, create_initial_state

if TYPE_CHECKING:
    from eights_engine.state import GameState
    from strategies.base import Strategy

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Result of a completed game."""

    game_id: str
    winner: int | None  # Seat index, or None if the turn cap was hit
    turns: int
    hand_sizes: tuple[int, ...]
    strategies: tuple[str, ...]
    seed: int | None
    duration_ms: float
    cards_left_in_draw_pile: int


@dataclass
class MoveRecord:
    """Record of one bot turn (a play, a draw or a pass, plus any suit choice)."""

    turn: int
    seat: int
    message: str
    state_after: dict


@dataclass
class GameLog:
    """Complete log of a game."""

    game_id: str
    timestamp: str
    seed: int | None
    strategies: tuple[str, ...]
    initial_state: dict
    moves: list[MoveRecord] = field(default_factory=list)
    result: GameResult | None = None


class GameRunner:
    """Runs Eights games with a bot in every seat."""

    def __init__(
        self,
        strategies: Sequence[Strategy],
        max_turns: int = 1000,
        log_moves: bool = True,
        check_each_turn: bool = True,
    ):
        """Initialize the game runner.

        Args:
            strategies: One strategy per seat.
            max_turns: Turn cap before the game is abandoned without a winner.
            log_moves: Whether to log individual moves.
            check_each_turn: Whether to verify card conservation after every turn.
        """
        if len(strategies) != NUM_SEATS:
            raise ValueError(f"Need {NUM_SEATS} strategies, got {len(strategies)}")
        self.strategies = tuple(strategies)
        self.max_turns = max_turns
        self.log_moves = log_moves
        self.check_each_turn = check_each_turn

    def run_game(self, seed: int | None = None) -> tuple[GameResult, GameLog | None]:
        """Run a single game.

        Args:
            seed: Random seed for reproducibility.

        Returns:
            Tuple of (result, log). Log is None if log_moves is False.
        """
        start_time = time.perf_counter()
        game_id = str(uuid.uuid4())
        names = tuple(s.name for s in self.strategies)

        state = create_initial_state(
            seed=seed,
            seat_names=tuple(f"Seat {i} ({name})" for i, name in enumerate(names)),
            bot_seats=frozenset(range(NUM_SEATS)),
        )

        for i, strategy in enumerate(self.strategies):
            strategy.on_game_start(state, i)

        game_log = None
        if self.log_moves:
            game_log = GameLog(
                game_id=game_id,
                timestamp=datetime.now().isoformat(),
                seed=seed,
                strategies=names,
                initial_state=self._state_to_dict(state),
            )

        while not state.is_game_over and state.turn_number < self.max_turns:
            seat = state.current_seat
            new_state = run_bot_turn(state, self.strategies[seat])

            if self.check_each_turn:
                check_invariants(new_state)

            if game_log:
                game_log.moves.append(
                    MoveRecord(
                        turn=state.turn_number,
                        seat=seat,
                        message=new_state.message,
                        state_after=self._state_to_dict(new_state),
                    )
                )

            state = new_state

        if not state.is_game_over:
            logger.warning("Game %s hit the %d turn cap without a winner", game_id, self.max_turns)

        duration_ms = (time.perf_counter() - start_time) * 1000

        result = GameResult(
            game_id=game_id,
            winner=state.winner,
            turns=state.turn_number,
            hand_sizes=tuple(len(s.hand) for s in state.seats),
            strategies=names,
            seed=seed,
            duration_ms=duration_ms,
            cards_left_in_draw_pile=len(state.draw_pile),
        )

        if game_log:
            game_log.result = result

        for strategy in self.strategies:
            strategy.on_game_end(state, state.winner)

        return result, game_log

    def _state_to_dict(self, state: GameState) -> dict:
        """Convert game state to a dictionary for logging."""
        return {
            "turn": state.turn_number,
            "current_seat": state.current_seat,
            "phase": state.phase.name,
            "direction": state.direction,
            "pending_penalty": state.pending_penalty,
            "active_suit": state.active_suit.name if state.active_suit is not None else None,
            "top_card": str(state.top_card),
            "draw_pile_size": len(state.draw_pile),
            "discard_pile_size": len(state.discard_pile),
            "hands": [[str(c) for c in s.hand] for s in state.seats],
        }


def save_game_log(log: GameLog, base_dir: str = "logs/games") -> Path:
    """Save a game log to disk.

    Args:
        log: Game log to save.
        base_dir: Base directory for logs.

    Returns:
        Path to the saved file.
    """
    date_str = log.timestamp[:10]  # YYYY-MM-DD
    dir_path = Path(base_dir) / date_str
    dir_path.mkdir(parents=True, exist_ok=True)

    file_path = dir_path / f"game_{log.game_id}.json"

    data = {
        "game_id": log.game_id,
        "timestamp": log.timestamp,
        "seed": log.seed,
        "strategies": log.strategies,
        "initial_state": log.initial_state,
        "moves": [
            {
                "turn": m.turn,
                "seat": m.seat,
                "message": m.message,
                "state_after": m.state_after,
            }
            for m in log.moves
        ],
        "result": {
            "winner": log.result.winner,
            "turns": log.result.turns,
            "hand_sizes": log.result.hand_sizes,
            "duration_ms": log.result.duration_ms,
            "cards_left_in_draw_pile": log.result.cards_left_in_draw_pile,
        }
        if log.result
        else None,
    }

    with open(file_path, "w") as f:
        json.dump(data, f, indent=2)

    return file_path


def run_batch(
    strategies: Sequence[Strategy],
    num_games: int,
    start_seed: int = 0,
    max_turns: int = 1000,
    log_moves: bool = False,
    log_dir: str | None = None,
) -> list[GameResult]:
    """Run multiple games.

    Args:
        strategies: One strategy per seat.
        num_games: Number of games to run.
        start_seed: Starting seed (incremented for each game).
        max_turns: Turn cap per game.
        log_moves: Whether to log moves (slower).
        log_dir: If set, every game is logged and saved as JSON under this directory.

    Returns:
        List of game results.
    """
    runner = GameRunner(
        strategies, max_turns=max_turns, log_moves=log_moves or log_dir is not None
    )
    results = []

    for i in range(num_games):
        result, log = runner.run_game(seed=start_seed + i)
        results.append(result)
        logger.debug("Game %d/%d: winner=%s turns=%d", i + 1, num_games, result.winner, result.turns)
        if log_dir is not None:
            path = save_game_log(log, base_dir=log_dir)
            logger.info("Saved game log to %s", path)

    return results


def summarize(results: Sequence[GameResult]) -> dict:
    """Win counts per seat and average game length."""
    wins = [sum(1 for r in results if r.winner == seat) for seat in range(NUM_SEATS)]
    unfinished = sum(1 for r in results if r.winner is None)
    avg_turns = sum(r.turns for r in results) / len(results) if results else 0.0
    return {
        "games": len(results),
        "wins": wins,
        "unfinished": unfinished,
        "avg_turns": avg_turns,
    }
