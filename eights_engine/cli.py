"""Command-line interface for Eights."""

from __future__ import annotations

import argparse
import logging
import time
from typing import TYPE_CHECKING

from eights_engine.cards import Suit
from eights_engine.config import load_settings
from eights_engine.game import dispatch, is_bot_turn, run_bot_turn, start_game
from eights_engine.moves import ChooseSuit, Draw, Pass, Play
from eights_engine.state import GamePhase
from eights_engine.views import build_view

if TYPE_CHECKING:
    from eights_engine.moves import Move
    from eights_engine.state import GameState

logger = logging.getLogger(__name__)


def format_state(state: GameState, viewer: int | None = 0, reveal_all: bool = False) -> str:
    """Format game state for display from one seat's point of view."""
    view = build_view(state, viewer=viewer, reveal_all=reveal_all)
    lines = []

    arrow = "→" if view.direction == 1 else "←"
    lines.append("=" * 60)
    lines.append(f"Turn {view.turn_number} | Phase: {view.phase} | Direction {arrow}")
    lines.append("=" * 60)

    top = f"Top card: {view.top_card.display}"
    if view.active_suit:
        top += f" (suit: {view.active_suit.lower()})"
    if view.pending_penalty:
        top += f" | Penalty: draw {view.pending_penalty}"
    lines.append(top)
    lines.append(f"Draw pile: {view.draw_pile_count} cards | Discard: {view.discard_pile_count}")

    for seat in view.seats:
        prefix = "→ " if seat.is_current else "  "
        if seat.hand is not None:
            hand_str = "  ".join(
                f"{i + 1}:{c.display}" for i, c in enumerate(seat.hand)
            ) or "(empty)"
            lines.append(f"{prefix}{seat.name}: {hand_str}")
        else:
            lines.append(f"{prefix}{seat.name}: [{seat.hand_count} cards]")

    lines.append(f"\n{view.message}")

    if view.winner is not None:
        lines.append("\n" + "=" * 60)
        lines.append(f"GAME OVER - Winner: {view.seats[view.winner].name}")
        lines.append("=" * 60)

    return "\n".join(lines)


def parse_command(state: GameState, text: str) -> Move | None:
    """Turn a line of input into an intent.

    ``d`` draws, ``p`` passes, ``h``/``d``/``c``/``s`` pick a suit after an
    Ace, and space-separated hand positions (``"3 1 5"``) play those cards in
    that order. Returns None for input that names no intent.
    """
    text = text.strip().lower()
    if not text:
        return None

    if state.phase == GamePhase.SELECTING_SUIT:
        try:
            return ChooseSuit(suit=Suit.from_letter(text[0]))
        except ValueError:
            return None

    if text in ("d", "draw"):
        return Draw()
    if text in ("p", "pass"):
        return Pass()

    hand = state.current_seat_state.hand
    try:
        positions = [int(part) - 1 for part in text.replace(",", " ").split()]
    except ValueError:
        return None
    if not positions or any(not 0 <= p < len(hand) for p in positions):
        return None
    return Play(cards=tuple(hand[p] for p in positions))


def play_interactive(seed: int | None = None) -> None:
    """Play at seat 0 against three bots."""
    from strategies.first_match import FirstMatchStrategy

    bot = FirstMatchStrategy()
    state = start_game(seed=seed)

    print("\nWelcome to Eights!")
    print("Enter hand positions to play (e.g. '2 5'), 'd' to draw, 'p' to pass.")
    print("After an Ace, pick a suit with h/d/c/s. Type 'q' to quit.\n")

    while not state.is_game_over:
        if is_bot_turn(state):
            name = state.current_seat_state.name
            state = run_bot_turn(state, bot)
            print(f"{name}: {state.message}")
            continue

        print(format_state(state, viewer=state.current_seat))
        prompt = "\nSuit (h/d/c/s): " if state.phase == GamePhase.SELECTING_SUIT else "\nYour move: "
        choice = input(prompt).strip()
        if choice.lower() == "q":
            print("Goodbye!")
            return

        move = parse_command(state, choice)
        if move is None:
            print("Could not understand that. Try again.")
            continue

        result = dispatch(state, move)
        if not result.ok:
            print(f"Invalid move: {result.detail}")
            continue
        state = result.state

    print(format_state(state, viewer=0, reveal_all=True))


def watch_game(seed: int | None = None, delay: float = 0.5) -> None:
    """Watch four bots play each other."""
    from strategies.first_match import FirstMatchStrategy
    from strategies.random_strategy import RandomStrategy

    strategies = (
        FirstMatchStrategy(),
        RandomStrategy(seed=seed),
        FirstMatchStrategy(),
        RandomStrategy(seed=None if seed is None else seed + 1),
    )
    state = start_game(
        seed=seed,
        seat_names=tuple(f"Seat {i} ({s.name})" for i, s in enumerate(strategies)),
        bot_seats=frozenset(range(4)),
    )

    print("\nWatching: FirstMatch vs Random")
    print("Press Ctrl+C to stop.\n")

    try:
        while not state.is_game_over:
            print(format_state(state, viewer=None, reveal_all=True))
            state = run_bot_turn(state, strategies[state.current_seat])
            # Pacing is the caller's business; the engine never waits
            time.sleep(delay)
            print("\n" + "-" * 60 + "\n")

    except KeyboardInterrupt:
        print("\nStopped.")

    print(format_state(state, viewer=None, reveal_all=True))


def run_simulation(
    num_games: int = 100,
    seed: int = 42,
    max_turns: int = 1000,
    log_dir: str | None = None,
) -> None:
    """Run a batch of bot-only games and print win rates per seat.

    With ``log_dir`` set, each game is also written there as a JSON log.
    """
    from simulation.runner import run_batch, summarize
    from strategies.first_match import FirstMatchStrategy
    from strategies.random_strategy import RandomStrategy

    strategies = (
        FirstMatchStrategy(),
        RandomStrategy(seed=seed),
        FirstMatchStrategy(),
        RandomStrategy(seed=seed + 1000),
    )

    logger.info("Running %d games: FirstMatch/Random alternating seats", num_games)
    results = run_batch(
        strategies, num_games, start_seed=seed, max_turns=max_turns, log_dir=log_dir
    )
    summary = summarize(results)

    games = summary["games"]
    print(f"\nResults ({games} games):")
    for seat, wins in enumerate(summary["wins"]):
        rate = 100 * wins / games if games else 0.0
        print(f"  Seat {seat} ({strategies[seat].name}): {wins} ({rate:.1f}%)")
    print(f"  Unfinished: {summary['unfinished']}")
    print(f"  Average turns: {summary['avg_turns']:.1f}")


def main() -> None:
    """Main entry point for the CLI."""
    settings = load_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s | %(message)s",
        datefmt="%H:%M:%S",
    )

    parser = argparse.ArgumentParser(description="Eights card game")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    play_parser = subparsers.add_parser("play", help="Play against three bots")
    play_parser.add_argument("--seed", type=int, default=settings.seed, help="Random seed")

    watch_parser = subparsers.add_parser("watch", help="Watch bots play")
    watch_parser.add_argument("--seed", type=int, default=settings.seed, help="Random seed")
    watch_parser.add_argument(
        "--delay", type=float, default=settings.bot_delay, help="Delay between moves (seconds)"
    )

    sim_parser = subparsers.add_parser("simulate", help="Run bot-only games")
    sim_parser.add_argument("--games", type=int, default=100, help="Number of games")
    sim_parser.add_argument(
        "--seed", type=int, default=settings.seed if settings.seed is not None else 42,
        help="Random seed",
    )
    sim_parser.add_argument(
        "--max-turns", type=int, default=settings.max_turns, help="Turn cap per game"
    )
    sim_parser.add_argument(
        "--save-logs", action="store_true",
        help=f"Save a JSON log of every game under {settings.log_dir}",
    )

    args = parser.parse_args()

    if args.command == "play":
        play_interactive(seed=args.seed)
    elif args.command == "watch":
        watch_game(seed=args.seed, delay=args.delay)
    elif args.command == "simulate":
        run_simulation(
            num_games=args.games,
            seed=args.seed,
            max_turns=args.max_turns,
            log_dir=settings.log_dir if args.save_logs else None,
        )
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
