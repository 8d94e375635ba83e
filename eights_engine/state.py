"""Immutable game state models for Eights."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from eights_engine.cards import Card, Suit

NUM_SEATS = 4
HAND_SIZE = 7

DEFAULT_SEAT_NAMES = ("You", "Bot West", "Bot North", "Bot East")
DEFAULT_BOT_SEATS = frozenset({1, 2, 3})


class GamePhase(IntEnum):
    """Current phase of the game."""

    PLAYING = auto()  # Acting seat may play, draw or pass
    SELECTING_SUIT = auto()  # Seat that just played an Ace must declare a suit
    GAME_OVER = auto()  # A seat emptied its hand


@dataclass(frozen=True, slots=True)
class SeatState:
    """One of the four fixed seats at the table.

    Attributes:
        index: Position in turn order (0-3)
        name: Display name
        hand: Cards in hand, in the order they were dealt or drawn
        is_bot: Whether a bot policy controls this seat
    """

    index: int
    name: str
    hand: tuple[Card, ...]
    is_bot: bool = False

    def with_hand(self, hand: tuple[Card, ...]) -> SeatState:
        """Return new seat with updated hand."""
        return SeatState(index=self.index, name=self.name, hand=hand, is_bot=self.is_bot)


@dataclass(frozen=True, slots=True)
class LastTurn:
    """The most recent successful play."""

    seat: int
    cards: tuple[Card, ...]


@dataclass(frozen=True, slots=True)
class GameState:
    """Complete immutable game state.

    Attributes:
        draw_pile: Face-down cards; drawing takes from the front
        discard_pile: Played cards; the last element is the top card
        seats: The four seats in turn order
        current_seat: Index of the seat that acts next
        direction: +1 for clockwise, -1 for counter-clockwise
        pending_penalty: Cards the acting seat must draw unless it counters
        black_jack_penalty: Portion of pending_penalty added by black Jacks
        active_suit: Suit declared by an Ace, until the next play
        winner: Index of the seat that emptied its hand
        phase: Current game phase
        message: Status line for display
        last_turn: Last successful play, if any
        turn_number: Number of intents applied so far
    """

    draw_pile: tuple[Card, ...]
    discard_pile: tuple[Card, ...]
    seats: tuple[SeatState, ...]
    current_seat: int = 0
    direction: int = 1
    pending_penalty: int = 0
    black_jack_penalty: int = 0
    active_suit: Suit | None = None
    winner: int | None = None
    phase: GamePhase = GamePhase.PLAYING
    message: str = ""
    last_turn: LastTurn | None = None
    turn_number: int = 0

    @property
    def top_card(self) -> Card:
        """Card on top of the discard pile."""
        return self.discard_pile[-1]

    @property
    def current_seat_state(self) -> SeatState:
        """State of the seat whose turn it is."""
        return self.seats[self.current_seat]

    @property
    def is_game_over(self) -> bool:
        """Whether the game has ended."""
        return self.winner is not None

    def seat_after(self, steps: int = 1) -> int:
        """Seat index reached by moving ``steps`` seats in the current direction."""
        return (self.current_seat + steps * self.direction) % len(self.seats)

    def all_cards(self) -> list[Card]:
        """Every card in the draw pile, discard pile and hands."""
        cards = list(self.draw_pile) + list(self.discard_pile)
        for seat in self.seats:
            cards.extend(seat.hand)
        return cards

    def with_seat(self, seat: SeatState) -> GameState:
        """Return new state with one seat replaced."""
        seats = list(self.seats)
        seats[seat.index] = seat
        return replace(self, seats=tuple(seats))

    def with_draw_pile(self, draw_pile: tuple[Card, ...]) -> GameState:
        """Return new state with updated draw pile."""
        return replace(self, draw_pile=draw_pile)

    def with_discard_pile(self, discard_pile: tuple[Card, ...]) -> GameState:
        """Return new state with updated discard pile."""
        return replace(self, discard_pile=discard_pile)

    def with_current_seat(self, current_seat: int) -> GameState:
        """Return new state with updated current seat."""
        return replace(self, current_seat=current_seat)

    def with_direction(self, direction: int) -> GameState:
        """Return new state with updated direction."""
        return replace(self, direction=direction)

    def with_penalty(self, pending_penalty: int, black_jack_penalty: int = 0) -> GameState:
        """Return new state with updated pending penalty."""
        return replace(
            self, pending_penalty=pending_penalty, black_jack_penalty=black_jack_penalty
        )

    def with_active_suit(self, active_suit: Suit | None) -> GameState:
        """Return new state with updated active suit."""
        return replace(self, active_suit=active_suit)

    def with_phase(self, phase: GamePhase) -> GameState:
        """Return new state with updated phase."""
        return replace(self, phase=phase)

    def with_message(self, message: str) -> GameState:
        """Return new state with updated status message."""
        return replace(self, message=message)

    def with_last_turn(self, last_turn: LastTurn | None) -> GameState:
        """Return new state with updated last turn."""
        return replace(self, last_turn=last_turn)

    def with_turn_number(self, turn_number: int) -> GameState:
        """Return new state with updated turn number."""
        return replace(self, turn_number=turn_number)

    def with_winner(self, winner: int | None) -> GameState:
        """Return new state with winner set."""
        return replace(
            self,
            winner=winner,
            phase=GamePhase.GAME_OVER if winner is not None else self.phase,
        )


def create_initial_state(
    deck: list[Card] | None = None,
    seed: int | None = None,
    seat_names: tuple[str, ...] = DEFAULT_SEAT_NAMES,
    bot_seats: frozenset[int] = DEFAULT_BOT_SEATS,
) -> GameState:
    """Create the initial game state.

    Args:
        deck: Optional pre-ordered deck. If None, creates and shuffles a new deck.
        seed: Random seed for shuffling (only used if deck is None).
        seat_names: Display names for the four seats.
        bot_seats: Indices of bot-controlled seats.

    Returns:
        Initial game state with 7 cards dealt to each seat and one card
        turned face up.
    """
    from eights_engine.cards import create_deck, shuffle_deck

    if len(seat_names) != NUM_SEATS:
        raise ValueError(f"Expected {NUM_SEATS} seat names, got {len(seat_names)}")

    if deck is None:
        deck = shuffle_deck(create_deck(), seed)

    seats = tuple(
        SeatState(
            index=i,
            name=seat_names[i],
            hand=tuple(deck[i * HAND_SIZE : (i + 1) * HAND_SIZE]),
            is_bot=i in bot_seats,
        )
        for i in range(NUM_SEATS)
    )
    dealt = NUM_SEATS * HAND_SIZE

    return GameState(
        draw_pile=tuple(deck[dealt + 1 :]),
        discard_pile=(deck[dealt],),
        seats=seats,
        current_seat=0,
        direction=1,
        phase=GamePhase.PLAYING,
        message="Game started! Your turn.",
    )
