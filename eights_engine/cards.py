"""Card, Suit, and Rank models for Eights."""

from __future__ import annotations

import random
from enum import IntEnum
from functools import total_ordering
from typing import ClassVar


class Suit(IntEnum):
    """Card suits in deck-construction order."""

    HEARTS = 0
    DIAMONDS = 1
    CLUBS = 2
    SPADES = 3

    def __str__(self) -> str:
        return self.symbol

    @property
    def symbol(self) -> str:
        return {
            Suit.HEARTS: "♥",
            Suit.DIAMONDS: "♦",
            Suit.CLUBS: "♣",
            Suit.SPADES: "♠",
        }[self]

    @property
    def letter(self) -> str:
        return self.name[0]

    @property
    def is_black(self) -> bool:
        return self in (Suit.CLUBS, Suit.SPADES)

    @property
    def is_red(self) -> bool:
        return not self.is_black

    @classmethod
    def from_letter(cls, letter: str) -> Suit:
        """Look up a suit by its first letter (case-insensitive)."""
        for suit in cls:
            if suit.letter == letter.strip().upper():
                return suit
        raise ValueError(f"Unknown suit: {letter!r}")


class Rank(IntEnum):
    """Card ranks (Ace=1 through King=13)."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        return self.symbol

    @property
    def symbol(self) -> str:
        if self.value == 1:
            return "A"
        elif self.value <= 10:
            return str(self.value)
        else:
            return self.name[0]

    @classmethod
    def from_symbol(cls, symbol: str) -> Rank:
        """Look up a rank by its symbol ("A", "2".."10", "J", "Q", "K")."""
        for rank in cls:
            if rank.symbol == symbol.strip().upper():
                return rank
        raise ValueError(f"Unknown rank: {symbol!r}")


@total_ordering
class Card:
    """A playing card.

    Cards are immutable and interned: there is exactly one instance per
    (rank, suit). Comparison is first by rank, then by suit.
    """

    __slots__ = ("_rank", "_suit")

    _instances: ClassVar[dict[tuple[Rank, Suit], Card]] = {}

    def __new__(cls, rank: Rank, suit: Suit) -> Card:
        key = (rank, suit)
        if key not in cls._instances:
            instance = object.__new__(cls)
            instance._rank = rank
            instance._suit = suit
            cls._instances[key] = instance
        return cls._instances[key]

    @classmethod
    def parse(cls, text: str) -> Card:
        """Parse short notation such as ``"10H"``, ``"QS"`` or ``"A♦"``."""
        text = text.strip()
        if len(text) < 2:
            raise ValueError(f"Cannot parse card: {text!r}")
        rank_part, suit_part = text[:-1], text[-1]
        for suit in Suit:
            if suit_part == suit.symbol:
                return cls(Rank.from_symbol(rank_part), suit)
        return cls(Rank.from_symbol(rank_part), Suit.from_letter(suit_part))

    @property
    def rank(self) -> Rank:
        return self._rank

    @property
    def suit(self) -> Suit:
        return self._suit

    @property
    def value(self) -> int:
        """Rank value 1-13, used for sequence checks."""
        return self._rank.value

    @property
    def is_black_jack(self) -> bool:
        """J♠ and J♣ carry a draw-seven penalty."""
        return self._rank == Rank.JACK and self._suit.is_black

    @property
    def is_red_jack(self) -> bool:
        """J♥ and J♦ cancel a black Jack's penalty."""
        return self._rank == Rank.JACK and self._suit.is_red

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self._rank == other._rank and self._suit == other._suit

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        if self._rank != other._rank:
            return self._rank < other._rank
        return self._suit < other._suit

    def __hash__(self) -> int:
        return hash((self._rank, self._suit))

    def __reduce__(self) -> tuple:
        """Support pickling for multiprocessing."""
        return (Card, (self._rank, self._suit))

    def __repr__(self) -> str:
        return f"Card({self._rank.name}, {self._suit.name})"

    def __str__(self) -> str:
        return f"{self._rank.symbol}{self._suit.symbol}"


def create_deck() -> list[Card]:
    """Create a standard 52-card deck, one suit after another."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


def shuffle_deck(
    deck: list[Card], seed: int | None = None, rng: random.Random | None = None
) -> list[Card]:
    """Return a shuffled copy of the deck.

    Args:
        deck: Cards to shuffle. Not modified.
        seed: Seed for a fresh random source (ignored when ``rng`` is given).
        rng: Random source to draw from, for callers that own one.
    """
    if rng is None:
        rng = random.Random(seed)
    shuffled = deck.copy()
    rng.shuffle(shuffled)
    return shuffled
