"""Shared fixtures for building hand-crafted game states."""

import pytest

from eights_engine.cards import Card, create_deck
from eights_engine.state import DEFAULT_SEAT_NAMES, GameState, SeatState


def cards(*codes: str) -> tuple[Card, ...]:
    """Shorthand: cards("10H", "QS") -> (10♥, Q♠)."""
    return tuple(Card.parse(code) for code in codes)


@pytest.fixture
def make_state():
    """Build a state holding all 52 cards.

    Hands and discard pile are given explicitly; unless ``draw_pile`` is
    passed, every remaining card goes to the draw pile in deck order.
    """

    def _make(hands, discard, draw_pile=None, **fields) -> GameState:
        hands = [cards(*h) for h in hands] + [()] * (4 - len(hands))
        discard_pile = cards(*discard)
        used = {c for h in hands for c in h} | set(discard_pile)
        if draw_pile is None:
            draw = tuple(c for c in create_deck() if c not in used)
        else:
            draw = cards(*draw_pile)
        seats = tuple(
            SeatState(index=i, name=DEFAULT_SEAT_NAMES[i], hand=hands[i], is_bot=i != 0)
            for i in range(4)
        )
        return GameState(draw_pile=draw, discard_pile=discard_pile, seats=seats, **fields)

    return _make
