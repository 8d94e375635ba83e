"""Legality checks for single cards, combos and passing."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from eights_engine.cards import Rank
from eights_engine.errors import InvalidComboError, RejectionReason
from eights_engine.state import GamePhase

if TYPE_CHECKING:
    from eights_engine.cards import Card, Suit
    from eights_engine.state import GameState


def is_counter(prev: Card, next_card: Card) -> bool:
    """Whether ``next_card`` answers a penalty started by ``prev``.

    A Two stacks on a Two; a red Jack cancels a black Jack.
    """
    if prev.rank == Rank.TWO and next_card.rank == Rank.TWO:
        return True
    return prev.is_black_jack and next_card.is_red_jack


def is_valid_single_step(
    prev: Card,
    next_card: Card,
    active_suit: Suit | None = None,
    pending_penalty: int = 0,
) -> bool:
    """Whether ``next_card`` may be played on ``prev``.

    Args:
        prev: Card currently on top.
        next_card: Card being played.
        active_suit: Suit declared by an Ace, if still in force.
        pending_penalty: Cards owed by the acting seat.
    """
    if pending_penalty > 0:
        return is_counter(prev, next_card)

    if active_suit is not None:
        return next_card.suit == active_suit or next_card.rank == Rank.ACE

    return (
        prev.suit == next_card.suit
        or prev.rank == next_card.rank
        or next_card.rank == Rank.ACE
        or prev.rank == Rank.ACE
    )


def cards_connect(prev: Card, next_card: Card) -> bool:
    """Whether two adjacent cards inside a combo chain together.

    Same rank, or same suit one rank apart (no wrap-around between K and A).
    A Queen is also covered by any card of its own suit.
    """
    if prev.rank == next_card.rank:
        return True
    if prev.suit != next_card.suit:
        return False
    return prev.rank == Rank.QUEEN or abs(prev.value - next_card.value) == 1


def is_valid_combo(
    cards: Sequence[Card],
    top_card: Card,
    active_suit: Suit | None = None,
    pending_penalty: int = 0,
) -> bool:
    """Whether ``cards`` form a legal play onto ``top_card``.

    Only the first card is checked against the pile, the active suit and the
    pending penalty. Every later card only has to connect to the one before
    it, so stacked Twos or Jacks inside a combo are chained by rank rather
    than by the counter rule.
    """
    if not cards:
        return False

    if not is_valid_single_step(top_card, cards[0], active_suit, pending_penalty):
        return False

    return all(cards_connect(a, b) for a, b in zip(cards, cards[1:]))


def is_queen_covered(cards: Sequence[Card]) -> bool:
    """Whether every Queen in the combo is followed by a card of its suit."""
    for i, card in enumerate(cards):
        if card.rank != Rank.QUEEN:
            continue
        if i + 1 >= len(cards) or cards[i + 1].suit != card.suit:
            return False
    return True


def validate_play(state: GameState, cards: Sequence[Card]) -> None:
    """Check a play by the acting seat without changing anything.

    Raises:
        InvalidComboError: If the play must be rejected.
    """
    if not cards:
        raise InvalidComboError("No cards selected", RejectionReason.EMPTY_PLAY)

    if len(set(cards)) != len(cards):
        raise InvalidComboError(
            "The same card appears twice", RejectionReason.DUPLICATE_CARDS
        )

    hand = state.current_seat_state.hand
    for card in cards:
        if card not in hand:
            raise InvalidComboError(
                f"Card {card} not in hand", RejectionReason.CARD_NOT_IN_HAND
            )

    if not is_valid_combo(cards, state.top_card, state.active_suit, state.pending_penalty):
        if state.pending_penalty > 0:
            raise InvalidComboError(
                f"{cards[0]} does not counter {state.top_card}; "
                f"draw {state.pending_penalty} instead"
            )
        raise InvalidComboError(
            "That combo doesn't match the rules. Check the card order."
        )

    if not is_queen_covered(cards):
        raise InvalidComboError(
            "A Queen must be covered by a card of the same suit",
            RejectionReason.UNCOVERED_QUEEN,
        )


def playable_cards(state: GameState) -> list[Card]:
    """Cards in the acting hand that are legal on their own, in hand order.

    A lone Queen is never playable because it would be left uncovered.
    """
    return [
        card
        for card in state.current_seat_state.hand
        if card.rank != Rank.QUEEN
        and is_valid_single_step(
            state.top_card, card, state.active_suit, state.pending_penalty
        )
    ]


def queen_cover_pairs(state: GameState) -> list[tuple[Card, Card]]:
    """Two-card plays of a legal Queen followed by a card of its suit."""
    hand = state.current_seat_state.hand
    pairs = []
    for queen in hand:
        if queen.rank != Rank.QUEEN:
            continue
        if not is_valid_single_step(
            state.top_card, queen, state.active_suit, state.pending_penalty
        ):
            continue
        for cover in hand:
            if cover.suit == queen.suit and cover != queen:
                pairs.append((queen, cover))
    return pairs


def can_pass(state: GameState) -> bool:
    """Whether the acting seat may pass.

    Passing is only allowed during play, with no penalty owed, when the hand
    holds no legal play at all.
    """
    if state.phase != GamePhase.PLAYING or state.is_game_over:
        return False
    if state.pending_penalty > 0:
        return False
    return not playable_cards(state) and not queen_cover_pairs(state)
