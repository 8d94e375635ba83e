"""Tests for single-step, combo and pass legality."""

import pytest

from eights_engine.cards import Card, Suit, create_deck
from eights_engine.errors import InvalidComboError, RejectionReason
from eights_engine.state import GamePhase
from eights_engine.validator import (
    can_pass,
    cards_connect,
    is_queen_covered,
    is_valid_combo,
    is_valid_single_step,
    playable_cards,
    queen_cover_pairs,
    validate_play,
)


def c(code: str) -> Card:
    return Card.parse(code)


def combo(*codes: str) -> list[Card]:
    return [c(code) for code in codes]


class TestSingleStep:
    def test_same_suit_or_rank_matches(self):
        assert is_valid_single_step(c("5H"), c("9H"))
        assert is_valid_single_step(c("5H"), c("5S"))

    def test_unrelated_cards_do_not_match(self):
        assert not is_valid_single_step(c("5H"), c("9S"))
        assert not is_valid_single_step(c("KD"), c("3C"))

    def test_matching_holds_for_every_pair_in_the_deck(self):
        for prev in create_deck():
            for nxt in create_deck():
                expected = (
                    prev.suit == nxt.suit
                    or prev.rank == nxt.rank
                    or nxt.value == 1
                    or prev.value == 1
                )
                assert is_valid_single_step(prev, nxt, None, 0) == expected

    def test_ace_goes_on_anything(self):
        assert is_valid_single_step(c("9S"), c("AH"))

    def test_anything_goes_on_an_ace(self):
        assert is_valid_single_step(c("AH"), c("9S"))

    def test_two_counters_two(self):
        assert is_valid_single_step(c("2S"), c("2H"), None, 2)

    def test_non_counter_rejected_under_penalty(self):
        assert not is_valid_single_step(c("2S"), c("3S"), None, 2)
        assert not is_valid_single_step(c("2S"), c("AS"), None, 2)

    def test_red_jack_cancels_black_jack(self):
        assert is_valid_single_step(c("JC"), c("JD"), None, 7)
        assert is_valid_single_step(c("JS"), c("JH"), None, 7)

    def test_jack_counters_need_black_then_red(self):
        assert not is_valid_single_step(c("JC"), c("JS"), None, 7)
        assert not is_valid_single_step(c("JD"), c("JH"), None, 7)
        assert not is_valid_single_step(c("JH"), c("JS"), None, 7)

    def test_two_does_not_counter_black_jack(self):
        assert not is_valid_single_step(c("JC"), c("2C"), None, 7)

    def test_active_suit_overrides_top_card(self):
        assert is_valid_single_step(c("AS"), c("5H"), Suit.HEARTS)
        assert not is_valid_single_step(c("AS"), c("5S"), Suit.HEARTS)
        assert is_valid_single_step(c("AS"), c("AC"), Suit.HEARTS)

    def test_penalty_checked_before_active_suit(self):
        assert not is_valid_single_step(c("2S"), c("5H"), Suit.HEARTS, 2)


class TestConnection:
    def test_same_rank_connects(self):
        assert cards_connect(c("7H"), c("7C"))

    def test_adjacent_same_suit_connects_both_ways(self):
        assert cards_connect(c("5S"), c("6S"))
        assert cards_connect(c("6S"), c("5S"))

    def test_gap_or_other_suit_does_not_connect(self):
        assert not cards_connect(c("5S"), c("7S"))
        assert not cards_connect(c("5S"), c("6H"))

    def test_no_wrap_between_king_and_ace(self):
        assert not cards_connect(c("KS"), c("AS"))

    def test_queen_connects_to_any_card_of_its_suit(self):
        assert cards_connect(c("QS"), c("3S"))
        assert not cards_connect(c("QS"), c("3H"))


class TestCombo:
    def test_empty_combo_invalid(self):
        assert not is_valid_combo([], c("5H"))

    def test_first_card_must_fit_pile(self):
        assert not is_valid_combo(combo("9S", "10S"), c("5H"))

    def test_run_of_same_suit(self):
        assert is_valid_combo(combo("5H", "6H", "7H"), c("9H"))

    def test_run_with_gap_invalid(self):
        assert not is_valid_combo(combo("5H", "7H"), c("9H"))

    def test_same_rank_stack(self):
        assert is_valid_combo(combo("2S", "2H", "2D"), c("9S"))

    def test_rank_then_suit_chain(self):
        assert is_valid_combo(combo("9S", "9H", "10H", "JH"), c("4S"))

    def test_interior_pairs_ignore_pending_penalty(self):
        # Only the opening card has to counter; the rest chain normally
        assert is_valid_combo(combo("2S", "3S"), c("2C"), None, 2)
        assert is_valid_combo(combo("JD", "10D"), c("JC"), None, 7)

    def test_interior_pairs_ignore_active_suit(self):
        assert is_valid_combo(combo("5H", "5S"), c("AC"), Suit.HEARTS)

    def test_interior_pairs_do_not_use_single_step_ace_rule(self):
        assert not is_valid_combo(combo("AH", "9S"), c("5H"))


class TestQueenCover:
    def test_lone_queen_uncovered(self):
        assert not is_queen_covered(combo("QS"))

    def test_queen_covered_by_same_suit(self):
        assert is_queen_covered(combo("QS", "3S"))

    def test_combo_ending_on_queen_uncovered(self):
        assert not is_queen_covered(combo("JS", "QS"))

    def test_queen_followed_by_other_queen_uncovered(self):
        assert not is_queen_covered(combo("QS", "QH", "5H"))

    def test_no_queen(self):
        assert is_queen_covered(combo("5S", "6S"))


class TestValidatePlay:
    def test_accepts_legal_play(self, make_state):
        state = make_state([("5H", "6H")], ["9H"])
        validate_play(state, combo("5H", "6H"))

    def test_queen_alone_rejected(self, make_state):
        state = make_state([("QS", "3S")], ["9S"])
        with pytest.raises(InvalidComboError) as exc:
            validate_play(state, combo("QS"))
        assert exc.value.reason == RejectionReason.UNCOVERED_QUEEN

    def test_queen_with_cover_accepted(self, make_state):
        state = make_state([("QS", "3S")], ["9S"])
        validate_play(state, combo("QS", "3S"))

    @pytest.mark.parametrize(
        "played, reason",
        [
            ((), RejectionReason.EMPTY_PLAY),
            (("5H", "5H"), RejectionReason.DUPLICATE_CARDS),
            (("7H",), RejectionReason.CARD_NOT_IN_HAND),
            (("5H", "7S"), RejectionReason.INVALID_COMBO),
        ],
    )
    def test_rejections(self, make_state, played, reason):
        state = make_state([("5H", "7S")], ["9H"])
        with pytest.raises(InvalidComboError) as exc:
            validate_play(state, combo(*played))
        assert exc.value.reason == reason

    def test_checks_acting_seat_hand(self, make_state):
        state = make_state([("5H",), ("6H",)], ["9H"], current_seat=1)
        validate_play(state, combo("6H"))
        with pytest.raises(InvalidComboError):
            validate_play(state, combo("5H"))


class TestPlayableCardsAndPass:
    def test_playable_cards_in_hand_order_without_queens(self, make_state):
        state = make_state([("3C", "9H", "QH", "2H", "AS")], ["5H"])
        assert playable_cards(state) == combo("9H", "2H", "AS")

    def test_queen_cover_pairs(self, make_state):
        state = make_state([("QH", "3H", "3C")], ["5H"])
        assert queen_cover_pairs(state) == [(c("QH"), c("3H"))]

    def test_cannot_pass_with_playable_card(self, make_state):
        state = make_state([("9H",)], ["5H"])
        assert not can_pass(state)

    def test_cannot_pass_with_coverable_queen(self, make_state):
        state = make_state([("QH", "3H")], ["5C"], active_suit=Suit.HEARTS)
        assert not can_pass(state)

    def test_can_pass_with_nothing_playable(self, make_state):
        state = make_state([("9S", "3C")], ["5H"])
        assert can_pass(state)

    def test_cannot_pass_while_penalty_owed(self, make_state):
        state = make_state([("9S",)], ["2H"], pending_penalty=2)
        assert not can_pass(state)

    def test_cannot_pass_outside_play_phase(self, make_state):
        state = make_state([("9S",)], ["5H"], phase=GamePhase.SELECTING_SUIT)
        assert not can_pass(state)
