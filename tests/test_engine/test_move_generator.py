"""Tests for move generation."""

from eights_engine.cards import Card, Suit
from eights_engine.executor import execute_move
from eights_engine.move_generator import generate_legal_moves
from eights_engine.moves import ChooseSuit, Draw, Pass, Play
from eights_engine.state import GamePhase, create_initial_state


def c(code: str) -> Card:
    return Card.parse(code)


class TestPlayingMoves:
    def test_always_offers_draw(self, make_state):
        state = make_state([("9H",)], ["5H"])
        assert Draw() in generate_legal_moves(state)

    def test_single_card_plays(self, make_state):
        state = make_state([("9H", "3C", "AS")], ["5H"])
        plays = [m for m in generate_legal_moves(state) if isinstance(m, Play)]
        assert plays == [Play(cards=(c("9H"),)), Play(cards=(c("AS"),))]

    def test_queen_only_offered_with_cover(self, make_state):
        state = make_state([("QH", "3H", "3C")], ["5H"])
        moves = generate_legal_moves(state)
        assert Play(cards=(c("QH"),)) not in moves
        assert Play(cards=(c("QH"), c("3H"))) in moves

    def test_pass_only_when_nothing_playable(self, make_state):
        stuck = make_state([("9S", "3C")], ["5H"])
        assert Pass() in generate_legal_moves(stuck)

        able = make_state([("9H",)], ["5H"])
        assert Pass() not in generate_legal_moves(able)

    def test_penalty_limits_plays_to_counters(self, make_state):
        state = make_state([("2H", "3S", "9S")], ["2S"], pending_penalty=2)
        moves = generate_legal_moves(state)
        assert moves == [Play(cards=(c("2H"),)), Draw()]

    def test_every_generated_move_is_accepted(self):
        state = create_initial_state(seed=11)
        for move in generate_legal_moves(state):
            execute_move(state, move)


class TestOtherPhases:
    def test_suit_choices_after_ace(self, make_state):
        state = make_state([("AD", "9C")], ["5D"])
        state = execute_move(state, Play(cards=(c("AD"),)))
        assert state.phase == GamePhase.SELECTING_SUIT
        assert generate_legal_moves(state) == [ChooseSuit(suit=s) for s in Suit]

    def test_no_moves_after_game_over(self, make_state):
        state = make_state([("8S",)], ["8H"])
        state = execute_move(state, Play(cards=(c("8S"),)))
        assert generate_legal_moves(state) == []
