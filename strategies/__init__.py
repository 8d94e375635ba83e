"""Bot strategies for Eights."""

from strategies.base import Strategy
from strategies.first_match import FirstMatchStrategy, select_play, select_suit
from strategies.random_strategy import RandomStrategy

__all__ = [
    "Strategy",
    "FirstMatchStrategy",
    "RandomStrategy",
    "select_play",
    "select_suit",
]
