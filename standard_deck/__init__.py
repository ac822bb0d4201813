"""Standard Deck - a 52-card deck model with pure hand queries.

Cards are resolved from their identity through a fixed registry, and
hands (plain lists of cards) can be sorted, checked for suite/number
matches and searched without being mutated.
"""

__version__ = "0.1.0"
__author__ = "Standard Deck Team"

from standard_deck.deck import (
    Card,
    CardName,
    Color,
    Suite,
    UnknownCardError,
    make_card,
    sort_cards,
    has_same_suite,
    has_pair_suite,
    has_same_number,
    has_pair_number,
    index_of,
)

__all__ = [
    "__version__",
    "Card",
    "CardName",
    "Color",
    "Suite",
    "UnknownCardError",
    "make_card",
    "sort_cards",
    "has_same_suite",
    "has_pair_suite",
    "has_same_number",
    "has_pair_number",
    "index_of",
]
