"""Standard deck model.

This module provides:
- Card identities, suites, colors and the deck registry (registry.py)
- Card construction and hand queries (cards.py)
"""

from .registry import (
    CardName,
    Color,
    Suite,
    CardAttributes,
    UnknownCardError,
    DECK_REGISTRY,
    DECK_SIZE,
    MIN_NUMBER,
    MAX_NUMBER,
    RANK_LABELS,
    RANK_CODES,
    SUITE_CODES,
    SUITE_SYMBOLS,
    SUITE_COLORS,
    lookup,
    color_of,
    number_of,
    rank_of,
    suite_of,
    parse_card_name,
    card_names_of_suite,
    card_names_of_number,
)

from .cards import (
    Card,
    NOT_FOUND,
    make_card,
    get_suite_counts,
    get_number_counts,
    sort_cards,
    has_same_suite,
    has_pair_suite,
    has_same_number,
    has_pair_number,
    index_of,
    contains_card,
    create_standard_deck,
    make_cards_from_string,
)

__all__ = [
    # Registry
    "CardName",
    "Color",
    "Suite",
    "CardAttributes",
    "UnknownCardError",
    "DECK_REGISTRY",
    "DECK_SIZE",
    "MIN_NUMBER",
    "MAX_NUMBER",
    "RANK_LABELS",
    "RANK_CODES",
    "SUITE_CODES",
    "SUITE_SYMBOLS",
    "SUITE_COLORS",
    "lookup",
    "color_of",
    "number_of",
    "rank_of",
    "suite_of",
    "parse_card_name",
    "card_names_of_suite",
    "card_names_of_number",
    # Cards
    "Card",
    "NOT_FOUND",
    "make_card",
    "get_suite_counts",
    "get_number_counts",
    "sort_cards",
    "has_same_suite",
    "has_pair_suite",
    "has_same_number",
    "has_pair_number",
    "index_of",
    "contains_card",
    "create_standard_deck",
    "make_cards_from_string",
]
