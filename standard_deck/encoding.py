"""Vector encodings of hands.

Card index: position of the identity in canonical deck order
- 0-12: hearts A..K, 13-25: diamonds, 26-38: clubs, 39-51: spades

Hands may hold the same identity more than once, so encodings store
counts rather than presence bits.
"""

from typing import Iterable, List

import numpy as np

from standard_deck.deck import (
    Card,
    CardName,
    UnknownCardError,
    DECK_SIZE,
    MAX_NUMBER,
    make_card,
)

NUM_CARDS = DECK_SIZE
NUM_NUMBERS = MAX_NUMBER

_CARD_NAMES = list(CardName)
_CARD_INDEX = {name: i for i, name in enumerate(_CARD_NAMES)}


def card_to_index(identity: CardName) -> int:
    """Convert a card identity to its index (0-51)."""
    if not isinstance(identity, CardName):
        raise UnknownCardError(identity)
    return _CARD_INDEX[identity]


def index_to_card(index: int) -> Card:
    """Convert an index (0-51) back to a Card."""
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise UnknownCardError(index)
    if not 0 <= index < NUM_CARDS:
        raise UnknownCardError(index)
    return make_card(_CARD_NAMES[int(index)])


def encode_hand(cards: Iterable[Card]) -> np.ndarray:
    """Encode a hand as a vector of 52 per-identity counts.

    Args:
        cards: Cards in the hand

    Returns:
        np.ndarray of shape (52,), dtype float32
    """
    encoding = np.zeros(NUM_CARDS, dtype=np.float32)
    for card in cards:
        encoding[card_to_index(card.name)] += 1.0
    return encoding


def decode_hand(encoding: np.ndarray) -> List[Card]:
    """Decode a count vector back into cards, in canonical deck order.

    Args:
        encoding: Array of shape (52,) with non-negative integral counts

    Returns:
        List of Card objects, each repeated by its count

    Raises:
        ValueError: If the shape is wrong or a count is negative or fractional
    """
    counts = np.asarray(encoding)
    if counts.shape != (NUM_CARDS,):
        raise ValueError(f"Expected shape ({NUM_CARDS},), got {counts.shape}")
    if np.any(counts < 0):
        raise ValueError("Card counts must be non-negative")
    if not np.all(np.mod(counts, 1) == 0):
        raise ValueError("Card counts must be whole numbers")

    cards = []
    for index in np.flatnonzero(counts):
        card = make_card(_CARD_NAMES[index])
        cards.extend([card] * int(counts[index]))
    return cards


def encode_numbers(cards: Iterable[Card]) -> np.ndarray:
    """Histogram of card numbers; slot i counts cards with number i + 1.

    Returns:
        np.ndarray of shape (13,), dtype int64
    """
    histogram = np.zeros(NUM_NUMBERS, dtype=np.int64)
    for card in cards:
        histogram[card.number - 1] += 1
    return histogram
