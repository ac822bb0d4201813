"""Deck registry for the standard 52-card deck.

Number order (low to high): A(1) < 2 < 3 < ... < 10 < J(11) < Q(12) < K(13)

This module provides:
- Card identities (CardName) and the Color/Suite definitions
- The read-only registry mapping each identity to its attributes
- Attribute accessors and card-code parsing
"""

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping

logger = logging.getLogger(__name__)


class Color(Enum):
    """Card colors. Determined solely by suite."""

    RED = "red"
    BLACK = "black"


class Suite(Enum):
    """Card suites. Declaration order is the canonical deck order."""

    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"


MIN_NUMBER = 1
MAX_NUMBER = 13
DECK_SIZE = 52

# Rank labels for display
RANK_LABELS = {
    1: "Ace",
    2: "Two",
    3: "Three",
    4: "Four",
    5: "Five",
    6: "Six",
    7: "Seven",
    8: "Eight",
    9: "Nine",
    10: "Ten",
    11: "Jack",
    12: "Queen",
    13: "King",
}

# Rank codes used in card codes ("AS", "10H", ...)
RANK_CODES = {
    1: "A",
    2: "2",
    3: "3",
    4: "4",
    5: "5",
    6: "6",
    7: "7",
    8: "8",
    9: "9",
    10: "10",
    11: "J",
    12: "Q",
    13: "K",
}

SUITE_CODES = {
    Suite.HEARTS: "H",
    Suite.DIAMONDS: "D",
    Suite.CLUBS: "C",
    Suite.SPADES: "S",
}

SUITE_SYMBOLS = {
    Suite.HEARTS: "♥",
    Suite.DIAMONDS: "♦",
    Suite.CLUBS: "♣",
    Suite.SPADES: "♠",
}

SUITE_COLORS = {
    Suite.HEARTS: Color.RED,
    Suite.DIAMONDS: Color.RED,
    Suite.CLUBS: Color.BLACK,
    Suite.SPADES: Color.BLACK,
}

# Code/symbol to number and suite (for parsing)
CODE_TO_NUMBER = {v: k for k, v in RANK_CODES.items()}
CODE_TO_NUMBER.update({"1": 1, "T": 10})
CODE_TO_SUITE = {v: k for k, v in SUITE_CODES.items()}
CODE_TO_SUITE.update({v: k for k, v in SUITE_SYMBOLS.items()})


class CardName(Enum):
    """The 52 card identities. Each value is the card's short code."""

    ACE_OF_HEARTS = "AH"
    TWO_OF_HEARTS = "2H"
    THREE_OF_HEARTS = "3H"
    FOUR_OF_HEARTS = "4H"
    FIVE_OF_HEARTS = "5H"
    SIX_OF_HEARTS = "6H"
    SEVEN_OF_HEARTS = "7H"
    EIGHT_OF_HEARTS = "8H"
    NINE_OF_HEARTS = "9H"
    TEN_OF_HEARTS = "10H"
    JACK_OF_HEARTS = "JH"
    QUEEN_OF_HEARTS = "QH"
    KING_OF_HEARTS = "KH"

    ACE_OF_DIAMONDS = "AD"
    TWO_OF_DIAMONDS = "2D"
    THREE_OF_DIAMONDS = "3D"
    FOUR_OF_DIAMONDS = "4D"
    FIVE_OF_DIAMONDS = "5D"
    SIX_OF_DIAMONDS = "6D"
    SEVEN_OF_DIAMONDS = "7D"
    EIGHT_OF_DIAMONDS = "8D"
    NINE_OF_DIAMONDS = "9D"
    TEN_OF_DIAMONDS = "10D"
    JACK_OF_DIAMONDS = "JD"
    QUEEN_OF_DIAMONDS = "QD"
    KING_OF_DIAMONDS = "KD"

    ACE_OF_CLUBS = "AC"
    TWO_OF_CLUBS = "2C"
    THREE_OF_CLUBS = "3C"
    FOUR_OF_CLUBS = "4C"
    FIVE_OF_CLUBS = "5C"
    SIX_OF_CLUBS = "6C"
    SEVEN_OF_CLUBS = "7C"
    EIGHT_OF_CLUBS = "8C"
    NINE_OF_CLUBS = "9C"
    TEN_OF_CLUBS = "10C"
    JACK_OF_CLUBS = "JC"
    QUEEN_OF_CLUBS = "QC"
    KING_OF_CLUBS = "KC"

    ACE_OF_SPADES = "AS"
    TWO_OF_SPADES = "2S"
    THREE_OF_SPADES = "3S"
    FOUR_OF_SPADES = "4S"
    FIVE_OF_SPADES = "5S"
    SIX_OF_SPADES = "6S"
    SEVEN_OF_SPADES = "7S"
    EIGHT_OF_SPADES = "8S"
    NINE_OF_SPADES = "9S"
    TEN_OF_SPADES = "10S"
    JACK_OF_SPADES = "JS"
    QUEEN_OF_SPADES = "QS"
    KING_OF_SPADES = "KS"

    def __str__(self) -> str:
        return self.value


class UnknownCardError(LookupError):
    """Raised when a value is not one of the 52 card identities."""

    def __init__(self, identity: object):
        super().__init__(f"Unknown card: {identity!r}")
        self.identity = identity


@dataclass(frozen=True)
class CardAttributes:
    """The fixed attributes of one card identity.

    Attributes:
        color: Red or black, derived from the suite
        number: Comparable rank value (Ace=1 .. King=13)
        rank: Display label ("Ace", "King", ...)
        suite: One of the four suites
    """

    color: Color
    number: int
    rank: str
    suite: Suite


def _build_registry() -> Dict[CardName, CardAttributes]:
    """Build the identity -> attributes table.

    CardName(code) raises ValueError at import time if an identity is missing,
    so the table is always total over the deck.
    """
    registry = {}
    for suite in Suite:
        for number in range(MIN_NUMBER, MAX_NUMBER + 1):
            name = CardName(f"{RANK_CODES[number]}{SUITE_CODES[suite]}")
            registry[name] = CardAttributes(
                color=SUITE_COLORS[suite],
                number=number,
                rank=RANK_LABELS[number],
                suite=suite,
            )
    return registry


DECK_REGISTRY: Mapping[CardName, CardAttributes] = MappingProxyType(_build_registry())


def lookup(identity: CardName) -> CardAttributes:
    """Get all attributes of a card identity.

    Args:
        identity: A CardName member

    Returns:
        The CardAttributes for the identity

    Raises:
        UnknownCardError: If identity is not a CardName member
    """
    if not isinstance(identity, CardName):
        logger.debug("Rejected card identity %r", identity)
        raise UnknownCardError(identity)
    return DECK_REGISTRY[identity]


def color_of(identity: CardName) -> Color:
    """Get the color of a card identity."""
    return lookup(identity).color


def number_of(identity: CardName) -> int:
    """Get the number (1-13) of a card identity."""
    return lookup(identity).number


def rank_of(identity: CardName) -> str:
    """Get the rank label of a card identity."""
    return lookup(identity).rank


def suite_of(identity: CardName) -> Suite:
    """Get the suite of a card identity."""
    return lookup(identity).suite


def parse_card_name(text: str) -> CardName:
    """Parse a card identity from a code like 'AS', '10h' or 'Q♦'.

    Args:
        text: Card code in format "RANK+SUITE"

    Returns:
        The matching CardName

    Raises:
        UnknownCardError: If text is not a valid card code
    """
    if not isinstance(text, str):
        logger.debug("Rejected card code %r", text)
        raise UnknownCardError(text)

    code = text.strip().upper()
    suite = CODE_TO_SUITE.get(code[-1:])
    number = CODE_TO_NUMBER.get(code[:-1])
    if suite is None or number is None:
        logger.debug("Rejected card code %r", text)
        raise UnknownCardError(text)

    return CardName(f"{RANK_CODES[number]}{SUITE_CODES[suite]}")


def card_names_of_suite(suite: Suite) -> List[CardName]:
    """Get all identities of one suite, numbers ascending."""
    return [name for name, attrs in DECK_REGISTRY.items() if attrs.suite == suite]


def card_names_of_number(number: int) -> List[CardName]:
    """Get all identities with one number, in suite order.

    Returns an empty list for numbers outside MIN_NUMBER..MAX_NUMBER.
    """
    return [name for name, attrs in DECK_REGISTRY.items() if attrs.number == number]
