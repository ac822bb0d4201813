"""Card values and hand queries.

Operations supported:
- Construction: resolve a CardName into a fully attributed Card
- Sorting: ascending by number, stable for equal numbers
- Suite matching: all cards share a suite / some pair shares a suite
- Number matching: all cards share a number / some pair shares a number
- Membership: position of the first card with a given identity

A hand is any sequence of Card values. Duplicates are allowed and
nothing here mutates its input.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence

from .registry import (
    CardName,
    Color,
    Suite,
    RANK_CODES,
    SUITE_SYMBOLS,
    lookup,
    parse_card_name,
)

# Returned by index_of when no card matches
NOT_FOUND = -1


@dataclass(frozen=True)
class Card:
    """A playing card with all of its attributes resolved.

    Build cards with make_card() rather than directly so the attributes
    always agree with the deck registry. Immutable and hashable.

    Attributes:
        name: The card identity
        color: Red or black
        number: Comparable rank value (Ace=1 .. King=13)
        rank: Display label ("Ace", "King", ...)
        suite: One of the four suites
    """

    name: CardName
    color: Color
    number: int
    rank: str
    suite: Suite

    def __str__(self) -> str:
        return f"{RANK_CODES[self.number]}{SUITE_SYMBOLS[self.suite]}"

    def __repr__(self) -> str:
        return f"Card({self})"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from a code like '3♥', '10S' or 'ah'.

        Raises:
            UnknownCardError: If the string is not a valid card code
        """
        return make_card(parse_card_name(s))


def make_card(identity: CardName) -> Card:
    """Resolve a card identity into a Card.

    Args:
        identity: A CardName member

    Returns:
        Card carrying the registry's color, number, rank and suite

    Raises:
        UnknownCardError: If identity is not a CardName member
    """
    attrs = lookup(identity)
    return Card(
        name=identity,
        color=attrs.color,
        number=attrs.number,
        rank=attrs.rank,
        suite=attrs.suite,
    )


def get_suite_counts(cards: Iterable[Card]) -> Dict[Suite, int]:
    """Count occurrences of each suite in a list of cards."""
    counts: Dict[Suite, int] = {}
    for card in cards:
        counts[card.suite] = counts.get(card.suite, 0) + 1
    return counts


def get_number_counts(cards: Iterable[Card]) -> Dict[int, int]:
    """Count occurrences of each number in a list of cards."""
    counts: Dict[int, int] = {}
    for card in cards:
        counts[card.number] = counts.get(card.number, 0) + 1
    return counts


def sort_cards(cards: Iterable[Card]) -> List[Card]:
    """Sort cards by number (ascending).

    Cards with equal numbers keep their relative order from the input.

    Args:
        cards: Cards to sort; left untouched

    Returns:
        New sorted list of cards
    """
    return sorted(cards, key=lambda card: card.number)


def has_same_suite(cards: Iterable[Card]) -> bool:
    """Check if every card shares one suite.

    True for an empty or single-card hand.
    """
    return len(get_suite_counts(cards)) <= 1


def has_pair_suite(cards: Iterable[Card]) -> bool:
    """Check if two cards at different positions share a suite.

    False for an empty or single-card hand. The same identity appearing
    twice counts as a pair.
    """
    return any(count > 1 for count in get_suite_counts(cards).values())


def has_same_number(cards: Iterable[Card]) -> bool:
    """Check if every card shares one number.

    True for an empty or single-card hand.
    """
    return len(get_number_counts(cards)) <= 1


def has_pair_number(cards: Iterable[Card]) -> bool:
    """Check if two cards at different positions share a number.

    False for an empty or single-card hand. The same identity appearing
    twice counts as a pair.
    """
    return any(count > 1 for count in get_number_counts(cards).values())


def index_of(cards: Sequence[Card], identity: CardName) -> int:
    """Find the first card with the given identity.

    Args:
        cards: Hand to search
        identity: Card identity to look for

    Returns:
        Index of the first matching card, or NOT_FOUND (-1)

    Note:
        Never raises. A value that is not a CardName simply matches nothing;
        validate it against the registry separately if that matters.
    """
    for i, card in enumerate(cards):
        if card.name == identity:
            return i
    return NOT_FOUND


def contains_card(cards: Sequence[Card], identity: CardName) -> bool:
    """Check if the hand holds a card with the given identity."""
    return index_of(cards, identity) != NOT_FOUND


def create_standard_deck() -> List[Card]:
    """Create a standard 52-card deck in canonical order.

    Returns:
        List of 52 Card objects (4 suites × 13 numbers), unshuffled
    """
    return [make_card(name) for name in CardName]


def make_cards_from_string(s: str) -> List[Card]:
    """Parse cards from a string like "10H 10S 3D".

    Args:
        s: Space-separated card codes

    Returns:
        List of Card objects in the given order
    """
    return [Card.from_string(cs) for cs in s.split()]
