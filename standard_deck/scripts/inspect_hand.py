#!/usr/bin/env python3
"""Inspect a hand of cards from the command line.

This script parses a hand and reports:
- The parsed and number-sorted hand
- Suite and number matches (all same / any pair)
- The position of a card in the hand (with --find)

Usage:
    python -m standard_deck.scripts.inspect_hand "10H 10S 3D"
    python -m standard_deck.scripts.inspect_hand "10H 10S 3D" --find 10S --verbose
"""

import argparse
import logging
import sys
from typing import List, Optional

from standard_deck.deck import (
    Card,
    UnknownCardError,
    has_pair_number,
    has_pair_suite,
    has_same_number,
    has_same_suite,
    index_of,
    make_cards_from_string,
    parse_card_name,
    sort_cards,
)

logger = logging.getLogger(__name__)


def format_cards(cards: List[Card]) -> str:
    """Join cards for display; '(empty)' for an empty hand."""
    if not cards:
        return "(empty)"
    return " ".join(str(c) for c in cards)


def inspect_hand(hand: str, find: Optional[str] = None) -> List[str]:
    """Build the report lines for a hand string.

    Raises:
        UnknownCardError: If the hand or the --find card has a bad card code
    """
    cards = make_cards_from_string(hand)
    logger.debug("Parsed %d card(s) from %r", len(cards), hand)

    lines = [
        f"Hand:            {format_cards(cards)}",
        f"Sorted:          {format_cards(sort_cards(cards))}",
        f"Same suite:      {has_same_suite(cards)}",
        f"Pair suite:      {has_pair_suite(cards)}",
        f"Same number:     {has_same_number(cards)}",
        f"Pair number:     {has_pair_number(cards)}",
    ]

    if find is not None:
        target = parse_card_name(find)
        lines.append(f"Index of {target}: {index_of(cards, target)}")

    return lines


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Inspect a hand of standard playing cards")
    parser.add_argument(
        "hand",
        help='Space-separated card codes, e.g. "10H 10S 3D"',
    )
    parser.add_argument(
        "--find",
        type=str,
        default=None,
        help="Card code to locate in the hand (default: None)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        lines = inspect_hand(args.hand, find=args.find)
    except UnknownCardError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
