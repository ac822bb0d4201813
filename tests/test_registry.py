"""Tests for the deck registry.

Test coverage:
- Registry totality and injectivity over the 52 identities
- Attribute accessors (color, number, rank label, suite)
- UnknownCardError for values outside the deck
- Card-code parsing
- Registry slices by suite and number
"""

import pytest
from standard_deck.deck import (
    CardName,
    Color,
    Suite,
    UnknownCardError,
    DECK_REGISTRY,
    DECK_SIZE,
    MIN_NUMBER,
    MAX_NUMBER,
    RANK_LABELS,
    lookup,
    color_of,
    number_of,
    rank_of,
    suite_of,
    parse_card_name,
    card_names_of_suite,
    card_names_of_number,
)


class TestRegistryShape:
    """The registry covers every identity exactly once."""

    def test_deck_has_52_identities(self):
        assert len(CardName) == 52
        assert DECK_SIZE == 52

    def test_registry_is_total(self):
        assert len(DECK_REGISTRY) == DECK_SIZE
        for name in CardName:
            assert name in DECK_REGISTRY

    def test_registry_is_injective(self):
        pairs = {(attrs.suite, attrs.number) for attrs in DECK_REGISTRY.values()}
        assert len(pairs) == DECK_SIZE

    def test_thirteen_numbers_per_suite(self):
        for suite in Suite:
            numbers = sorted(number_of(n) for n in card_names_of_suite(suite))
            assert numbers == list(range(MIN_NUMBER, MAX_NUMBER + 1))

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            DECK_REGISTRY[CardName.ACE_OF_SPADES] = DECK_REGISTRY[CardName.KING_OF_HEARTS]

    def test_registry_order_matches_card_names(self):
        assert list(DECK_REGISTRY) == list(CardName)


class TestAccessors:
    """Attribute lookup for known identities."""

    def test_ace_of_spades(self):
        name = CardName.ACE_OF_SPADES
        assert color_of(name) == Color.BLACK
        assert number_of(name) == 1
        assert rank_of(name) == "Ace"
        assert suite_of(name) == Suite.SPADES

    def test_ten_of_hearts(self):
        name = CardName.TEN_OF_HEARTS
        assert color_of(name) == Color.RED
        assert number_of(name) == 10
        assert rank_of(name) == "Ten"
        assert suite_of(name) == Suite.HEARTS

    def test_face_cards(self):
        assert number_of(CardName.JACK_OF_CLUBS) == 11
        assert number_of(CardName.QUEEN_OF_DIAMONDS) == 12
        assert number_of(CardName.KING_OF_CLUBS) == 13
        assert rank_of(CardName.KING_OF_CLUBS) == "King"

    def test_color_follows_suite(self):
        for name in CardName:
            expected = Color.RED if suite_of(name) in (Suite.HEARTS, Suite.DIAMONDS) else Color.BLACK
            assert color_of(name) == expected

    def test_rank_label_follows_number(self):
        for name in CardName:
            assert rank_of(name) == RANK_LABELS[number_of(name)]

    def test_lookup_returns_all_attributes(self):
        attrs = lookup(CardName.THREE_OF_DIAMONDS)
        assert attrs.color == Color.RED
        assert attrs.number == 3
        assert attrs.rank == "Three"
        assert attrs.suite == Suite.DIAMONDS


class TestUnknownCard:
    """Values outside the closed identity set are rejected."""

    def test_plain_string_is_not_an_identity(self):
        with pytest.raises(UnknownCardError):
            color_of("AS")

    def test_every_accessor_rejects(self):
        for accessor in (color_of, number_of, rank_of, suite_of, lookup):
            with pytest.raises(UnknownCardError):
                accessor("JOKER")

    def test_none_and_ints_rejected(self):
        with pytest.raises(UnknownCardError):
            number_of(None)
        with pytest.raises(UnknownCardError):
            number_of(0)

    def test_unhashable_rejected(self):
        with pytest.raises(UnknownCardError):
            suite_of(["AS"])

    def test_error_carries_identity(self):
        with pytest.raises(UnknownCardError) as exc_info:
            lookup("ZZ")
        assert exc_info.value.identity == "ZZ"

    def test_error_is_lookup_error(self):
        assert issubclass(UnknownCardError, LookupError)


class TestParseCardName:
    """Card codes parse to identities."""

    def test_letter_codes(self):
        assert parse_card_name("AS") == CardName.ACE_OF_SPADES
        assert parse_card_name("10H") == CardName.TEN_OF_HEARTS
        assert parse_card_name("QD") == CardName.QUEEN_OF_DIAMONDS
        assert parse_card_name("2C") == CardName.TWO_OF_CLUBS

    def test_case_and_whitespace(self):
        assert parse_card_name(" ks ") == CardName.KING_OF_SPADES
        assert parse_card_name("jh") == CardName.JACK_OF_HEARTS

    def test_suite_symbols(self):
        assert parse_card_name("3♥") == CardName.THREE_OF_HEARTS
        assert parse_card_name("10♠") == CardName.TEN_OF_SPADES
        assert parse_card_name("A♦") == CardName.ACE_OF_DIAMONDS
        assert parse_card_name("K♣") == CardName.KING_OF_CLUBS

    def test_alternate_rank_codes(self):
        assert parse_card_name("TS") == CardName.TEN_OF_SPADES
        assert parse_card_name("1H") == CardName.ACE_OF_HEARTS

    def test_every_code_round_trips(self):
        for name in CardName:
            assert parse_card_name(name.value) == name
            assert parse_card_name(str(name)) == name

    def test_invalid_codes(self):
        for code in ["", "A", "S", "11H", "0S", "AX", "10", "AS5", "♠A"]:
            with pytest.raises(UnknownCardError):
                parse_card_name(code)

    def test_non_string_rejected(self):
        with pytest.raises(UnknownCardError):
            parse_card_name(None)


class TestRegistrySlices:
    """Identities grouped by suite or number."""

    def test_suite_slice_in_number_order(self):
        hearts = card_names_of_suite(Suite.HEARTS)
        assert len(hearts) == 13
        assert hearts[0] == CardName.ACE_OF_HEARTS
        assert hearts[-1] == CardName.KING_OF_HEARTS

    def test_number_slice_in_suite_order(self):
        tens = card_names_of_number(10)
        assert tens == [
            CardName.TEN_OF_HEARTS,
            CardName.TEN_OF_DIAMONDS,
            CardName.TEN_OF_CLUBS,
            CardName.TEN_OF_SPADES,
        ]

    def test_number_out_of_range(self):
        assert card_names_of_number(0) == []
        assert card_names_of_number(14) == []
