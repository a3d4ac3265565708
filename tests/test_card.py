"""Tests for finds_components.card_utils.card."""

from __future__ import annotations

import pytest

from finds_components.card_utils.card import (
    InvalidCard,
    normalize_token,
    parse_card,
    parse_deck,
    rank_plural,
)


class TestParseCard:
    def test_face_card(self) -> None:
        card = parse_card("Q♦")
        assert card.rank == "Q"
        assert card.suit == "♦"
        assert card.color == "red"
        assert card.value == 12
        assert card.original == "Q♦"
        assert card.suit_name == "Diamonds"

    def test_ten_has_two_character_rank(self) -> None:
        card = parse_card("10♣")
        assert card.rank == "10"
        assert card.value == 10
        assert card.color == "black"

    def test_ace_is_one(self) -> None:
        assert parse_card("A♠").value == 1

    def test_ten_value(self) -> None:
        assert parse_card("K♥").is_ten_value()
        assert parse_card("10♥").is_ten_value()
        assert not parse_card("9♥").is_ten_value()

    def test_immutable(self) -> None:
        card = parse_card("7♠")
        with pytest.raises(AttributeError):
            card.value = 8  # type: ignore[misc]

    def test_invalid_raises(self) -> None:
        for token in ["", "A", "1♠", "Z♠", "As", "11♥", None]:
            with pytest.raises(InvalidCard):
                parse_card(token)  # type: ignore[arg-type]

    def test_invalid_card_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_card("X♠")


class TestParseDeck:
    def test_preserves_order(self) -> None:
        parsed = parse_deck(["K♠", "2♥", "10♦"])
        assert [c.original for c in parsed] == ["K♠", "2♥", "10♦"]


class TestNormalizeToken:
    def test_ascii_suits(self) -> None:
        assert normalize_token("As") == "A♠"
        assert normalize_token("10h") == "10♥"
        assert normalize_token("qD") == "Q♦"
        assert normalize_token("7C") == "7♣"

    def test_ten_alias(self) -> None:
        assert normalize_token("Td") == "10♦"

    def test_one_is_not_an_ace(self) -> None:
        # validate_deck rejects "1♠", so the client must too
        assert normalize_token("1♠") is None
        assert normalize_token("1s") is None

    def test_symbol_passthrough(self) -> None:
        assert normalize_token(" j♠ ") == "J♠"

    def test_invalid_returns_none(self) -> None:
        assert normalize_token("Xs") is None
        assert normalize_token("A") is None
        assert normalize_token("") is None
        assert normalize_token(None) is None


class TestRankPlural:
    def test_names(self) -> None:
        assert rank_plural("A") == "Aces"
        assert rank_plural("7") == "7s"
        assert rank_plural("10") == "10s"
        assert rank_plural("K") == "Kings"
