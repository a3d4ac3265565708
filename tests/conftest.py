"""Shared deck builders for the finds tests."""

from __future__ import annotations

import pytest

from finds_components.card_utils.card import RANKS, SUITS


def _quiet_deck() -> list[str]:
    # Card k has suit SUITS[k % 4] and value (5k + 3) % 13 + 1. Neighbours
    # never share rank, suit or a +-1 value, colours go b r r b, and only
    # two ranks mirror, so the engine reports nothing for this deck.
    return [f"{RANKS[(5 * k + 3) % 13]}{SUITS[k % 4]}" for k in range(52)]


QUIET_DECK = _quiet_deck()


def insert_block(start: int, block: list[str]) -> list[str]:
    """QUIET_DECK with `block` moved to begin at `start`, others kept in order."""
    rest = [card for card in QUIET_DECK if card not in block]
    return rest[:start] + list(block) + rest[start:]


@pytest.fixture
def quiet_deck() -> list[str]:
    return list(QUIET_DECK)


@pytest.fixture
def deck_with_block():
    return insert_block
