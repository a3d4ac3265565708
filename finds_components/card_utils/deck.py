# deck reference data and validation.
# A deck is an ordered list of 52 card tokens. Positions are 0-based indices.
from collections import Counter
from typing import List, Sequence

from finds_components.card_utils.card import RANKS, SUITS, InvalidCard, parse_card

DECK_SIZE = 52

# A brand-new Bicycle deck comes in this order. Read-only: the factory run
# detector and count_factory_positions must both read this exact sequence.
FACTORY_ORDER = tuple(
    [f"{rank}♠" for rank in RANKS]
    + [f"{rank}♦" for rank in RANKS]
    + [f"{rank}♣" for rank in reversed(RANKS)]
    + [f"{rank}♥" for rank in reversed(RANKS)]
)

STANDARD_CARDS = frozenset(f"{rank}{suit}" for rank in RANKS for suit in SUITS)


class InvalidDeck(ValueError):
    """Raised when a deck is not a permutation of the 52 standard cards.

    `reason` is one of "cardinality", "duplicate" or "unrecognized" and
    `tokens` lists the offending tokens (empty for a cardinality error).
    """

    def __init__(self, reason: str, message: str, tokens: Sequence = ()):
        super().__init__(message)
        self.reason = reason
        self.tokens = list(tokens)


def validate_deck(deck) -> List[str]:
    """Check that `deck` is a permutation of the standard deck.

    :return: the tokens as a new list.
    :raises InvalidDeck: on wrong length, unknown tokens or duplicates.
    """
    tokens = list(deck)
    if len(tokens) != DECK_SIZE:
        raise InvalidDeck(
            "cardinality",
            f"A deck must contain exactly {DECK_SIZE} cards, got {len(tokens)}.",
        )

    unknown = []
    for token in tokens:
        try:
            parse_card(token)
        except InvalidCard:
            unknown.append(token)
    if unknown:
        raise InvalidDeck("unrecognized", f"Unrecognized card tokens: {unknown}", unknown)

    duplicates = [token for token, count in Counter(tokens).items() if count > 1]
    if duplicates:
        raise InvalidDeck("duplicate", f"Duplicate cards in deck: {duplicates}", duplicates)

    return tokens


def count_factory_positions(deck: Sequence[str]) -> int:
    """Number of cards sitting at the same index they hold in FACTORY_ORDER."""
    return sum(1 for card, factory_card in zip(deck, FACTORY_ORDER) if card == factory_card)
