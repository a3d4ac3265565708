# card data class.
# Immutable value object for one playing card parsed from a token such as
# "A♠" or "10♥". Every detector reads rank, suit, color and value from here.
from dataclasses import dataclass
from typing import Dict, List, Optional

RANKS = ["A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K"]
SUITS = ["♠", "♥", "♦", "♣"]

SUIT_NAMES = {"♠": "Spades", "♥": "Hearts", "♦": "Diamonds", "♣": "Clubs"}
RED_SUITS = {"♥", "♦"}

# A=1, 2..10 literal, J=11, Q=12, K=13
RANK_VALUES: Dict[str, int] = {rank: i + 1 for i, rank in enumerate(RANKS)}

_RANK_PLURALS = {
    "A": "Aces", "J": "Jacks", "Q": "Queens", "K": "Kings",
}

# ASCII spellings accepted by normalize_token
_SUIT_LETTERS = {"S": "♠", "H": "♥", "D": "♦", "C": "♣"}
_RANK_ALIASES = {"T": "10"}


class InvalidCard(ValueError):
    """Raised when a token does not name one of the 52 standard cards."""

    def __init__(self, token):
        super().__init__(f"Invalid card token: {token!r}")
        self.token = token


@dataclass(frozen=True)
class Card:
    rank: str
    suit: str
    color: str
    value: int
    original: str

    @property
    def suit_name(self) -> str:
        return SUIT_NAMES[self.suit]

    def is_ten_value(self) -> bool:
        """10, J, Q and K all count as ten for blackjack."""
        return self.value >= 10


def parse_card(token: str) -> Card:
    """Parse a token like "Q♦" into a `Card`.

    The suit is the last character, the rank is everything before it.

    :raises InvalidCard: if the rank or suit is unknown.
    """
    if not isinstance(token, str) or len(token) < 2:
        raise InvalidCard(token)
    rank, suit = token[:-1], token[-1]
    if rank not in RANK_VALUES or suit not in SUIT_NAMES:
        raise InvalidCard(token)
    color = "red" if suit in RED_SUITS else "black"
    return Card(rank=rank, suit=suit, color=color, value=RANK_VALUES[rank], original=token)


def parse_deck(tokens) -> List[Card]:
    return [parse_card(token) for token in tokens]


def normalize_token(token) -> Optional[str]:
    """Return the canonical symbol form of a card token, or None.

    Accepts ASCII suits and loose casing, e.g. "as" -> "A♠", "Td" -> "10♦".
    """
    if not isinstance(token, str):
        return None
    cleaned = token.strip()
    if len(cleaned) < 2:
        return None
    rank, suit = cleaned[:-1].upper(), cleaned[-1]
    suit = _SUIT_LETTERS.get(suit.upper(), suit)
    rank = _RANK_ALIASES.get(rank, rank)
    if rank not in RANK_VALUES or suit not in SUIT_NAMES:
        return None
    return f"{rank}{suit}"


def rank_plural(rank: str) -> str:
    """"K" -> "Kings", "7" -> "7s"."""
    if rank in _RANK_PLURALS:
        return _RANK_PLURALS[rank]
    return f"{rank}s"
