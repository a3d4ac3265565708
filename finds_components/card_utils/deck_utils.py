import json
from pathlib import Path
from typing import List

from .card import normalize_token
from .deck import InvalidDeck, validate_deck

def deck_from_path(path: str) -> List[str]:
    """
    Load a deck from a JSON file.

    The file holds either a plain list of tokens or an object with a
    "deck" (or "cards") key, e.g. a saved shuffle record.
    ASCII tokens like "As" or "10h" are normalised to symbol form.

    :param path: Path string like "decks/shuffle_0001.json"
    """
    with open(Path(path), 'r', encoding='utf-8') as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get('deck', data.get('cards', []))
    if not isinstance(data, list):
        raise InvalidDeck("cardinality", f"{path} does not contain a list of cards.")

    return deck_from_tokens(data)

def deck_from_tokens(raw_tokens) -> List[str]:
    """Normalise raw tokens and validate them as a full deck."""
    tokens = []
    for raw in raw_tokens:
        normalized = normalize_token(raw)
        tokens.append(normalized if normalized is not None else raw)
    return validate_deck(tokens)
