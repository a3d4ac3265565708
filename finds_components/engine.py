"""Finds detection engine: runs every detector over one deck.

`detect` is a pure function of its input apart from logging. It holds no
state between calls and may be called from many threads at once.
"""

from collections import Counter
from typing import Callable, List, Optional, Sequence, Tuple, Union

from finds_components.card_utils.card import Card, parse_deck
from finds_components.card_utils.deck import InvalidDeck, count_factory_positions, validate_deck
from finds_components.detectors import (
    detect_ace_high,
    detect_alternating,
    detect_ascending_top_five,
    detect_blackjack,
    detect_colour_streaks,
    detect_counting_finds,
    detect_dead_mans_hand,
    detect_factory_run,
    detect_full_house,
    detect_mirror,
    detect_runs,
    detect_same_rank_groups,
    detect_solitaire,
    detect_straight_flush,
    detect_suited_streaks,
    detect_two_pair,
)
from finds_components.finds_classes import RARITY_ORDER, DetectRequest, DetectResponse, Find, Rarity
from finds_components.reconciler import reconcile

#logging stuff
from finds_logs.loggers import engine_logger

ParsedDetector = Callable[[Sequence[Card]], List[Find]]
IsNewHook = Callable[[Find], bool]

# Raw finds are concatenated in this order: same-rank groups, PARSED_DETECTORS,
# counting finds, WINDOW_DETECTORS, factory run.
PARSED_DETECTORS: Tuple[ParsedDetector, ...] = (
    detect_suited_streaks,
    detect_runs,
    detect_colour_streaks,
    detect_alternating,
    detect_blackjack,
)
WINDOW_DETECTORS: Tuple[ParsedDetector, ...] = (
    detect_mirror,
    detect_two_pair,
    detect_full_house,
    detect_straight_flush,
    detect_dead_mans_hand,
    detect_solitaire,
    detect_ace_high,
    detect_ascending_top_five,
)


def _always_new(find: Find) -> bool:
    # Placeholder until a per-viewer history store exists.
    return True


def collect_candidates(deck: Sequence[str], parsed: Sequence[Card]) -> List[Find]:
    """Run all sixteen detectors and concatenate their raw finds in fixed order."""
    same_rank = detect_same_rank_groups(parsed)

    candidates = list(same_rank)
    for detector in PARSED_DETECTORS:
        candidates.extend(detector(parsed))
    candidates.extend(detect_counting_finds(same_rank))
    for detector in WINDOW_DETECTORS:
        candidates.extend(detector(parsed))
    candidates.extend(detect_factory_run(deck))
    return candidates


def rank_by_rarity(finds: Sequence[Find]) -> List[Find]:
    """Rarest first. Stable, so equal rarities keep their reconciled order."""
    return sorted(finds, key=lambda f: RARITY_ORDER[f.rarity])


def detect(deck: Union[Sequence[str], DetectRequest], is_new: Optional[IsNewHook] = None) -> List[Find]:
    """Detect every find present in a shuffled deck.

    :param deck: 52 distinct tokens such as "A♠" or "10♥", or a DetectRequest.
    :param is_new: optional hook deciding each find's `is_new` flag; every
        find is new when omitted.
    :raises InvalidDeck: if the deck is not a permutation of the 52 cards.
    """
    if isinstance(deck, DetectRequest):
        tokens = deck.deck
    else:
        try:
            tokens = validate_deck(deck)
        except InvalidDeck as e:
            engine_logger.rejected("detect_rejected", e)
            raise

    parsed = parse_deck(tokens)
    candidates = collect_candidates(tokens, parsed)
    finds = rank_by_rarity(reconcile(candidates))

    hook = is_new or _always_new
    finds = [f.model_copy(update={"is_new": bool(hook(f))}) for f in finds]

    engine_logger.debug(
        "finds_detected",
        candidates=len(candidates),
        finds=len(finds),
        ids=[f.id for f in finds]
    )
    return finds


def summarize(deck: Union[Sequence[str], DetectRequest], is_new: Optional[IsNewHook] = None) -> DetectResponse:
    """Finds plus the factory-position count and a per-rarity tally."""
    tokens = deck.deck if isinstance(deck, DetectRequest) else list(deck)
    finds = detect(tokens, is_new=is_new)
    counts = Counter(f.rarity for f in finds)
    return DetectResponse(
        finds=finds,
        factory_count=count_factory_positions(tokens),
        rarity_counts={rarity.value: counts.get(rarity, 0) for rarity in Rarity},
    )
