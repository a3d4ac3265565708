"""Best-version-only filtering of raw detector output.

After every detector has run, redundant finds are removed in three passes:

1. Counting finds replace their members ("3 Pairs" drops each "Pair").
2. Cross-family winners drop overlapping losers they imply: a Straight
   Flush implies a Straight and a suited streak over the same cards.
   A loser somewhere else in the deck is kept.
3. One find per id survives, the one covering the most positions.
"""

from typing import Dict, List, Sequence, Tuple

from finds_components.finds_classes import Find

SUITED_IDS = ("suited-3", "suited-4", "suited-5", "suited-6", "suited-7", "suited-8")

# aggregate id -> member id it replaces
SUBSUMPTION_RULES: Tuple[Tuple[str, str], ...] = (
    ("three-pairs", "pair"),
    ("two-triples", "triple"),
    ("two-quads", "quad"),
)

# (winner, losers), applied in this order
SUPPRESSION_RULES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("royal-flush", ("straight-flush", "straight", "run-6", "run-7") + SUITED_IDS),
    ("straight-flush", ("straight", "run-6", "run-7") + SUITED_IDS),
    ("perfect-blackjack", ("suited-blackjack", "blackjack")),
    ("suited-blackjack", ("blackjack",)),
    ("two-quads", ("two-triples",)),
)


def drop_subsumed(finds: Sequence[Find]) -> List[Find]:
    present = {f.id for f in finds}
    dropped = {member for aggregate, member in SUBSUMPTION_RULES if aggregate in present}
    return [f for f in finds if f.id not in dropped]


def suppress_overlaps(finds: Sequence[Find]) -> List[Find]:
    filtered = list(finds)
    for winner_id, loser_ids in SUPPRESSION_RULES:
        winners = [f for f in filtered if f.id == winner_id]
        if not winners:
            continue
        filtered = [
            f for f in filtered
            if f.id not in loser_ids or not any(w.overlaps(f) for w in winners)
        ]
    return filtered


def keep_best_per_id(finds: Sequence[Find]) -> List[Find]:
    """Keep the find with the most positions for each id.

    On a tie the first one seen wins. Each id stays where it first appeared
    in the input order, which is what the stable rarity sort then sees.
    """
    best: Dict[str, Find] = {}
    for find in finds:
        current = best.get(find.id)
        if current is None or len(find.positions) > len(current.positions):
            best[find.id] = find
    return list(best.values())


def reconcile(finds: Sequence[Find]) -> List[Find]:
    return keep_best_per_id(suppress_overlaps(drop_subsumed(finds)))
