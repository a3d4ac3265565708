"""Pattern detectors, one function per find family.

Each detector scans a parsed deck and returns a list of `Find` objects.
Detectors report MAXIMAL patterns only: the longest streak that can't be
extended further, at the single best tier it qualifies for. A 5-long suited
streak never also reports the 3-long streak inside it.

Two detectors take something other than the parsed deck:
`detect_counting_finds` reads the output of `detect_same_rank_groups`, and
`detect_factory_run` compares raw tokens against FACTORY_ORDER.
"""

from typing import Callable, List, Sequence, Tuple

from finds_components.card_utils.card import Card, rank_plural
from finds_components.card_utils.deck import FACTORY_ORDER
from finds_components.finds_classes import Find, Rarity

Span = Tuple[int, int]  # [start, end)

PERFECT_ACE = "A♠"
PERFECT_JACK = "J♠"
ACE_HIGH_CARD = "A♠"

_ROYAL_VALUES = {1, 10, 11, 12, 13}


def _positions(start: int, end: int) -> List[int]:
    return list(range(start, end))


def _maximal_spans(parsed: Sequence[Card], continues: Callable[[Card, Card], bool]) -> List[Span]:
    """Split the deck into maximal spans where every adjacent pair satisfies `continues`."""
    spans = []
    start = 0
    for i in range(1, len(parsed) + 1):
        if i < len(parsed) and continues(parsed[i - 1], parsed[i]):
            continue
        spans.append((start, i))
        start = i
    return spans


def _ascending_spans(parsed: Sequence[Card], suited: bool = False) -> List[Span]:
    """Maximal runs of value +1, with a one-off King -> Ace extension.

    When a run ends on a King and the next card is an Ace (of the same suit if
    `suited`), the Ace counts as 14 and closes the run. The next run starts
    after the Ace.
    """
    spans = []
    n = len(parsed)
    start = 0
    i = 1
    while i <= n:
        if (i < n and parsed[i].value == parsed[i - 1].value + 1
                and (not suited or parsed[i].suit == parsed[start].suit)):
            i += 1
            continue

        end = i
        if (end < n and parsed[end - 1].value == 13 and parsed[end].rank == "A"
                and (not suited or parsed[end].suit == parsed[start].suit)):
            end += 1

        spans.append((start, end))
        start = end
        i = end + 1
    return spans


# ──────────────────────────────────────────────
# Same-Rank Groups -> Pair, Triple, Quad
# ──────────────────────────────────────────────

def detect_same_rank_groups(parsed: Sequence[Card]) -> List[Find]:
    finds = []
    for start, end in _maximal_spans(parsed, lambda a, b: a.rank == b.rank):
        size = end - start
        rank = parsed[start].rank
        positions = _positions(start, end)

        if size >= 4:
            finds.append(Find(id="quad", name=f"Quad {rank_plural(rank)}", icon="🃏",
                              rarity=Rarity.VERY_RARE, positions=positions))
        elif size == 3:
            finds.append(Find(id="triple", name=f"Triple {rank_plural(rank)}", icon="🃏",
                              rarity=Rarity.UNCOMMON, positions=positions))
        elif size == 2:
            finds.append(Find(id="pair", name=f"Pair of {rank_plural(rank)}", icon="🃏",
                              rarity=Rarity.COMMON, positions=positions))
    return finds


# ──────────────────────────────────────────────
# Suited Streaks -> Suited 3/4/5/6/7/8
# ──────────────────────────────────────────────

# (minimum length, id, rarity), longest first
_SUITED_TIERS = [
    (8, "suited-8", Rarity.EXTRAORDINARY),
    (7, "suited-7", Rarity.VERY_RARE),
    (6, "suited-6", Rarity.RARE),
    (5, "suited-5", Rarity.RARE),
    (4, "suited-4", Rarity.UNCOMMON),
    (3, "suited-3", Rarity.COMMON),
]


def detect_suited_streaks(parsed: Sequence[Card]) -> List[Find]:
    finds = []
    for start, end in _maximal_spans(parsed, lambda a, b: a.suit == b.suit):
        length = end - start
        for minimum, find_id, rarity in _SUITED_TIERS:
            if length >= minimum:
                label = "8+" if minimum == 8 else str(length)
                first = parsed[start]
                finds.append(Find(id=find_id, name=f"{label} {first.suit_name}", icon=first.suit,
                                  rarity=rarity, positions=_positions(start, end)))
                break
    return finds


# ──────────────────────────────────────────────
# Rank Runs -> Run of 3/4, Straight (5), Run of 6/7+
# ──────────────────────────────────────────────

def detect_runs(parsed: Sequence[Card]) -> List[Find]:
    finds = []
    for start, end in _ascending_spans(parsed):
        length = end - start
        if length < 3:
            continue

        if length >= 7:
            find_id, name, rarity = "run-7", f"Run of {length}", Rarity.VERY_RARE
        elif length == 6:
            find_id, name, rarity = "run-6", "Run of 6", Rarity.VERY_RARE
        elif length == 5:
            # poker terminology
            find_id, name, rarity = "straight", "Straight", Rarity.RARE
        elif length == 4:
            find_id, name, rarity = "run-4", "Run of 4", Rarity.UNCOMMON
        else:
            find_id, name, rarity = "run-3", "Run of 3", Rarity.COMMON

        finds.append(Find(id=find_id, name=name, icon="📈", rarity=rarity,
                          positions=_positions(start, end)))
    return finds


# ──────────────────────────────────────────────
# Colour Streaks -> 6, 8, 10
# ──────────────────────────────────────────────

def detect_colour_streaks(parsed: Sequence[Card]) -> List[Find]:
    finds = []
    for start, end in _maximal_spans(parsed, lambda a, b: a.color == b.color):
        length = end - start
        if length < 6:
            continue

        if length >= 10:
            find_id, rarity = "colour-10", Rarity.VERY_RARE
        elif length >= 8:
            find_id, rarity = "colour-8", Rarity.RARE
        else:
            find_id, rarity = "colour-6", Rarity.UNCOMMON

        red = parsed[start].color == "red"
        finds.append(Find(id=find_id, name=f"{'Red' if red else 'Black'} Streak of {length}",
                          icon="🔴" if red else "⚫", rarity=rarity,
                          positions=_positions(start, end)))
    return finds


# ──────────────────────────────────────────────
# Alternating Colour -> 7, 10
# ──────────────────────────────────────────────

def detect_alternating(parsed: Sequence[Card]) -> List[Find]:
    finds = []
    for start, end in _maximal_spans(parsed, lambda a, b: a.color != b.color):
        length = end - start
        if length < 7:
            continue
        if length >= 10:
            find_id, rarity = "alternating-10", Rarity.VERY_RARE
        else:
            find_id, rarity = "alternating-7", Rarity.RARE
        finds.append(Find(id=find_id, name=f"Alternating {length}", icon="🎭",
                          rarity=rarity, positions=_positions(start, end)))
    return finds


# ──────────────────────────────────────────────
# Blackjack -> Basic, Suited, Perfect
# ──────────────────────────────────────────────

def detect_blackjack(parsed: Sequence[Card]) -> List[Find]:
    """Every adjacent Ace + ten-value pair, in either order.

    Overlapping pairs are all reported here; the reconciler keeps the best.
    """
    finds = []
    for i in range(len(parsed) - 1):
        a, b = parsed[i], parsed[i + 1]
        if a.rank == "A" and b.is_ten_value():
            ace, ten = a, b
        elif b.rank == "A" and a.is_ten_value():
            ace, ten = b, a
        else:
            continue

        positions = [i, i + 1]
        if ace.original == PERFECT_ACE and ten.original == PERFECT_JACK:
            finds.append(Find(id="perfect-blackjack", name="Perfect Blackjack", icon="🂡",
                              rarity=Rarity.RARE, positions=positions))
        elif ace.suit == ten.suit:
            finds.append(Find(id="suited-blackjack", name="Suited Blackjack", icon="🂡",
                              rarity=Rarity.UNCOMMON, positions=positions))
        else:
            finds.append(Find(id="blackjack", name="Blackjack", icon="🂡",
                              rarity=Rarity.COMMON, positions=positions))
    return finds


# ──────────────────────────────────────────────
# Counting -> Three Pairs, Two Triples, Two Quads
# ──────────────────────────────────────────────

def detect_counting_finds(same_rank_finds: Sequence[Find]) -> List[Find]:
    """Count same-rank groups across the whole deck.

    Takes the output of `detect_same_rank_groups` rather than rescanning.
    Triples and quads do not count as pairs.
    """
    pairs = [f for f in same_rank_finds if f.id == "pair"]
    triples = [f for f in same_rank_finds if f.id == "triple"]
    quads = [f for f in same_rank_finds if f.id == "quad"]

    def union(group):
        return [p for f in group for p in f.positions]

    finds = []
    if len(pairs) >= 3:
        finds.append(Find(id="three-pairs", name=f"{len(pairs)} Pairs", icon="🃏",
                          rarity=Rarity.UNCOMMON, positions=union(pairs)))
    if len(triples) >= 2:
        finds.append(Find(id="two-triples", name="Two Triples", icon="🃏",
                          rarity=Rarity.RARE, positions=union(triples)))
    if len(quads) >= 2:
        finds.append(Find(id="two-quads", name="Two Quads", icon="🃏",
                          rarity=Rarity.EXTRAORDINARY, positions=union(quads)))
    return finds


# ──────────────────────────────────────────────
# Mirror -> same rank at symmetric positions
# ──────────────────────────────────────────────

def detect_mirror(parsed: Sequence[Card]) -> List[Find]:
    last = len(parsed) - 1
    positions = []
    for i in range(len(parsed) // 2):
        if parsed[i].rank == parsed[last - i].rank:
            positions.extend([i, last - i])

    count = len(positions) // 2
    if count >= 3:
        return [Find(id="mirror", name=f"{count} Mirrors", icon="🪞",
                     rarity=Rarity.UNCOMMON, positions=positions)]
    return []


# ──────────────────────────────────────────────
# Window patterns -> Two Pair, Full House, Dead Man's Hand
# ──────────────────────────────────────────────

def detect_two_pair(parsed: Sequence[Card]) -> List[Find]:
    """AABB in four consecutive cards."""
    finds = []
    for i in range(len(parsed) - 3):
        r = [c.rank for c in parsed[i:i + 4]]
        if r[0] == r[1] and r[2] == r[3] and r[0] != r[2]:
            finds.append(Find(id="two-pair", name="Two Pair", icon="🃏",
                              rarity=Rarity.RARE, positions=_positions(i, i + 4)))
    return finds


def detect_full_house(parsed: Sequence[Card]) -> List[Find]:
    """AAABB or AABBB in five consecutive cards."""
    finds = []
    for i in range(len(parsed) - 4):
        r = [c.rank for c in parsed[i:i + 5]]
        aaabb = r[0] == r[1] == r[2] and r[3] == r[4] and r[0] != r[3]
        aabbb = r[0] == r[1] and r[2] == r[3] == r[4] and r[0] != r[2]
        if aaabb or aabbb:
            finds.append(Find(id="full-house", name="Full House", icon="🏠",
                              rarity=Rarity.VERY_RARE, positions=_positions(i, i + 5)))
    return finds


def detect_dead_mans_hand(parsed: Sequence[Card]) -> List[Find]:
    """Two Aces and two Eights, any order, in four consecutive cards."""
    finds = []
    for i in range(len(parsed) - 3):
        ranks = [c.rank for c in parsed[i:i + 4]]
        if ranks.count("A") == 2 and ranks.count("8") == 2:
            finds.append(Find(id="dead-mans-hand", name="Dead Man's Hand", icon="💀",
                              rarity=Rarity.EXTRAORDINARY, positions=_positions(i, i + 4)))
    return finds


# ──────────────────────────────────────────────
# Straight Flush & Royal Flush
# ──────────────────────────────────────────────

def detect_straight_flush(parsed: Sequence[Card]) -> List[Find]:
    finds = []
    for start, end in _ascending_spans(parsed, suited=True):
        if end - start < 5:
            continue
        positions = _positions(start, end)
        values = {parsed[p].value for p in positions}
        if values == _ROYAL_VALUES:
            finds.append(Find(id="royal-flush", name=f"Royal Flush ({parsed[start].suit_name})",
                              icon="👑", rarity=Rarity.LEGENDARY, positions=positions))
        else:
            finds.append(Find(id="straight-flush", name="Straight Flush", icon="⚡",
                              rarity=Rarity.EXTRAORDINARY, positions=positions))
    return finds


# ──────────────────────────────────────────────
# Solitaire -> descending, alternating colour
# ──────────────────────────────────────────────

def detect_solitaire(parsed: Sequence[Card]) -> List[Find]:
    """Like building a Klondike column: 9♠ 8♥ 7♣ 6♦ 5♠."""
    finds = []
    spans = _maximal_spans(parsed, lambda a, b: b.value == a.value - 1 and b.color != a.color)
    for start, end in spans:
        length = end - start
        if length >= 5:
            finds.append(Find(id="solitaire-5", name=f"Solitaire {length}", icon="🂠",
                              rarity=Rarity.EXTRAORDINARY, positions=_positions(start, end)))
    return finds


# ──────────────────────────────────────────────
# Top of deck -> Ace High, Ascending Top Five
# ──────────────────────────────────────────────

def detect_ace_high(parsed: Sequence[Card]) -> List[Find]:
    if parsed and parsed[0].original == ACE_HIGH_CARD:
        return [Find(id="ace-high", name="Ace High", icon="🂡",
                     rarity=Rarity.RARE, positions=[0])]
    return []


def detect_ascending_top_five(parsed: Sequence[Card]) -> List[Find]:
    if len(parsed) < 5:
        return []
    top = parsed[:5]
    if all(top[i].value > top[i - 1].value for i in range(1, 5)):
        return [Find(id="ascending-top-5", name="Ascending Top Five", icon="⬆️",
                     rarity=Rarity.EXTRAORDINARY, positions=_positions(0, 5))]
    return []


# ──────────────────────────────────────────────
# Factory Run -> block still in factory order
# ──────────────────────────────────────────────

def detect_factory_run(deck: Sequence[str]) -> List[Find]:
    """Blocks of 4+ cards that survived the shuffle in factory position.

    Works on raw tokens. Unlike count_factory_positions, scattered single
    matches do not count.
    """
    finds = []
    run_start = None
    for i in range(len(deck) + 1):
        matches = i < len(deck) and i < len(FACTORY_ORDER) and deck[i] == FACTORY_ORDER[i]
        if matches:
            if run_start is None:
                run_start = i
            continue
        if run_start is not None and i - run_start >= 4:
            finds.append(Find(id="factory-run", name=f"Factory Run of {i - run_start}", icon="🏭",
                              rarity=Rarity.EXTRAORDINARY, positions=_positions(run_start, i)))
        run_start = None
    return finds
