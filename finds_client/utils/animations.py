import sys
from time import sleep

RED = '\033[31m'
GREEN = '\033[32m'
BLUE = '\033[34m'
MAGENTA = '\033[35m'
YELLOW = '\033[33m'
WHITE = '\033[37m'
BOLD = '\033[1m'
RESET = '\033[0m'
CLEAR_LINE = '\033[2K'
HIDE_CURSOR = '\033[?25l'
SHOW_CURSOR = '\033[?25h'

RARITY_COLORS = {
    'Common': WHITE,
    'Uncommon': GREEN,
    'Rare': BLUE,
    'Very Rare': MAGENTA,
    'Extraordinary': RED,
    'Legendary': YELLOW,
}

def format_find(find: dict) -> str:
    """One coloured line for a find payload (as produced by Find.to_payload)."""
    color = RARITY_COLORS.get(find.get('rarity', 'Common'), WHITE)
    rarity_tag = f"[{find['rarity'].upper()}]"
    new_tag = f" {BOLD}NEW{RESET}{color}" if find.get('isNew') else ""
    positions = find['positions']
    span = f"#{positions[0]}" if len(positions) == 1 else f"#{min(positions)}-{max(positions)}"
    return f"{color}{rarity_tag} {find['icon']} {find['name']}{new_tag} ({span}){RESET}"

def deck_line(deck: list[str], highlight: set[int] = frozenset()) -> str:
    """The deck on one line, highlighted cards in bold."""
    cards = []
    for i, card in enumerate(deck):
        color = RED if card[-1] in '♥♦' else WHITE
        weight = BOLD if i in highlight else ''
        cards.append(f"{weight}{color}{card}{RESET}")
    return " ".join(cards)

def animate_finds_reveal(finds: list[dict], delay=0.15):
    """
    Reveal finds one at a time, rarest last so the best one lands at the end.

    Args:
        finds: List of find payload dicts, rarest first
        delay: Pause between lines in seconds
    """
    if not finds:
        print("No finds in this shuffle.")
        return

    print(HIDE_CURSOR, end='')
    try:
        for find in reversed(finds):
            sys.stdout.write(f"{CLEAR_LINE}  {format_find(find)}\n")
            sys.stdout.flush()
            sleep(delay)
    finally:
        print(SHOW_CURSOR, end='')

    best = finds[0]
    color = RARITY_COLORS.get(best['rarity'], WHITE)
    print(f"\n{BOLD}★ Best find: {RESET}{color}{best['name']}{RESET}")
    print()
