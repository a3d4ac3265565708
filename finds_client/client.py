import json
import sys
from finds_client.utils.pretty_display import print_info, print_error, print_border, print_startup_message
from finds_client.utils.animations import animate_finds_reveal, deck_line

from finds_components.card_utils.deck import FACTORY_ORDER, InvalidDeck
from finds_components.card_utils.deck_utils import deck_from_path, deck_from_tokens
from finds_components.engine import summarize

#logging stuff
from finds_logs.loggers import client_logger

class FindsClient:
    """Runs the engine locally and returns plain payload dicts for display."""

    def __init__(self, reveal_delay: float = 0.15):
        self.reveal_delay = reveal_delay

    def classify(self, deck: list[str]) -> dict:
        response = summarize(deck)
        return response.to_payload()

    def classify_file(self, path: str) -> dict:
        try:
            deck = deck_from_path(path)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            client_logger.rejected("deck_load_failed", e, path=path)
            return {"error": f"Could not read {path}: {e}"}
        except InvalidDeck as e:
            client_logger.rejected("deck_invalid", e, path=path)
            return {"error": str(e)}

        client_logger.info("deck_loaded", path=path)
        return {"deck": deck, **self.classify(deck)}

    def classify_text(self, text: str) -> dict:
        # accepts space or comma separated tokens
        raw_tokens = text.replace(",", " ").split()
        try:
            deck = deck_from_tokens(raw_tokens)
        except InvalidDeck as e:
            client_logger.rejected("deck_invalid", e, source="input")
            return {"error": str(e)}
        return {"deck": deck, **self.classify(deck)}

    def classify_factory(self) -> dict:
        deck = list(FACTORY_ORDER)
        return {"deck": deck, **self.classify(deck)}

    def show(self, response: dict):
        if "error" in response:
            print_error(response["error"])
            return

        finds = response["finds"]
        highlight = {p for f in finds for p in f["positions"]}
        print_border()
        print(deck_line(response["deck"], highlight))
        print()
        print_info(f"{len(finds)} finds, {response['factory_count']} cards in factory position")
        print_border()
        animate_finds_reveal(finds, delay=self.reveal_delay)

def main():
    client = FindsClient()

    if len(sys.argv) > 1:
        for path in sys.argv[1:]:
            client.show(client.classify_file(path))
        return

    while True:
        print_startup_message()
        choice = input("Enter choice: ").strip()
        match choice:
            case '1':
                path = input("Path to deck JSON: ").strip()
                client.show(client.classify_file(path))
            case '2':
                text = input("Enter 52 cards (e.g. A♠ 10h Qd ...): ")
                client.show(client.classify_text(text))
            case '3':
                client.show(client.classify_factory())
            case '4':
                print("Goodbye!")
                return
            case _:
                print("Invalid selection.")

if __name__ == "__main__":
    main()
