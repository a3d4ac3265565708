# pretty print display stuff

def print_info(message: str):
    print(f"[INFO]: {message}")

def print_error(message: str):
    print(f"[ERROR]: {message}")

def print_border():
    print("=" * 40)
    print()

def print_startup_message():
    print_border()
    print("Welcome to Shuffle Finds!")
    print("Please select an option to continue:")
    print("1. Classify a deck from a JSON file")
    print("2. Type in a deck")
    print("3. Classify the factory order deck")
    print("4. Quit")
    print_border()
