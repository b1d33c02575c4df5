# pretty print display stuff
from typing import Any, Dict, List

RARITY_COLORS = {
    'common': '\033[37m',
    'uncommon': '\033[32m',
    'rare': '\033[36m',
    'mythic': '\033[33m',
}
RESET = '\033[0m'


def print_info(message: str):
    print(f"[INFO]: {message}")

def print_error(message: str):
    print(f"[ERROR]: {message}")

def print_border():
    print("=" * 40)
    print()

def print_startup_message():
    print_border()
    print("Welcome to your card collection!")
    print("Please select an option to continue:")
    print("1. Create a new account")
    print("2. Sign in to existing account")
    print_border()

def print_main_menu(username: str):
    print_border()
    print(f"Logged in as {username}")
    print("1. View my cards")
    print("2. Add a card")
    print("3. Remove a card")
    print("4. Log out")
    print_border()

def format_card(card: Dict[str, Any]) -> str:
    rarity = card.get("rarity") or ""
    color = RARITY_COLORS.get(rarity.lower(), "")
    details = " / ".join(v for v in (card.get("type"), rarity, card.get("setName")) if v)
    line = f"#{card.get('id', '?')} {card['name']}"
    if details:
        line += f" ({details})"
    return f"{color}{line}{RESET}" if color else line

def print_cards(cards: List[Dict[str, Any]]):
    if not cards:
        print_info("Your collection is empty")
        return
    for card in cards:
        print(format_card(card))
