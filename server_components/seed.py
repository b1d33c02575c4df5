# pre-loaded demo account so a fresh server has something to show.
from server_components.collection_api import CollectionAPI

DEMO_USERNAME = "wolfe_hoover"
DEMO_PASSWORD = "password"
DEMO_EMAIL = "wolfehoover@example.com"

PLACEHOLDER_IMAGE = "https://via.placeholder.com/100x150"

DEMO_CARDS = [
    {"name": "Caesar, Legion's Emperor", "type": "Legendary Creature", "rarity": "mythic",
     "setName": "Fallout", "image": PLACEHOLDER_IMAGE},
    {"name": "Aradesh, the Founder", "type": "Legendary Creature", "rarity": "mythic",
     "setName": "Fallout", "image": PLACEHOLDER_IMAGE},
    {"name": "Frodo Baggins", "type": "Legendary Creature", "rarity": "rare",
     "setName": "Lord of the Rings", "image": PLACEHOLDER_IMAGE},
    {"name": "Samwise the Stouthearted", "type": "Legendary Creature", "rarity": "rare",
     "setName": "Lord of the Rings", "image": PLACEHOLDER_IMAGE},
]


def seed_demo_account(api: CollectionAPI) -> bool:
    """Register the demo user with its starter cards. Returns False if it already exists."""
    if DEMO_USERNAME in api.credentials:
        return False
    api.credentials.register(DEMO_USERNAME, DEMO_PASSWORD, DEMO_EMAIL)
    api.collections.append(DEMO_USERNAME, DEMO_CARDS)
    return True
