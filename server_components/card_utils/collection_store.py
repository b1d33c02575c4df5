# per-user card collections.
# Each username maps to an ordered list of cards. Every read-modify-write on
# one user's list happens under that user's lock, so concurrent appends never
# drop items and concurrent deletes never act on shifted indexes.
import threading
from typing import Any, Dict, List, Optional, Sequence

from server_components.card_utils.card import Card
from server_components.errors import NotASequence, NotFound


class StoredCard:
    """A card plus the id the store gave it. Ids are never reused within a collection."""

    def __init__(self, card_id: int, card: Card):
        self.id = card_id
        self.card = card

    def to_dict(self) -> Dict[str, Any]:
        data = self.card.to_dict()
        data["id"] = self.id
        return data


class _Collection:
    def __init__(self):
        self.cards: List[StoredCard] = []
        self.next_id = 1


class CollectionStore:
    def __init__(self):
        self._collections: Dict[str, _Collection] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def _lock_for(self, username: str) -> threading.Lock:
        with self._registry_lock:
            lock = self._locks.get(username)
            if lock is None:
                lock = threading.Lock()
                self._locks[username] = lock
            return lock

    def _collection(self, username: str, create: bool = False) -> Optional[_Collection]:
        # caller must hold the user's lock
        collection = self._collections.get(username)
        if collection is None and create:
            with self._registry_lock:
                collection = self._collections.setdefault(username, _Collection())
        return collection

    def __contains__(self, username: str) -> bool:
        return username in self._collections

    def create(self, username: str) -> None:
        """Make an empty collection for `username` unless one already exists."""
        with self._lock_for(username):
            self._collection(username, create=True)

    def get(self, username: str) -> List[Dict[str, Any]]:
        with self._lock_for(username):
            collection = self._collection(username)
            if collection is None:
                return []
            return [stored.to_dict() for stored in collection.cards]

    def append(self, username: str, cards: Sequence[Any]) -> int:
        """Append `cards` in order and return how many were added.

        Every element is validated first, so a bad element leaves the
        collection untouched.
        """
        if not isinstance(cards, (list, tuple)):
            raise NotASequence()
        parsed = [Card.from_payload(item) for item in cards]

        with self._lock_for(username):
            collection = self._collection(username, create=True)
            for card in parsed:
                collection.cards.append(StoredCard(collection.next_id, card))
                collection.next_id += 1
        return len(parsed)

    def delete_at(self, username: str, position: Any) -> Dict[str, Any]:
        """Remove the card at `position`; later cards shift one place left."""
        # bool is an int subclass, but True is not a position
        if isinstance(position, bool) or not isinstance(position, int):
            raise NotFound()

        with self._lock_for(username):
            collection = self._collection(username)
            if collection is None or position < 0 or position >= len(collection.cards):
                raise NotFound()
            removed = collection.cards.pop(position)
        return removed.to_dict()

    def delete_by_id(self, username: str, card_id: Any) -> Dict[str, Any]:
        if isinstance(card_id, bool) or not isinstance(card_id, int):
            raise NotFound()

        with self._lock_for(username):
            collection = self._collection(username)
            if collection is not None:
                for index, stored in enumerate(collection.cards):
                    if stored.id == card_id:
                        del collection.cards[index]
                        return stored.to_dict()
        raise NotFound()
