# card value object.
# A collection item as the client describes it. `name` is the only required
# field; `type`, `rarity`, `setName` and `image` are descriptive and never
# checked against any fixed set. Unknown keys are kept so a client gets back
# exactly what it stored.
from typing import Any, Dict, Optional

from server_components.errors import InvalidCard

KNOWN_FIELDS = ("name", "type", "rarity", "setName", "image")


class Card:
    def __init__(self, name: str, type: Optional[str] = None, rarity: Optional[str] = None,
                 set_name: Optional[str] = None, image: Optional[str] = None,
                 extra: Optional[Dict[str, Any]] = None):
        self.name = name
        self.type = type
        self.rarity = rarity
        self.set_name = set_name
        self.image = image
        self.extra = dict(extra or {})

    @classmethod
    def from_payload(cls, payload: Any) -> "Card":
        """Build a card from one element of a client's `cards` array.

        Raises InvalidCard if the element is not an object or has no usable name.
        """
        if isinstance(payload, Card):
            return payload
        if not isinstance(payload, dict):
            raise InvalidCard()

        name = payload.get("name")
        if not isinstance(name, str) or not name.strip():
            raise InvalidCard()

        extra = {k: v for k, v in payload.items() if k not in KNOWN_FIELDS and k != "id"}
        return cls(
            name=name,
            type=payload.get("type"),
            rarity=payload.get("rarity"),
            set_name=payload.get("setName"),
            image=payload.get("image"),
            extra=extra,
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = dict(self.extra)
        data["name"] = self.name
        # optional fields only appear when the client sent them
        for key, value in (("type", self.type), ("rarity", self.rarity),
                           ("setName", self.set_name), ("image", self.image)):
            if value is not None:
                data[key] = value
        return data

    def __eq__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return f"Card(name={self.name!r}, rarity={self.rarity!r})"
