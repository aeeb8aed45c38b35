from dataclasses import dataclass, field
from typing import Any

# Stored form of one printing inside CardIndex.cards:
#   {"s": "<set>|<number>", "d": 1, "p": 1, "m": 1, "f": url, "b": url}
# d/p/m/b are omitted when unset.
CompressedPrinting = dict[str, Any]


@dataclass
class CardIndex:
    """
    The final lookup artifact.

    cards maps lower-cased display name to its printings in canonical
    order. sets maps set code to set display name.
    """

    cards: dict[str, list[CompressedPrinting]] = field(default_factory=dict)
    sets: dict[str, str] = field(default_factory=dict)

    def distinct_cards(self) -> int:
        """Number of distinct card names."""
        return len(self.cards)

    def distinct_sets(self) -> int:
        """Number of distinct set codes."""
        return len(self.sets)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready {"cards", "sets"} mapping."""
        return {"cards": self.cards, "sets": self.sets}
