"""
Static classification rules for the index build.

These lists are curated by hand against Scryfall's set and layout
taxonomy. They are compiled-in constants, not settings: changing one
changes the artifact, so it should go through review like code.
"""

from dataclasses import dataclass

# =============================================================================
# INCLUSION
# =============================================================================

# Always included, even when another rule would reject them.
INCLUDED_SETS = frozenset(
    [
        "sunf",  # Unfinity Sticker Sheets
    ]
)

EXCLUDED_SETS = frozenset(
    [
        "fbb",
        "4bb",
        "rin",
        "ren",
    ]
)

EXCLUDED_SET_TYPES = frozenset(["token"])

EXCLUDED_LAYOUTS = frozenset(
    [
        "token",
        "double_faced_token",
        "art_series",
    ]
)

# Oversized cards are dropped except for this layout.
OVERSIZED_ALLOWED_LAYOUT = "planar"

# =============================================================================
# PROMO CLASSIFICATION
# =============================================================================

PROMO_SET_TYPES = frozenset(
    [
        "from_the_vault",
        "spellbook",
        "memorabilia",  # World Champs decks and CE/IE
        "box",  # Secret Lairs
        "duel_deck",
        "premium_deck",
        "masterpiece",
    ]
)

PROMO_SETS = frozenset(
    [
        "plist",  # The List
        "mb1",  # Non-playtest Mystery Booster inclusions
        "sum",  # Summer Magic
    ]
)

NOT_PROMO_SETS = frozenset(["phpr"])


@dataclass(frozen=True, slots=True)
class ClassificationRules:
    """Bundle of the rule lists, injectable for tests."""

    included_sets: frozenset[str] = INCLUDED_SETS
    excluded_sets: frozenset[str] = EXCLUDED_SETS
    excluded_set_types: frozenset[str] = EXCLUDED_SET_TYPES
    excluded_layouts: frozenset[str] = EXCLUDED_LAYOUTS
    oversized_allowed_layout: str = OVERSIZED_ALLOWED_LAYOUT
    promo_set_types: frozenset[str] = PROMO_SET_TYPES
    promo_sets: frozenset[str] = PROMO_SETS
    not_promo_sets: frozenset[str] = NOT_PROMO_SETS


DEFAULT_RULES = ClassificationRules()
