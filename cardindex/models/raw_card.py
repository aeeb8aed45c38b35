"""
Raw Scryfall card records.

Records arrive as plain dicts straight from the bulk export. These
TypedDicts document the fields the pipeline reads; nothing is validated
beyond what projection needs.
"""

from typing import Any, TypedDict


class RawCardFace(TypedDict, total=False):
    """One face of a multi-faced card."""

    name: str
    image_uris: dict[str, str]


class RawCard(TypedDict, total=False):
    """Fields of a Scryfall card object used by the index build."""

    id: str
    oracle_id: str
    name: str
    card_faces: list[RawCardFace] | None

    set: str
    set_name: str
    set_type: str
    collector_number: str
    released_at: str

    layout: str
    digital: bool
    oversized: bool
    promo: bool
    promo_types: list[str]


# Bulk records carry far more keys than RawCard lists; the pipeline passes
# them through untouched.
RawRecord = dict[str, Any]
