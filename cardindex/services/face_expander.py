"""
Reversible card expansion.

A reversible card has two independent front faces printed on one card.
Each face is indexed as its own printing, with an "a"/"b" suffix on the
collector number so the two stay distinct.
"""

from collections.abc import Iterable, Iterator

from cardindex.models.failure import MalformedRecordError
from cardindex.models.raw_card import RawRecord

REVERSIBLE_LAYOUT = "reversible_card"
FACE_SUFFIXES = ("a", "b")


def expand(raw: RawRecord) -> list[RawRecord]:
    """
    Split a reversible card into one record per face.

    Face fields are shallow-merged over the parent record and card_faces
    is cleared on the results. Other layouts come back unchanged.

    Raises:
        MalformedRecordError: If a reversible card lacks two faces or a
            collector number
    """
    if raw.get("layout") != REVERSIBLE_LAYOUT:
        return [raw]

    faces = raw.get("card_faces") or []
    if len(faces) < len(FACE_SUFFIXES):
        raise MalformedRecordError(raw, "reversible card without two card_faces")
    if "collector_number" not in raw:
        raise MalformedRecordError(raw, "missing collector_number")

    return [
        {
            **raw,
            **face,
            "collector_number": f"{raw['collector_number']}{suffix}",
            "card_faces": None,
        }
        for face, suffix in zip(faces, FACE_SUFFIXES, strict=False)
    ]


def expand_all(records: Iterable[RawRecord]) -> Iterator[RawRecord]:
    """Flat-map expand() over records, preserving order."""
    for raw in records:
        yield from expand(raw)
