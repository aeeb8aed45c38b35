"""
Projection of raw bulk records onto Printing.

Takes a classified, expanded record and keeps only what the card-name
browser needs: identity, set, collector number, flags, and image URLs.
"""

from collections.abc import Iterable, Iterator

from cardindex.models.failure import MalformedRecordError
from cardindex.models.printing import CardSet, ImageUris, Printing
from cardindex.models.raw_card import RawRecord
from cardindex.services.card_names import normalize_card_name
from cardindex.services.rules import DEFAULT_RULES, ClassificationRules

SCRYFALL_CARD_API = "https://api.scryfall.com/cards"

# Fields projection cannot do without.
REQUIRED_FIELDS = ("set", "set_name", "collector_number", "released_at")


def build_image_url(set_code: str, collector_number: str, face: str = "front") -> str:
    """
    Build the Scryfall image URL for a printing.

    Scryfall redirects this to the CDN image. Unlike the image_uris in the
    bulk data, it carries no cache-busting timestamp, so the artifact stays
    stable between weekly exports.

    Args:
        set_code: Set code (e.g., "tmp")
        collector_number: Collector number (e.g., "107", "218a")
        face: "front" or "back"

    Returns:
        Cropped-border image URL
    """
    return (
        f"{SCRYFALL_CARD_API}/{set_code}/{collector_number}"
        f"?format=image&version=border_crop&face={face}"
    )


def _face_has_image(raw: RawRecord, index: int) -> bool:
    faces = raw.get("card_faces") or []
    return len(faces) > index and bool(faces[index].get("image_uris"))


def display_name(raw: RawRecord) -> str:
    """
    Name shown for a record.

    Cards whose first face has its own image (transform, modal DFC) are
    shown under the front face name. Everything else keeps the full name.

    Raises:
        MalformedRecordError: If the chosen name is missing, null or not a
            non-empty string
    """
    if _face_has_image(raw, 0):
        name = raw["card_faces"][0].get("name")
    else:
        name = raw.get("name")
    if not isinstance(name, str) or not name:
        raise MalformedRecordError(raw, "missing name")
    return name


def is_promo(raw: RawRecord, rules: ClassificationRules = DEFAULT_RULES) -> bool:
    """
    Decide whether a record counts as a promo printing.

    The not-promo override wins over every other signal. A promo_types key
    counts as soon as it is present, whatever it holds.
    """
    set_code = raw.get("set")
    if set_code in rules.not_promo_sets:
        return False

    return bool(
        raw.get("promo")
        or raw.get("promo_types") is not None
        or raw.get("set_type") in rules.promo_set_types
        or set_code in rules.promo_sets
    )


def project(raw: RawRecord, rules: ClassificationRules = DEFAULT_RULES) -> Printing:
    """
    Map a raw record to a Printing.

    Raises:
        MalformedRecordError: If a required field is missing or the record
            yields an empty name or set code
    """
    missing = [key for key in REQUIRED_FIELDS if raw.get(key) is None]
    if missing:
        raise MalformedRecordError(raw, f"missing {', '.join(missing)}")

    set_code = str(raw["set"])
    number = str(raw["collector_number"])

    back = build_image_url(set_code, number, "back") if _face_has_image(raw, 1) else None

    try:
        return Printing(
            id=raw.get("id"),
            oracle_id=raw.get("oracle_id"),
            oracle_name=raw.get("name"),
            name=normalize_card_name(display_name(raw)),
            release_date=str(raw["released_at"]),
            set=CardSet(name=str(raw["set_name"]), code=set_code),
            set_number=number,
            is_digital=bool(raw.get("digital", False)),
            is_promo=is_promo(raw, rules),
            image_uris=ImageUris(
                front=build_image_url(set_code, number, "front"),
                back=back,
            ),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise MalformedRecordError(raw, str(e)) from e


def project_all(
    records: Iterable[RawRecord],
    rules: ClassificationRules = DEFAULT_RULES,
) -> Iterator[Printing]:
    """Map project() over records, preserving order."""
    return (project(raw, rules) for raw in records)
