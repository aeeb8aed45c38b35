"""
Secondary card source loader.

The secondary source is a pre-normalized list of printings from another
card game, already in the camelCase shape the index build works with
(name, releaseDate, set, setNumber, isDigital, isPromo, imageUris). It is
validated here and converted to Printing; nothing else is done to it.
"""

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from cardindex.models.failure import MalformedRecordError, MissingSourceError
from cardindex.models.printing import CardSet, ImageUris, Printing

logger = logging.getLogger(__name__)


class SecondarySet(BaseModel):
    name: str
    code: str = Field(..., min_length=1)


class SecondaryImages(BaseModel):
    front: str = Field(..., min_length=1)
    back: str | None = None


class SecondaryPrinting(BaseModel):
    """One pre-normalized printing as stored in the secondary source file."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1)
    release_date: str = Field(..., alias="releaseDate")
    set: SecondarySet
    set_number: str = Field(..., alias="setNumber")
    is_digital: bool = Field(default=False, alias="isDigital")
    is_promo: bool = Field(default=False, alias="isPromo")
    image_uris: SecondaryImages = Field(..., alias="imageUris")
    id: str | None = None
    oracle_id: str | None = Field(default=None, alias="oracleId")
    oracle_name: str | None = Field(default=None, alias="oracleName")

    def to_printing(self) -> Printing:
        """Convert to the pipeline's Printing."""
        return Printing(
            id=self.id,
            oracle_id=self.oracle_id,
            oracle_name=self.oracle_name,
            name=self.name,
            release_date=self.release_date,
            set=CardSet(name=self.set.name, code=self.set.code),
            set_number=self.set_number,
            is_digital=self.is_digital,
            is_promo=self.is_promo,
            image_uris=ImageUris(front=self.image_uris.front, back=self.image_uris.back),
        )


_RECORDS = TypeAdapter(list[dict])


def parse_secondary_printings(payload: bytes | str) -> list[Printing]:
    """
    Parse the secondary source JSON into printings.

    Raises:
        MalformedRecordError: If the payload is not a list of objects or an
            entry fails validation. Names the entry's position.
    """
    try:
        records = _RECORDS.validate_json(payload)
    except ValidationError as e:
        raise MalformedRecordError({}, f"secondary source is not a list of objects: {e}") from e

    printings: list[Printing] = []
    for position, record in enumerate(records):
        try:
            printings.append(SecondaryPrinting.model_validate(record).to_printing())
        except (ValidationError, ValueError) as e:
            raise MalformedRecordError(record, f"secondary entry {position}: {e}") from e

    return printings


def load_secondary_printings(path: Path) -> list[Printing]:
    """
    Load the secondary source file.

    Args:
        path: Path to the secondary JSON file

    Returns:
        Printings in file order

    Raises:
        MissingSourceError: If the file doesn't exist
        MalformedRecordError: If an entry is invalid
    """
    if not path.exists():
        raise MissingSourceError(
            path,
            suggestion="Provide the secondary printings file or pass --no-secondary.",
        )

    printings = parse_secondary_printings(path.read_bytes())
    logger.info("Loaded %d secondary printings from %s", len(printings), path)
    return printings
