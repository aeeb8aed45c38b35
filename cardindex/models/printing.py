from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CardSet:
    """
    A set a printing belongs to.

    Attributes:
        name: Display name (e.g., "Tempest")
        code: Set code, unique per set (e.g., "tmp")
    """

    name: str
    code: str


@dataclass(frozen=True, slots=True)
class ImageUris:
    """
    Image locations for a printing.

    Attributes:
        front: URL (or local path) of the front image, always present
        back: URL of the back image, only for cards whose second face
            has its own image
    """

    front: str
    back: str | None = None


@dataclass(frozen=True, slots=True)
class Printing:
    """
    One physical or digital appearance of a card in a set.

    Attributes:
        name: Normalized display name, the grouping key
        release_date: ISO date string (e.g., "1997-10-14")
        set: Set the printing belongs to
        set_number: Collector number, may carry suffixes (e.g., "218a")
        image_uris: Front and optional back image
        is_digital: Printing only exists in digital products
        is_promo: Printing is a promo or special-product printing
        id: Scryfall card id
        oracle_id: Scryfall oracle id
        oracle_name: Unprocessed source name, used to detect multi-face cards
    """

    name: str
    release_date: str
    set: CardSet
    set_number: str
    image_uris: ImageUris
    is_digital: bool = False
    is_promo: bool = False
    id: str | None = None
    oracle_id: str | None = None
    oracle_name: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Printing name must not be empty")
        if not self.set.code:
            raise ValueError("Printing set code must not be empty")
        if not self.image_uris.front:
            raise ValueError("Printing front image must not be empty")

    @property
    def is_multi_faced(self) -> bool:
        """True if the source card had several faces before expansion."""
        return self.oracle_name is not None and " // " in self.oracle_name
