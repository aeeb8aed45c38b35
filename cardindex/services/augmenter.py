"""Extra printings appended after the projected bulk records."""

from collections.abc import Iterable

from cardindex.models.printing import CardSet, ImageUris, Printing

EASTER_EGG_PRINTING = Printing(
    name="griselbrand",
    release_date="1990-01-01",
    set=CardSet(name="Griselbrand.com", code="Griselbrand.com"),
    set_number="1",
    is_digital=False,
    is_promo=False,
    image_uris=ImageUris(front="/avr-106-griselbrand.jpg"),
)


def augment(
    printings: Iterable[Printing],
    secondary: Iterable[Printing],
) -> list[Printing]:
    """
    Append the secondary source and the easter egg to the primary printings.

    Order here only matters for ties; the comparator decides where each
    printing ends up within its name group.
    """
    augmented = list(printings)
    augmented.extend(secondary)
    augmented.append(EASTER_EGG_PRINTING)
    return augmented
