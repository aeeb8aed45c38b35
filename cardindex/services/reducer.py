"""
Collapsing reducer.

Folds sorted printings into the final CardIndex in one pass. Groups keep
append order, so the canonical sort must happen first.
"""

import logging
from collections.abc import Iterable

from cardindex.models.card_index import CardIndex, CompressedPrinting
from cardindex.models.failure import MalformedRecordError
from cardindex.models.printing import Printing
from cardindex.services.card_names import card_name_key

logger = logging.getLogger(__name__)


def compress(printing: Printing) -> CompressedPrinting:
    """
    Shrink a printing to its stored form.

    Unset flags and a missing back image are left out entirely rather
    than written as false or null.
    """
    compressed: CompressedPrinting = {"s": f"{printing.set.code}|{printing.set_number}"}
    if printing.is_digital:
        compressed["d"] = 1
    if printing.is_promo:
        compressed["p"] = 1
    if printing.is_multi_faced:
        compressed["m"] = 1
    compressed["f"] = printing.image_uris.front
    if printing.image_uris.back:
        compressed["b"] = printing.image_uris.back
    return compressed


def reduce_printings(printings: Iterable[Printing]) -> CardIndex:
    """
    Build the CardIndex from printings already in canonical order.

    Raises:
        MalformedRecordError: On the first printing that cannot be stored
    """
    index = CardIndex()

    for printing in printings:
        try:
            name = card_name_key(printing.name)
            index.cards.setdefault(name, []).append(compress(printing))
            index.sets[printing.set.code] = printing.set.name
        except (AttributeError, KeyError, TypeError) as e:
            logger.error("Failure during card: %r", printing)
            raise MalformedRecordError(printing, str(e)) from e

    return index
