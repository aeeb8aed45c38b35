"""
Card index pipeline.

raw records
    -> classify   (filter)
    -> expand     (flat-map reversible cards)
    -> project    (map to Printing)
    -> augment    (append secondary source and easter egg)
    -> sort       (canonical order)
    -> reduce     (fold into CardIndex)

Each stage is a plain function over an ordered sequence and can be run
on its own. The whole build is in memory; nothing is written here.
"""

import logging
from collections.abc import Iterable

from cardindex.models.card_index import CardIndex
from cardindex.models.printing import Printing
from cardindex.models.raw_card import RawRecord
from cardindex.services.augmenter import augment
from cardindex.services.classifier import classify
from cardindex.services.face_expander import expand_all
from cardindex.services.ordering import sort_printings
from cardindex.services.projector import project_all
from cardindex.services.reducer import reduce_printings
from cardindex.services.rules import DEFAULT_RULES, ClassificationRules

logger = logging.getLogger(__name__)


def build_printings(
    records: Iterable[RawRecord],
    rules: ClassificationRules = DEFAULT_RULES,
) -> list[Printing]:
    """Run classify, expand and project over the raw bulk records."""
    return list(project_all(expand_all(classify(records, rules)), rules))


def build_card_index(
    records: Iterable[RawRecord],
    secondary: Iterable[Printing] = (),
    rules: ClassificationRules = DEFAULT_RULES,
) -> CardIndex:
    """
    Build the CardIndex from raw bulk records.

    Args:
        records: Scryfall card objects from the bulk export
        secondary: Pre-normalized printings from the secondary source
        rules: Classification rule lists

    Returns:
        The complete index

    Raises:
        MalformedRecordError: If any record cannot be projected or stored
    """
    records = list(records)
    printings = build_printings(records, rules)
    logger.debug("Projected %d printings from %d raw records", len(printings), len(records))

    augmented = augment(printings, secondary)
    logger.debug("Sorting %d printings", len(augmented))

    index = reduce_printings(sort_printings(augmented))
    logger.info(
        "Found %d distinct cards from %d sets.",
        index.distinct_cards(),
        index.distinct_sets(),
    )
    return index
