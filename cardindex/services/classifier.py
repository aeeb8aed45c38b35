"""Inclusion rules for raw bulk records."""

from collections.abc import Iterable, Iterator

from cardindex.models.raw_card import RawRecord
from cardindex.services.rules import DEFAULT_RULES, ClassificationRules


def include(raw: RawRecord, rules: ClassificationRules = DEFAULT_RULES) -> bool:
    """
    Decide whether a raw record belongs in the index.

    Sets on the include list always pass. Everything else must be
    normal-sized (planes excepted) and clear every exclusion list.
    """
    set_code = raw.get("set")
    if set_code in rules.included_sets:
        return True

    layout = raw.get("layout")
    if raw.get("oversized") and layout != rules.oversized_allowed_layout:
        return False

    return (
        raw.get("set_type") not in rules.excluded_set_types
        and layout not in rules.excluded_layouts
        and set_code not in rules.excluded_sets
    )


def classify(
    records: Iterable[RawRecord],
    rules: ClassificationRules = DEFAULT_RULES,
) -> Iterator[RawRecord]:
    """Yield the records that pass include(), preserving order."""
    return (raw for raw in records if include(raw, rules))
