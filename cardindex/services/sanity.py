"""
Post-build sanity checks.

A handful of well-known cards are spot-checked against their expected
printings, and the index must be large enough to plausibly cover the
whole bulk export. A failed check blocks the write; it never warns and
continues.
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass

from cardindex.models.card_index import CardIndex
from cardindex.models.failure import IndexSanityError


@dataclass(frozen=True, slots=True)
class ExpectedPrinting:
    """Expected stored form of one printing. None flags are not checked."""

    s: str
    digital: bool | None = None
    promo: bool | None = None


@dataclass(frozen=True, slots=True)
class CardSpotCheck:
    """Expected printings of one card, in canonical order."""

    name: str
    printings: tuple[ExpectedPrinting, ...]
    front_pattern: str | None = None


DEFAULT_CARD_CHECKS: tuple[CardSpotCheck, ...] = (
    CardSpotCheck(
        name="abandon hope",
        printings=(ExpectedPrinting("tmp|107"),),
        front_pattern=r"api\.scryfall\.com.*$",
    ),
    CardSpotCheck(
        name="lightning dragon",
        printings=(
            ExpectedPrinting("pusg|202", digital=False, promo=True),
            ExpectedPrinting("usg|202", digital=False, promo=False),
            ExpectedPrinting("prm|32196", digital=True, promo=True),
            ExpectedPrinting("vma|177", digital=True, promo=False),
        ),
    ),
)

DEFAULT_SET_CHECKS: dict[str, str] = {"tmp": "Tempest"}


def _check_card(index: CardIndex, check: CardSpotCheck) -> list[str]:
    group = index.cards.get(check.name)
    if group is None:
        return [f"{check.name!r} missing from cards"]

    if len(group) != len(check.printings):
        return [f"{check.name!r} has {len(group)} printings, expected {len(check.printings)}"]

    failures: list[str] = []
    for position, (stored, expected) in enumerate(zip(group, check.printings, strict=True)):
        label = f"{check.name!r}[{position}]"
        if stored.get("s") != expected.s:
            failures.append(f"{label} is {stored.get('s')!r}, expected {expected.s!r}")
        if expected.digital is not None and ("d" in stored) != expected.digital:
            failures.append(f"{label} digital flag should be {expected.digital}")
        if expected.promo is not None and ("p" in stored) != expected.promo:
            failures.append(f"{label} promo flag should be {expected.promo}")

    if check.front_pattern and not re.search(check.front_pattern, group[0].get("f", "")):
        failures.append(f"{check.name!r}[0] front image does not match {check.front_pattern!r}")

    return failures


def verify_card_index(
    index: CardIndex,
    *,
    min_cards: int = 0,
    min_sets: int = 0,
    card_checks: Sequence[CardSpotCheck] = DEFAULT_CARD_CHECKS,
    set_checks: dict[str, str] | None = None,
) -> None:
    """
    Verify a built index before it is written.

    Args:
        index: Index to verify
        min_cards: Minimum number of distinct card names
        min_sets: Minimum number of distinct set codes
        card_checks: Cards to spot-check
        set_checks: Set code -> expected set name. Defaults to
            DEFAULT_SET_CHECKS

    Raises:
        IndexSanityError: Listing every failed check
    """
    if set_checks is None:
        set_checks = DEFAULT_SET_CHECKS

    failures: list[str] = []

    for check in card_checks:
        failures.extend(_check_card(index, check))

    for code, expected_name in set_checks.items():
        actual = index.sets.get(code)
        if actual != expected_name:
            failures.append(f"set {code!r} is {actual!r}, expected {expected_name!r}")

    card_count = index.distinct_cards()
    if card_count <= min_cards:
        failures.append(f"only {card_count} distinct cards, expected more than {min_cards}")
    set_count = index.distinct_sets()
    if set_count <= min_sets:
        failures.append(f"only {set_count} distinct sets, expected more than {min_sets}")

    if failures:
        raise IndexSanityError(failures)
