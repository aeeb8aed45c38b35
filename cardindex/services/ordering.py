"""
Canonical ordering of printings.

Printings are ordered by release date, then by the numeric part of the
collector number, then by the collector number as a string. Collector
numbers are not integers ("218a", "★12"), so a plain string sort puts
"218a" before "60" and a plain integer sort cannot parse them at all.

Neither key ever raises:
- Dates that do not parse as ISO dates get UNPARSEABLE_DATE, which sorts
  before every real date.
- Collector numbers that do not lead with digits (once the first non-digit
  is dropped) get NO_NUMBER, which sorts before every numbered printing.
"""

import re
from collections.abc import Iterable
from datetime import date
from functools import cmp_to_key
from typing import TypeVar

from cardindex.models.printing import Printing

_Key = TypeVar("_Key", int, str)

UNPARSEABLE_DATE = -1
NO_NUMBER = -1

_NON_DIGIT = re.compile(r"[^0-9]")
_LEADING_DIGITS = re.compile(r"^[0-9]+")


def date_ordinal(value: str | None) -> int:
    """Proleptic ordinal of an ISO date, or UNPARSEABLE_DATE."""
    if not value:
        return UNPARSEABLE_DATE
    try:
        return date.fromisoformat(value).toordinal()
    except ValueError:
        return UNPARSEABLE_DATE


def collector_number_value(set_number: str) -> int:
    """
    Numeric part of a collector number.

    The first non-digit character is dropped and the leading run of digits
    that remains is the value, so "218a" and "M19-25" read as 218 and 19.

    >>> collector_number_value("218a")
    218
    >>> collector_number_value("M19-25")
    19
    >>> collector_number_value("★")
    -1
    """
    match = _LEADING_DIGITS.match(_NON_DIGIT.sub("", set_number, count=1))
    return int(match.group()) if match else NO_NUMBER


def _sign(a: _Key, b: _Key) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def compare_printings(a: Printing, b: Printing) -> int:
    """
    Three-way comparison of two printings.

    Returns:
        -1 if a sorts first, 1 if b sorts first, 0 on an exact tie
    """
    result = _sign(date_ordinal(a.release_date), date_ordinal(b.release_date))
    if result:
        return result

    result = _sign(collector_number_value(a.set_number), collector_number_value(b.set_number))
    if result:
        return result

    return _sign(a.set_number, b.set_number)


def sort_printings(printings: Iterable[Printing]) -> list[Printing]:
    """
    Sort printings into canonical order.

    The sort is stable, so exact ties keep their input order.
    """
    return sorted(printings, key=cmp_to_key(compare_printings))
