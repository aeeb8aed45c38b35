from collections.abc import Callable
from itertools import permutations

from cardindex.models.printing import Printing
from cardindex.services.ordering import (
    NO_NUMBER,
    UNPARSEABLE_DATE,
    collector_number_value,
    compare_printings,
    date_ordinal,
    sort_printings,
)

PrintingFactory = Callable[..., Printing]


class TestDateOrdinal:
    def test_valid_dates_ordered(self) -> None:
        assert date_ordinal("1997-10-14") < date_ordinal("1998-10-12")

    def test_unparseable_date_sentinel(self) -> None:
        assert date_ordinal("not a date") == UNPARSEABLE_DATE
        assert date_ordinal("") == UNPARSEABLE_DATE
        assert date_ordinal(None) == UNPARSEABLE_DATE

    def test_trailing_text_is_unparseable(self) -> None:
        assert date_ordinal("2020-01-01garbage") == UNPARSEABLE_DATE

    def test_sentinel_below_every_date(self) -> None:
        assert UNPARSEABLE_DATE < date_ordinal("0001-01-01")


class TestCollectorNumberValue:
    def test_plain_number(self) -> None:
        assert collector_number_value("107") == 107

    def test_suffix_stripped(self) -> None:
        assert collector_number_value("218a") == 218

    def test_only_first_non_digit_dropped(self) -> None:
        assert collector_number_value("7ED-67") == 7
        assert collector_number_value("M19-25") == 19

    def test_leading_symbol_dropped(self) -> None:
        assert collector_number_value("★12") == 12

    def test_no_digits(self) -> None:
        assert collector_number_value("★") == NO_NUMBER
        assert collector_number_value("") == NO_NUMBER


class TestComparePrintings:
    def test_earlier_date_first(self, make_printing: PrintingFactory) -> None:
        old = make_printing(release_date="1997-10-14", set_number="300")
        new = make_printing(release_date="2020-01-01", set_number="1")

        assert compare_printings(old, new) == -1
        assert compare_printings(new, old) == 1

    def test_numeric_before_lexical(self, make_printing: PrintingFactory) -> None:
        """"60" sorts before "218a" even though it is lexically larger."""
        a = make_printing(set_number="60")
        b = make_printing(set_number="218a")

        assert compare_printings(a, b) == -1
        assert compare_printings(b, a) == 1

    def test_lexical_fallback(self, make_printing: PrintingFactory) -> None:
        a = make_printing(set_number="218a")
        b = make_printing(set_number="218b")

        assert compare_printings(a, b) == -1
        assert compare_printings(b, a) == 1

    def test_exact_tie(self, make_printing: PrintingFactory) -> None:
        a = make_printing(set_code="pusg")
        b = make_printing(set_code="usg")

        assert compare_printings(a, b) == 0
        assert compare_printings(b, a) == 0

    def test_unparseable_date_does_not_raise(self, make_printing: PrintingFactory) -> None:
        bad = make_printing(release_date="someday")
        good = make_printing(release_date="1993-08-05")

        assert compare_printings(bad, good) == -1
        assert compare_printings(good, bad) == 1

    def test_non_numeric_numbers_fall_back_to_lexical(
        self, make_printing: PrintingFactory
    ) -> None:
        a = make_printing(set_number="★")
        b = make_printing(set_number="☆")

        assert compare_printings(a, b) == -1
        assert compare_printings(b, a) == 1


class TestSortPrintings:
    def test_total_order(self, make_printing: PrintingFactory) -> None:
        printings = [
            make_printing(release_date="2014-06-16", set_number="177"),
            make_printing(release_date="1998-10-12", set_number="218a"),
            make_printing(release_date="1998-10-12", set_number="60"),
            make_printing(release_date="1998-10-12", set_number="218"),
            make_printing(release_date="bogus", set_number="1"),
        ]
        expected = [
            ("bogus", "1"),
            ("1998-10-12", "60"),
            ("1998-10-12", "218"),
            ("1998-10-12", "218a"),
            ("2014-06-16", "177"),
        ]

        for ordering in permutations(printings):
            result = [(p.release_date, p.set_number) for p in sort_printings(ordering)]
            assert result == expected

    def test_ties_keep_input_order(self, make_printing: PrintingFactory) -> None:
        first = make_printing(set_code="pusg")
        second = make_printing(set_code="usg")

        assert sort_printings([first, second]) == [first, second]
        assert sort_printings([second, first]) == [second, first]
