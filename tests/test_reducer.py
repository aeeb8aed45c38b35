from collections.abc import Callable
from types import SimpleNamespace

import pytest

from cardindex.models.failure import MalformedRecordError
from cardindex.models.printing import ImageUris, Printing
from cardindex.services.reducer import compress, reduce_printings

PrintingFactory = Callable[..., Printing]


class TestCompress:
    def test_minimal_form(self, make_printing: PrintingFactory) -> None:
        compressed = compress(make_printing())

        assert compressed == {"s": "m19|156", "f": "https://img.example/m19/156"}

    def test_flags_set_to_one(self, make_printing: PrintingFactory) -> None:
        printing = make_printing(
            is_digital=True,
            is_promo=True,
            oracle_name="Delver of Secrets // Insectile Aberration",
        )

        compressed = compress(printing)

        assert compressed["d"] == 1
        assert compressed["p"] == 1
        assert compressed["m"] == 1

    def test_unset_flags_absent(self, make_printing: PrintingFactory) -> None:
        printing = make_printing(oracle_name="Shock")

        compressed = compress(printing)

        for key in ("d", "p", "m", "b"):
            assert key not in compressed

    def test_back_image(self, make_printing: PrintingFactory) -> None:
        printing = make_printing(image_uris=ImageUris(front="front.jpg", back="back.jpg"))

        compressed = compress(printing)

        assert compressed["f"] == "front.jpg"
        assert compressed["b"] == "back.jpg"


class TestReducePrintings:
    def test_groups_by_lower_cased_name(self, make_printing: PrintingFactory) -> None:
        printings = [
            make_printing(name="Shock", set_code="m19", set_number="156"),
            make_printing(name="SHOCK", set_code="m20", set_name="Core Set 2020"),
        ]

        index = reduce_printings(printings)

        assert list(index.cards) == ["shock"]
        assert [p["s"] for p in index.cards["shock"]] == ["m19|156", "m20|156"]

    def test_preserves_input_order(self, make_printing: PrintingFactory) -> None:
        printings = [make_printing(set_number=n) for n in ("9", "1", "5")]

        index = reduce_printings(printings)

        assert [p["s"] for p in index.cards["shock"]] == ["m19|9", "m19|1", "m19|5"]

    def test_builds_set_map(self, make_printing: PrintingFactory) -> None:
        printings = [
            make_printing(name="Abandon Hope", set_code="tmp", set_name="Tempest"),
            make_printing(name="Shock", set_code="m19"),
            make_printing(name="Opt", set_code="m19"),
        ]

        index = reduce_printings(printings)

        assert index.sets == {"tmp": "Tempest", "m19": "Core Set 2019"}

    def test_empty_input(self) -> None:
        index = reduce_printings([])

        assert index.cards == {}
        assert index.sets == {}

    def test_broken_record_is_fatal(self, make_printing: PrintingFactory) -> None:
        broken = SimpleNamespace(name="Broken Card", set_number="1")

        with pytest.raises(MalformedRecordError, match="Broken Card"):
            reduce_printings([make_printing(), broken])  # type: ignore[list-item]
