from pathlib import Path

import pytest

from cardindex.models.failure import MalformedRecordError, MissingSourceError
from cardindex.parsers.secondary import (
    SecondaryPrinting,
    load_secondary_printings,
    parse_secondary_printings,
)


class TestLoadSecondaryPrintings:
    def test_loads_fixture(self, sample_secondary_path: Path) -> None:
        printings = load_secondary_printings(sample_secondary_path)

        assert [p.name for p in printings] == [
            "Mickey Mouse - Brave Little Tailor",
            "Elsa - Spirit of Winter",
        ]
        elsa = printings[1]
        assert elsa.release_date == "2023-08-18"
        assert elsa.set.code == "lorcana-tfc"
        assert elsa.set.name == "The First Chapter"
        assert elsa.set_number == "42"
        assert elsa.is_promo is True
        assert elsa.is_digital is False
        assert elsa.image_uris.back is None
        assert elsa.oracle_name is None

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(MissingSourceError, match="not found"):
            load_secondary_printings(tmp_path / "missing.json")


class TestParseSecondaryPrintings:
    def test_optional_fields(self) -> None:
        payload = (
            '[{"name": "Stitch - Rock Star", "releaseDate": "2023-08-18",'
            ' "set": {"name": "The First Chapter", "code": "lorcana-tfc"},'
            ' "setNumber": "23", "imageUris": {"front": "f.webp", "back": "b.webp"},'
            ' "oracleName": "Stitch - Rock Star"}]'
        )

        (printing,) = parse_secondary_printings(payload)

        assert printing.is_digital is False
        assert printing.is_promo is False
        assert printing.image_uris.back == "b.webp"
        assert printing.oracle_name == "Stitch - Rock Star"

    def test_missing_field_names_entry(self) -> None:
        payload = '[{"name": "No Set", "releaseDate": "2023-08-18", "setNumber": "1"}]'

        with pytest.raises(MalformedRecordError, match="secondary entry 0"):
            parse_secondary_printings(payload)

    def test_empty_set_code_rejected(self) -> None:
        payload = (
            '[{"name": "Blank", "releaseDate": "2023-08-18", "set": {"name": "X", "code": ""},'
            ' "setNumber": "1", "imageUris": {"front": "f"}}]'
        )

        with pytest.raises(MalformedRecordError):
            parse_secondary_printings(payload)

    def test_not_a_list(self) -> None:
        with pytest.raises(MalformedRecordError, match="not a list"):
            parse_secondary_printings('{"name": "Lonely"}')


class TestSecondaryPrinting:
    def test_accepts_field_names(self) -> None:
        record = SecondaryPrinting(
            name="Elsa - Spirit of Winter",
            release_date="2023-08-18",
            set={"name": "The First Chapter", "code": "lorcana-tfc"},
            set_number="42",
            image_uris={"front": "f.webp"},
        )

        assert record.to_printing().set_number == "42"
