import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from cardindex.models.printing import CardSet, ImageUris, Printing

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_bulk_path() -> Path:
    return FIXTURES / "scryfall_sample.json"


@pytest.fixture
def sample_secondary_path() -> Path:
    return FIXTURES / "secondary_sample.json"


@pytest.fixture
def sample_cards(sample_bulk_path: Path) -> list[dict[str, Any]]:
    """Sample Scryfall bulk records."""
    with open(sample_bulk_path, encoding="utf-8") as f:
        cards: list[dict[str, Any]] = json.load(f)
    return cards


@pytest.fixture
def make_raw_card() -> Callable[..., dict[str, Any]]:
    """Factory for a minimal, includable raw card record."""

    def _make(**overrides: Any) -> dict[str, Any]:
        card: dict[str, Any] = {
            "id": "00000000-0000-0000-0000-000000000001",
            "oracle_id": "00000000-0000-0000-0000-0000000000aa",
            "name": "Shock",
            "set": "m19",
            "set_name": "Core Set 2019",
            "set_type": "core",
            "collector_number": "156",
            "released_at": "2018-07-13",
            "layout": "normal",
            "digital": False,
            "oversized": False,
            "promo": False,
        }
        card.update(overrides)
        return card

    return _make


@pytest.fixture
def make_printing() -> Callable[..., Printing]:
    """Factory for a Printing with sensible defaults."""

    def _make(
        name: str = "Shock",
        release_date: str = "2018-07-13",
        set_code: str = "m19",
        set_name: str = "Core Set 2019",
        set_number: str = "156",
        **overrides: Any,
    ) -> Printing:
        fields: dict[str, Any] = {
            "name": name,
            "release_date": release_date,
            "set": CardSet(name=set_name, code=set_code),
            "set_number": set_number,
            "image_uris": ImageUris(front=f"https://img.example/{set_code}/{set_number}"),
        }
        fields.update(overrides)
        return Printing(**fields)

    return _make
