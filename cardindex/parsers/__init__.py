from cardindex.parsers.scryfall import (
    download_bulk_data,
    ensure_bulk_data,
    get_bulk_data_url,
    load_raw_cards,
)
from cardindex.parsers.secondary import (
    SecondaryPrinting,
    load_secondary_printings,
    parse_secondary_printings,
)

__all__ = [
    "SecondaryPrinting",
    "download_bulk_data",
    "ensure_bulk_data",
    "get_bulk_data_url",
    "load_raw_cards",
    "load_secondary_printings",
    "parse_secondary_printings",
]
