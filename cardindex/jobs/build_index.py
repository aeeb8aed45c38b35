"""
Build the minimized card index.

Fetches (or reuses) the Scryfall bulk export, runs the index pipeline,
checks the result and writes it. Nothing is written unless every step
succeeds.

Usage:
    python -m cardindex.jobs.build_index --data-dir data
"""

import argparse
import logging
from pathlib import Path

import httpx

from cardindex.config import settings
from cardindex.models.card_index import CardIndex
from cardindex.models.failure import KnownError
from cardindex.parsers.scryfall import ensure_bulk_data, load_raw_cards
from cardindex.parsers.secondary import load_secondary_printings
from cardindex.services.index_writer import write_card_index
from cardindex.services.pipeline import build_card_index
from cardindex.services.sanity import verify_card_index

logger = logging.getLogger(__name__)


def run_build(
    data_dir: Path,
    output_path: Path,
    *,
    secondary_path: Path | None,
    force_download: bool = False,
    offline: bool = False,
    sanity_checks: bool = True,
) -> CardIndex:
    """
    Run a full index build.

    Args:
        data_dir: Directory holding the cached bulk data
        output_path: Where to write the index
        secondary_path: Secondary printings file, or None to skip it
        force_download: Re-download the bulk data even if cached
        offline: Never download; fail if the bulk data is not cached
        sanity_checks: Verify the index before writing it

    Returns:
        The index that was written

    Raises:
        KnownError: On any classified failure
        httpx.HTTPError: On an unclassified transport failure
    """
    raw_path = data_dir / settings.raw_cards_filename
    if not offline:
        ensure_bulk_data(raw_path, force=force_download)

    records = load_raw_cards(raw_path)
    secondary = load_secondary_printings(secondary_path) if secondary_path else []

    index = build_card_index(records, secondary)

    if sanity_checks:
        verify_card_index(
            index,
            min_cards=settings.min_distinct_cards,
            min_sets=settings.min_distinct_sets,
        )

    write_card_index(index, output_path)
    return index


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint for building the card index."""
    parser = argparse.ArgumentParser(description="Build the minimized card index")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=settings.data_dir,
        help=f"Directory for cached bulk data (default: {settings.data_dir})",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Index file to write (default: <data-dir>/" + settings.output_filename + ")",
    )
    secondary = parser.add_mutually_exclusive_group()
    secondary.add_argument(
        "--secondary",
        type=Path,
        default=None,
        help="Secondary printings file (default: <data-dir>/"
        + settings.secondary_cards_filename
        + ")",
    )
    secondary.add_argument(
        "--no-secondary",
        action="store_true",
        help="Build without the secondary printings file",
    )
    download = parser.add_mutually_exclusive_group()
    download.add_argument(
        "--force-download",
        action="store_true",
        help="Re-download bulk data even if cached",
    )
    download.add_argument(
        "--offline",
        action="store_true",
        help="Never download; use the cached bulk data only",
    )
    parser.add_argument(
        "--skip-sanity-checks",
        action="store_true",
        help="Write the index without the post-build checks",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose or settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    data_dir: Path = args.data_dir
    output_path: Path = args.output or data_dir / settings.output_filename
    secondary_path: Path | None = None
    if not args.no_secondary:
        secondary_path = args.secondary or data_dir / settings.secondary_cards_filename

    try:
        run_build(
            data_dir,
            output_path,
            secondary_path=secondary_path,
            force_download=args.force_download,
            offline=args.offline,
            sanity_checks=not args.skip_sanity_checks,
        )
    except KnownError as e:
        logger.error("Index build failed: %s", e.to_detail().model_dump_json(exclude_none=True))
        return 1
    except httpx.HTTPError as e:
        logger.error("Index build failed: %s", e)
        return 1

    logger.info("Finished writing minimized card list.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
