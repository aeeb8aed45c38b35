"""
Scryfall bulk data loader.

Downloads Scryfall's bulk card export and reads it back as raw records
for the index build. The download is cached on disk; an existing file is
reused until a fresh download is forced.

Bulk data: https://scryfall.com/docs/api/bulk-data
"""

import json
import logging
import os
from pathlib import Path

import httpx

from cardindex.config import settings
from cardindex.models.failure import BulkDataError, MissingSourceError
from cardindex.models.raw_card import RawRecord

logger = logging.getLogger(__name__)


def _headers() -> dict[str, str]:
    return {"User-Agent": settings.user_agent, "Accept": "application/json"}


def get_bulk_data_url(client: httpx.Client, bulk_type: str | None = None) -> str:
    """
    Fetch the download URL for one of Scryfall's bulk data files.

    Args:
        client: HTTP client to use
        bulk_type: Bulk data type. Defaults to settings.bulk_data_type

    Returns:
        URL to download the bulk JSON file

    Raises:
        BulkDataError: If the listing request fails or has no such type
    """
    bulk_type = bulk_type or settings.bulk_data_type

    try:
        response = client.get(settings.bulk_data_api, headers=_headers())
        response.raise_for_status()
        data = response.json()
    except httpx.HTTPStatusError as e:
        raise BulkDataError(
            f"Failed to list bulk data: HTTP {e.response.status_code}",
            detail=settings.bulk_data_api,
        ) from e
    except httpx.RequestError as e:
        raise BulkDataError(f"Failed to list bulk data: {e}") from e

    for entry in data.get("data", []):
        if entry.get("type") == bulk_type:
            return str(entry["download_uri"])

    raise BulkDataError(f"Could not find {bulk_type} bulk data URL")


def download_bulk_data(output_path: Path, bulk_type: str | None = None) -> Path:
    """
    Download Scryfall bulk data to a file.

    Streams into a temporary file beside output_path and renames it on
    success, so an interrupted download never looks like a cached one.

    Args:
        output_path: Where to save the JSON file
        bulk_type: Bulk data type. Defaults to settings.bulk_data_type

    Returns:
        Path to the downloaded file

    Raises:
        BulkDataError: If the listing or the download fails

    Note:
        The default-cards file is several hundred MB.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    partial_path = output_path.with_name(output_path.name + ".part")

    with httpx.Client(timeout=settings.request_timeout, follow_redirects=True) as client:
        url = get_bulk_data_url(client, bulk_type)
        logger.info("Download uri: %s", url)

        try:
            with client.stream(
                "GET",
                url,
                headers=_headers(),
                timeout=settings.download_timeout,
            ) as response:
                response.raise_for_status()
                with open(partial_path, "wb") as f:
                    for chunk in response.iter_bytes(chunk_size=8192):
                        f.write(chunk)
        except httpx.HTTPStatusError as e:
            partial_path.unlink(missing_ok=True)
            raise BulkDataError(
                f"Failed to download bulk data: HTTP {e.response.status_code}",
                detail=url,
            ) from e
        except httpx.RequestError as e:
            partial_path.unlink(missing_ok=True)
            raise BulkDataError(f"Failed to download bulk data: {e}", detail=url) from e

    os.replace(partial_path, output_path)
    logger.info("Finished writing bulk data to %s", output_path)
    return output_path


def ensure_bulk_data(path: Path, *, force: bool = False) -> Path:
    """
    Return a local copy of the bulk data, downloading it if needed.

    Args:
        path: Cache location of the bulk JSON file
        force: If True, re-download even if the file exists

    Returns:
        Path to the bulk JSON file
    """
    if path.exists() and not force:
        logger.info("Using existing card data at %s", path)
        return path

    logger.info("Downloading fresh card data.")
    return download_bulk_data(path)


def load_raw_cards(path: Path) -> list[RawRecord]:
    """
    Load raw card records from a bulk JSON file.

    Args:
        path: Path to downloaded Scryfall bulk JSON

    Returns:
        List of card objects, in file order

    Raises:
        MissingSourceError: If the file doesn't exist
        BulkDataError: If the file is not a JSON array
    """
    if not path.exists():
        raise MissingSourceError(
            path,
            suggestion="Run the build job without --offline to download it.",
        )

    with open(path, encoding="utf-8") as f:
        try:
            cards = json.load(f)
        except json.JSONDecodeError as e:
            raise BulkDataError(f"Bulk data at {path} is not valid JSON", detail=str(e)) from e

    if not isinstance(cards, list):
        raise BulkDataError(f"Bulk data at {path} is not a JSON array")

    logger.info("Loaded %d raw card records from %s", len(cards), path)
    return cards
