"""Serialization of the finished card index."""

import json
import logging
import os
import tempfile
from pathlib import Path

from cardindex.models.card_index import CardIndex

logger = logging.getLogger(__name__)


def serialize_card_index(index: CardIndex) -> str:
    """Render the index as JSON. Same index in, same text out."""
    return json.dumps(index.to_dict(), indent=2, ensure_ascii=False)


def write_card_index(index: CardIndex, output_path: Path) -> Path:
    """
    Write the index to disk.

    The JSON is written to a temporary file next to the target and then
    renamed over it, so readers never see a half-written artifact.

    Args:
        index: Fully built index
        output_path: Destination file

    Returns:
        Path to the written file
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = serialize_card_index(index)

    fd, tmp_name = tempfile.mkstemp(
        dir=output_path.parent,
        prefix=f".{output_path.name}.",
        suffix=".tmp",
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(payload)
        os.replace(tmp_name, output_path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise

    logger.info("Wrote card index to %s", output_path)
    return output_path
