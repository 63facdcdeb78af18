"""File sink for generated pages and citation files."""

from __future__ import annotations

import logging
from pathlib import Path

LOGGER = logging.getLogger(__name__)


def output_exists(path: Path) -> bool:
    """Return True if an output file is already present at path.

    A file left half-written by an interrupted run also counts as present;
    it is only replaced when overwriting is requested.
    """
    return path.exists()


def write_output(path: Path, text: str, overwrite: bool = False) -> bool:
    """Write text to path unless it exists and overwrite is False.

    Returns:
        True if the file was written, False if it was skipped.
    """
    if output_exists(path) and not overwrite:
        LOGGER.info("Skipping existing file %s", path)
        return False

    with path.open("w", encoding="utf-8", newline="\n") as fh:
        fh.write(text)

    LOGGER.debug("Wrote %s", path)
    return True
