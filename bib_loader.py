"""Bibliography input: path validation and BibTeX parsing."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import bibtexparser
from bibtexparser.bparser import BibTexParser
from bibtexparser.customization import convert_to_unicode

from models import BibRecord

LOGGER = logging.getLogger(__name__)

MISSING_INPUT_MESSAGE = "You must specify a .bib file as input for the conversion."


class MissingInputError(ValueError):
    """Raised when no bibliography path was supplied."""


def resolve_bibfile(bibfile: str | Path | None) -> Path:
    """Validate the user-supplied bibliography path.

    Raises:
        MissingInputError: bibfile is empty or None.
        FileNotFoundError: bibfile does not point to an existing file.
    """
    if bibfile is None or not str(bibfile).strip():
        raise MissingInputError(MISSING_INPUT_MESSAGE)

    path = Path(bibfile)
    if not path.is_file():
        raise FileNotFoundError(f"Cannot find file '{bibfile}'. Check path and/or file name.")
    return path


def load_records(path: Path) -> list[BibRecord]:
    """Parse a .bib file into BibRecords, preserving file order."""
    parser = BibTexParser(common_strings=True)
    parser.customization = convert_to_unicode
    parser.ignore_nonstandard_types = False

    with path.open(encoding="utf-8") as fh:
        bib_db = bibtexparser.load(fh, parser=parser)

    records = [_to_record(entry) for entry in bib_db.entries]
    LOGGER.info("Loaded %s records from %s", len(records), path)
    return records


def _to_record(entry: dict[str, Any]) -> BibRecord:
    fields = {
        name.lower(): value
        for name, value in entry.items()
        if name not in ("ID", "ENTRYTYPE") and isinstance(value, str)
    }
    return BibRecord(
        key=entry.get("ID", ""),
        entry_type=entry.get("ENTRYTYPE", ""),
        fields=fields,
    )
