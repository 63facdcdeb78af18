"""Per-entry BibTeX export used for the theme's "cite" button."""

from __future__ import annotations

from typing import Any

from bibtexparser.bibdatabase import BibDatabase
from bibtexparser.bwriter import BibTexWriter

from models import BibRecord

# Name of the derived category field; it must never leak into an export.
CATEGORY_FIELD = "pubtype"


def to_citation_fields(record: BibRecord) -> dict[str, Any]:
    """Return a bibtexparser entry dict for the record, category excluded."""
    entry: dict[str, Any] = {
        name: value
        for name, value in record.fields.items()
        if name != CATEGORY_FIELD
    }
    entry["ENTRYTYPE"] = record.entry_type
    entry["ID"] = record.key
    return entry


def render_bibtex(record: BibRecord) -> str:
    """Serialize a single record as a standalone BibTeX document."""
    db = BibDatabase()
    db.entries = [to_citation_fields(record)]

    writer = BibTexWriter()
    writer.indent = "  "
    writer.order_entries_by = None
    return writer.write(db)
