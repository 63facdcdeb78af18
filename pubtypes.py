"""Publication category codes for the Hugo Academic theme."""

from __future__ import annotations

# 0 = Uncategorized, 1 = Conference paper, 2 = Journal article,
# 3 = Manuscript, 4 = Report, 5 = Book, 6 = Book section
PUBLICATION_TYPE_LABELS: dict[str, str] = {
    "0": "Uncategorized",
    "1": "Conference paper",
    "2": "Journal article",
    "3": "Manuscript",
    "4": "Report",
    "5": "Book",
    "6": "Book section",
}

UNCATEGORIZED = "0"

# Keys are lower-case: bibtexparser normalizes entry types that way.
_ENTRY_TYPE_CODES: dict[str, str] = {
    "article": "2",
    "article in press": "2",
    "inproceedings": "1",
    "proceedings": "1",
    "conference": "1",
    "conference paper": "1",
    "mastersthesis": "3",
    "phdthesis": "3",
    "manual": "4",
    "techreport": "4",
    "book": "5",
    "incollection": "6",
    "inbook": "6",
    "misc": UNCATEGORIZED,
}


def classify(entry_type: str | None) -> str:
    """Return the one-character category code for a BibTeX entry type.

    Matching ignores case and surrounding whitespace. Unknown types map to "0".
    """
    if not entry_type:
        return UNCATEGORIZED
    return _ENTRY_TYPE_CODES.get(entry_type.strip().lower(), UNCATEGORIZED)
