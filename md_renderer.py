"""Render one BibRecord as a Hugo Academic publication page."""

from __future__ import annotations

import re

from models import BibRecord
from text_clean import clean_str, split_names

FRONT_MATTER_DELIMITER = "+++"
UNDATED = "2999-01-01"
FRAGMENT_SEPARATOR = ", "
_PATH_SEPARATOR_RE = re.compile(r"[\\/]")

# Each group fires only when its first field is present; the remaining
# fragments are then appended for whichever of their fields are present.
BOOKTITLE_FRAGMENTS: tuple[tuple[str, str], ...] = (
    ("booktitle", "In: {}"),
    ("publisher", "{}"),
    ("address", "{}"),
    ("pages", "_pp. {}_"),
)
JOURNAL_FRAGMENTS: tuple[tuple[str, str], ...] = (
    ("journal", "In: {}"),
    ("volume", "({})"),
    ("number", "{}"),
    ("pages", "_pp. {}_"),
    ("doi", "https://doi.org/{}"),
    ("url", "{}"),
)
PUBLICATION_GROUPS = (BOOKTITLE_FRAGMENTS, JOURNAL_FRAGMENTS)

URL_FIELDS = (
    "url_pdf",
    "url_preprint",
    "url_code",
    "url_dataset",
    "url_project",
    "url_slides",
    "url_video",
    "url_poster",
    "url_source",
)


def document_date(record: BibRecord) -> str:
    """Return "{year}-01-01", or the far-future placeholder when undated."""
    year = record.get("year")
    return f"{year}-01-01" if year else UNDATED


def output_stem(record: BibRecord) -> str:
    """File name without extension, shared by the .md and .bib outputs.

    Path separators in the citation key are replaced so every output stays
    inside its folder.
    """
    key = _PATH_SEPARATOR_RE.sub("_", record.key)
    return f"{document_date(record)}_{key}"


def publication_fragments(record: BibRecord) -> list[str]:
    """Return the cleaned pieces of the publication summary, in order."""
    fragments: list[str] = []
    for group in PUBLICATION_GROUPS:
        head_field = group[0][0]
        if record.get(head_field) is None:
            continue
        for name, template in group:
            value = record.get(name)
            if value is not None:
                fragments.append(template.format(clean_str(value)))
    return fragments


def compose_publication(record: BibRecord) -> str:
    return FRAGMENT_SEPARATOR.join(publication_fragments(record))


def _quoted(value: str) -> str:
    return f'"{value}"'


def _array(values: list[str]) -> str:
    return "[" + ", ".join(_quoted(v) for v in values) + "]"


def contributor_line(record: BibRecord) -> str | None:
    """Authors take precedence over editors; None when neither is set."""
    authors = split_names(record.get("author"))
    if authors:
        return f"authors = {_array(authors)}"
    editors = split_names(record.get("editor"))
    if editors:
        return f"editors = {_array(editors)}"
    return None


def render_document(record: BibRecord, pub_type: str, include_abstract: bool = True) -> str:
    """Build the full Markdown document (front matter only) for a record.

    Args:
        record: The bibliography entry.
        pub_type: Category code from pubtypes.classify.
        include_abstract: Copy the abstract field into the page when present.
    """
    lines = [
        FRONT_MATTER_DELIMITER,
        f"title = {_quoted(clean_str(record.get('title')))}",
        f"date = {_quoted(document_date(record))}",
        f"publication_types = {_array([pub_type])}",
    ]

    contributors = contributor_line(record)
    if contributors is not None:
        lines.append(contributors)

    lines.append(f"publication = {_quoted(compose_publication(record))}")

    abstract = clean_str(record.get("abstract")) if include_abstract else ""
    lines.append(f"abstract = {_quoted(abstract)}")
    lines.append('abstract_short = ""')

    lines.extend([
        'image_preview = ""',
        "selected = false",
        "projects = []",
        "tags = []",
    ])
    # Links are left empty for manual editing.
    lines.extend(f'{name} = ""' for name in URL_FIELDS)
    lines.extend([
        "math = true",
        "highlight = true",
        "[header]",
        'image = ""',
        'caption = ""',
        FRONT_MATTER_DELIMITER,
    ])
    return "\n".join(lines) + "\n"
