"""Shared typed models for the converter."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class BibRecord:
    """One bibliography entry as loaded from the .bib file.

    ``fields`` holds the raw BibTeX field values keyed by lower-case field
    name. Records are never mutated after loading.
    """

    key: str
    entry_type: str
    fields: Mapping[str, str] = field(default_factory=dict)

    def get(self, name: str) -> str | None:
        """Return the stripped field value, or None if absent or blank."""
        value = self.fields.get(name)
        if not isinstance(value, str):
            return None
        value = value.strip()
        return value or None


@dataclass(slots=True)
class ConversionStats:
    """Per-run counters reported by the batch driver."""

    total: int = 0
    md_written: int = 0
    md_skipped: int = 0
    bib_written: int = 0
    bib_skipped: int = 0
