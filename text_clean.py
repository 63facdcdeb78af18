"""String cleaning for values embedded in TOML front matter."""

from __future__ import annotations

import re
import unicodedata

_WHITESPACE_RE = re.compile(r"\s+")

NAME_SEPARATOR = " and "

# Latin letters with no canonical decomposition into base letter + accent.
_LATIN_EXTRAS = str.maketrans({
    "ß": "ss",
    "æ": "ae",
    "Æ": "AE",
    "œ": "oe",
    "Œ": "OE",
    "ø": "o",
    "Ø": "O",
    "ł": "l",
    "Ł": "L",
    "đ": "d",
    "Đ": "D",
    "ð": "d",
    "Ð": "D",
    "þ": "th",
    "Þ": "TH",
    "ı": "i",
})


def squish(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim both ends."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def clean_str(text: str | None) -> str:
    """Make free text safe for a double-quoted front-matter value.

    Backslashes are doubled first so the quote escaping below does not get
    doubled again. Braces left over from BibTeX are dropped.
    """
    if not text:
        return ""
    text = text.replace("\\", "\\\\")
    text = text.replace("{", "").replace("}", "")
    text = text.replace('"', '\\"')
    return squish(text)


def _is_latin(ch: str) -> bool:
    return unicodedata.name(ch, "").startswith("LATIN")


def to_ascii(text: str) -> str:
    """Transliterate accented Latin characters to plain ASCII letters.

    Only marks sitting on a Latin base letter are dropped; other scripts and
    compatibility characters pass through unchanged.
    """
    text = unicodedata.normalize("NFC", text).translate(_LATIN_EXTRAS)
    out: list[str] = []
    latin_base = False
    for ch in text:
        if unicodedata.category(ch) == "Mn":
            # Stray combining mark left over after NFC.
            if not latin_base:
                out.append(ch)
            continue
        decomposed = unicodedata.normalize("NFD", ch)
        latin_base = _is_latin(decomposed[0])
        if latin_base:
            out.extend(c for c in decomposed if unicodedata.category(c) != "Mn")
        else:
            out.append(ch)
    return "".join(out)


def split_names(raw: str | None) -> list[str]:
    """Split a BibTeX name list ("A and B") into cleaned ASCII names."""
    if not raw:
        return []
    names = squish(raw).split(NAME_SEPARATOR)
    return [cleaned for cleaned in (clean_str(to_ascii(name)) for name in names) if cleaned]
