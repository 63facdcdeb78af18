import pytest

from text_clean import clean_str, split_names, squish, to_ascii


def test_clean_str_doubles_backslashes() -> None:
    assert clean_str(r"Tom \& Jerry") == r"Tom \\& Jerry"


def test_clean_str_removes_braces() -> None:
    assert clean_str("{Deep} {L}earning for {GPU}s") == "Deep Learning for GPUs"


def test_clean_str_escapes_quotes() -> None:
    assert clean_str('The "best" paper') == 'The \\"best\\" paper'


def test_clean_str_escapes_backslash_before_quote() -> None:
    """A backslash next to a quote must not be confused with the quote escape."""
    assert clean_str('a\\"b') == 'a\\\\\\"b'


def test_clean_str_collapses_whitespace() -> None:
    text = "  First line\n\n   second\tline   "
    assert clean_str(text) == "First line second line"


@pytest.mark.parametrize("text", [None, "", "   \n\t"])
def test_clean_str_blank_input_returns_empty(text: str | None) -> None:
    assert clean_str(text) == ""


def test_clean_str_mixed_input_properties() -> None:
    raw = '{A}\\b "c"\n\n  {d}  \\e  '
    cleaned = clean_str(raw)

    assert "{" not in cleaned and "}" not in cleaned
    assert cleaned.count("\\\\") == 2
    assert cleaned.count('\\"') == 2
    assert "  " not in cleaned
    assert cleaned == cleaned.strip()


def test_squish_only_touches_whitespace() -> None:
    assert squish(' a {b}\n "c" ') == 'a {b} "c"'


@pytest.mark.parametrize("raw, expected", [
    ("José Müller", "Jose Muller"),
    ("Ångström", "Angstrom"),
    ("Łukasz Żółć", "Lukasz Zolc"),
    ("Søren Kierkegaard", "Soren Kierkegaard"),
    ("Strauß", "Strauss"),
    ("Plain Name", "Plain Name"),
])
def test_to_ascii_transliterates_latin(raw: str, expected: str) -> None:
    assert to_ascii(raw) == expected


def test_split_names_on_and_separator() -> None:
    assert split_names("Smith, John and Doe, Jane") == ["Smith, John", "Doe, Jane"]


def test_split_names_squishes_before_splitting() -> None:
    assert split_names("Smith, John\n    and  Doe, Jane") == ["Smith, John", "Doe, Jane"]


def test_split_names_keeps_and_inside_names() -> None:
    assert split_names("Anderson, Alan and Sandler, Andy") == ["Anderson, Alan", "Sandler, Andy"]


def test_split_names_transliterates_and_cleans() -> None:
    assert split_names('Müller, {J}ürgen and O"Brien, Pat') == ["Muller, Jurgen", 'O\\"Brien, Pat']


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_split_names_blank_returns_empty_list(raw: str | None) -> None:
    assert split_names(raw) == []


@pytest.mark.parametrize("raw", [
    "Йорк, Иван",
    "がくせい",
    "हिंदी",
    "Ελένη Παπαδοπούλου",
    "محمد",
    "ﬁnance²",
])
def test_to_ascii_leaves_other_scripts_untouched(raw: str) -> None:
    assert to_ascii(raw) == raw


def test_to_ascii_mixed_scripts_only_strips_latin_accents() -> None:
    assert to_ascii("José Йорк") == "Jose Йорк"


def test_to_ascii_drops_stray_mark_on_latin_letter() -> None:
    # "q" + combining tilde has no precomposed form.
    assert to_ascii("Maq̃") == "Maq"


def test_split_names_keeps_cyrillic_names() -> None:
    assert split_names("Йорк, Иван and Müller, Hans") == ["Йорк, Иван", "Muller, Hans"]
