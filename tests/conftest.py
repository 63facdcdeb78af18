from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE_BIB = """\
@article{smith20,
  author = {Smith, John and Doe, Jane},
  title = {A Study of Things},
  journal = {Journal of Stuff},
  volume = {3},
  pages = {1--10},
  year = {2020},
  abstract = {We study things.
    At length.}
}

@inproceedings{lee19,
  author = {Lee, Kim},
  title = {Conference Findings},
  booktitle = {Proceedings of the Meeting},
  publisher = {ACM},
  year = {2019}
}

@book{noyear,
  editor = {Brown, Alice},
  title = {An Undated Book}
}

@misc{anon,
  title = {Untitled Note}
}
"""


@pytest.fixture
def bib_file(tmp_path: Path) -> Path:
    """Write a small four-entry bibliography into the test's temp dir."""
    path = tmp_path / "publications.bib"
    path.write_text(SAMPLE_BIB, encoding="utf-8")
    return path
