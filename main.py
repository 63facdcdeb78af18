"""CLI entrypoint: convert a .bib file into Hugo Academic publication pages."""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from bib_export import render_bibtex
from bib_loader import MissingInputError, load_records, resolve_bibfile
from file_sink import output_exists, write_output
from md_renderer import output_stem, render_document
from models import ConversionStats
from pubtypes import PUBLICATION_TYPE_LABELS, classify

DEFAULT_MD_FOLDER = "my-md-folder"
DEFAULT_BIB_FOLDER = "my-bib-folder"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean environment variable ("1", "true", "yes", "on")."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line flags; environment variables supply the defaults."""
    parser = argparse.ArgumentParser(
        description="Convert BibTeX records to .md files for the Hugo Academic theme"
    )
    parser.add_argument(
        "bibfile",
        nargs="?",
        default=os.getenv("BIB2ACAD_BIBFILE", ""),
        help="Path to the .bib file to convert",
    )
    parser.add_argument(
        "--md-folder",
        default=os.getenv("BIB2ACAD_MD_FOLDER", DEFAULT_MD_FOLDER),
        help="Folder for the generated .md files (created if missing)",
    )
    parser.add_argument(
        "--bib-folder",
        default=os.getenv("BIB2ACAD_BIB_FOLDER", DEFAULT_BIB_FOLDER),
        help="Folder for the per-entry .bib files (created if missing)",
    )
    parser.add_argument(
        "--copy-bib",
        action=argparse.BooleanOptionalAction,
        default=_env_flag("BIB2ACAD_COPY_BIB", True),
        help="Also write one .bib file per entry",
    )
    parser.add_argument(
        "--abstract",
        action=argparse.BooleanOptionalAction,
        default=_env_flag("BIB2ACAD_ABSTRACT", True),
        help="Copy abstracts into the generated pages",
    )
    parser.add_argument(
        "--overwrite",
        action=argparse.BooleanOptionalAction,
        default=_env_flag("BIB2ACAD_OVERWRITE", False),
        help="Replace files that already exist",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Only log what would be written, without touching the disk",
    )
    return parser.parse_args(argv)


def run(
    bibfile: str | Path | None,
    md_folder: str | Path = DEFAULT_MD_FOLDER,
    bib_folder: str | Path = DEFAULT_BIB_FOLDER,
    copy_bib: bool = True,
    include_abstract: bool = True,
    overwrite: bool = False,
    dry_run: bool = False,
) -> ConversionStats | None:
    """Run one conversion pass over every record of bibfile.

    Returns:
        The run counters, or None when the input file is missing (nothing
        is written in that case).
    """
    try:
        bib_path = resolve_bibfile(bibfile)
    except (MissingInputError, FileNotFoundError) as exc:
        logging.error("%s", exc)
        return None

    md_dir = Path(md_folder)
    bib_dir = Path(bib_folder)
    if not dry_run:
        md_dir.mkdir(parents=True, exist_ok=True)
        if copy_bib:
            bib_dir.mkdir(parents=True, exist_ok=True)

    records = load_records(bib_path)
    stats = ConversionStats(total=len(records))

    for index, record in enumerate(records, start=1):
        pub_type = classify(record.entry_type)
        stem = output_stem(record)
        logging.info(
            "[%s/%s] %s (%s)",
            index,
            stats.total,
            record.key,
            PUBLICATION_TYPE_LABELS[pub_type],
        )

        md_path = md_dir / f"{stem}.md"
        bib_path_out = bib_dir / f"{stem}.bib"

        if dry_run:
            if overwrite or not output_exists(md_path):
                logging.info("[dry-run] Would write %s", md_path)
            if copy_bib and (overwrite or not output_exists(bib_path_out)):
                logging.info("[dry-run] Would write %s", bib_path_out)
            continue

        document = render_document(record, pub_type, include_abstract=include_abstract)
        if write_output(md_path, document, overwrite=overwrite):
            stats.md_written += 1
        else:
            stats.md_skipped += 1

        if copy_bib:
            if write_output(bib_path_out, render_bibtex(record), overwrite=overwrite):
                stats.bib_written += 1
            else:
                stats.bib_skipped += 1

    logging.info(
        "Run complete. records=%s md_written=%s md_skipped=%s bib_written=%s bib_skipped=%s",
        stats.total,
        stats.md_written,
        stats.md_skipped,
        stats.bib_written,
        stats.bib_skipped,
    )
    return stats


def main() -> None:
    """Initialize config and execute the conversion."""
    load_dotenv()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    args = parse_args()

    run(
        bibfile=args.bibfile,
        md_folder=args.md_folder,
        bib_folder=args.bib_folder,
        copy_bib=args.copy_bib,
        include_abstract=args.abstract,
        overwrite=args.overwrite,
        dry_run=args.dry_run,
    )


if __name__ == "__main__":
    main()
