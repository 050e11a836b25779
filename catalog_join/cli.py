"""
One-shot batch join: read both exports from a working directory, write the
combined CSV next to them.

Exit status is 0 on success and 1 when an input cannot be read or the
output cannot be written. Nothing is written unless the whole join succeeds.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

import colorlog

from . import rules
from .join import join_catalogs
from .models import JoinConfig
from .parse import CatalogReadError, decode_text

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    log_format = "%(asctime)s:%(levelname)s:%(name)s: %(message)s"
    log_colors = {
        "DEBUG": "cyan",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bold_red",
    }
    handler = colorlog.StreamHandler()
    handler.setFormatter(colorlog.ColoredFormatter(f"%(log_color)s{log_format}", log_colors=log_colors))
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.INFO)


def _read_export(path: Path) -> str:
    logger.info("Reading %s", path)
    text, encoding = decode_text(path.read_bytes())
    if encoding != "utf-8":
        logger.warning("%s decoded as %s", path, encoding)
    return text


def run(workdir: Path, primary_name: str, secondary_name: str, output_name: str,
        config: Optional[JoinConfig] = None) -> int:
    """Join the exports under `workdir` and return a process exit status."""
    config = config or JoinConfig()
    primary_path = workdir / primary_name
    secondary_path = workdir / secondary_name
    output_path = workdir / output_name

    try:
        primary_text = _read_export(primary_path)
        secondary_text = _read_export(secondary_path)
    except (OSError, CatalogReadError) as e:
        logger.error("Could not read the input CSV files: %s", e)
        logger.error("Make sure %s and %s exist in %s", primary_name, secondary_name, workdir)
        return 1

    combined, stats = join_catalogs(primary_text, secondary_text, config)
    logger.info("English name lookup has %d entries", stats.lookup_entries)
    logger.info("Found %d matching items in %s", stats.rows, primary_name)
    if stats.lookup_misses:
        logger.warning("%d items have no English name", stats.lookup_misses)

    try:
        output_path.write_text(combined, encoding=rules.OUTPUT_ENCODING, newline="")
    except OSError as e:
        logger.error("Could not write output file %s: %s", output_path, e)
        return 1

    logger.info("Done, results saved to %s", output_path)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="catalog-join",
        description="Join the Chinese and English item exports and keep housing/fish items.",
    )
    parser.add_argument("--workdir", type=Path, default=Path("."),
                        help="Directory holding the exports (default: current directory)")
    parser.add_argument("--primary", default=rules.ITEM_CN_FILE,
                        help=f"Chinese item export (default: {rules.ITEM_CN_FILE})")
    parser.add_argument("--secondary", default=rules.ITEM_EN_FILE,
                        help=f"English item export (default: {rules.ITEM_EN_FILE})")
    parser.add_argument("--output", default=rules.OUTPUT_FILE,
                        help=f"Combined CSV to write (default: {rules.OUTPUT_FILE})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    return run(args.workdir, args.primary, args.secondary, args.output)


if __name__ == "__main__":
    raise SystemExit(main())
