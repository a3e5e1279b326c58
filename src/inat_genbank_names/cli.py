"""
Command-line interface.

Usage::

    inat-genbank-names [-v] [-q] <inat observation number>
    inat-genbank-names [-v] [-q] -f <filename>
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from inat_genbank_names import __version__
from inat_genbank_names.config import get_settings
from inat_genbank_names.errors import ReconcileError
from inat_genbank_names.id_list import (
    estimate_duration,
    parse_observation_id,
    read_observation_ids,
)
from inat_genbank_names.logging_config import setup_logging
from inat_genbank_names.pipeline import build_orchestrator
from inat_genbank_names.renderers.mismatch_table import MismatchTable
from inat_genbank_names.schemas import RunStatistics

logger = logging.getLogger(__name__)

#: Below this many ids the run is short enough not to announce.
ESTIMATE_THRESHOLD = 10


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="inat-genbank-names",
        description=(
            "Report iNaturalist observations whose species name does not match "
            "the GenBank record in their 'Genbank Accession Number' field"
        ),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Explain every comparison and print an API call summary",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only report observations without a valid accession number",
    )
    parser.add_argument(
        "-f",
        "--file",
        type=Path,
        default=None,
        help="File of observation numbers separated by spaces, commas or newlines",
    )
    parser.add_argument(
        "observation",
        nargs="?",
        default=None,
        help="iNaturalist observation number",
    )
    return parser


def collect_ids(args: argparse.Namespace, parser: argparse.ArgumentParser) -> list[int]:
    """Ids from ``-f`` or the positional argument; usage error if neither is valid."""
    if args.file is not None:
        return read_observation_ids(args.file)
    obs_id = parse_observation_id(args.observation) if args.observation else None
    if obs_id is None:
        parser.error("an iNaturalist observation number or -f <filename> is required")
    return [obs_id]


def print_summary(stats: RunStatistics) -> None:
    print("\n=== Summary ===")
    print(f"Total API calls made: {stats.total_external_calls}")
    print(f"Total observations processed: {stats.total_specimens_processed}")
    print(f"Average API calls per observation: {stats.average_calls_per_specimen:.2f}")


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(verbose=args.verbose, quiet=args.quiet, default=settings.log_level)

    try:
        ids = collect_ids(args, parser)
        if args.file is not None:
            logger.debug("Found %d observation IDs in file", len(ids))
        if len(ids) >= ESTIMATE_THRESHOLD and not args.quiet:
            print(
                f"Processing {len(ids)} observations. "
                f"Estimated time: {estimate_duration(len(ids))}",
                file=sys.stderr,
            )

        orchestrator = build_orchestrator(settings)
        table = MismatchTable(sys.stdout)
        report = orchestrator.run(ids, on_mismatch=table.write)
    except (ReconcileError, OSError, ValueError) as e:
        logger.error("%s", e)
        return 1

    if args.verbose:
        print_summary(report.statistics)
    return 0


if __name__ == "__main__":
    sys.exit(main())
