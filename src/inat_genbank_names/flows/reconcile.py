"""
Prefect flow for a reconciliation run.

Run locally:
    python -m inat_genbank_names.flows.reconcile observations.txt

Run with Prefect dashboard:
    prefect server start &
    python -m inat_genbank_names.flows.reconcile observations.txt
"""

from __future__ import annotations

import sys
from pathlib import Path

from prefect import flow, task

from inat_genbank_names.config import Settings, get_settings
from inat_genbank_names.id_list import read_observation_ids
from inat_genbank_names.pipeline import build_orchestrator
from inat_genbank_names.renderers.mismatch_table import MismatchTable
from inat_genbank_names.schemas import RunReport


@task(name="load-observation-ids")
def load_ids(path: str) -> list[int]:
    """Read observation ids from a file (whitespace or comma separated)."""
    return read_observation_ids(Path(path))


@flow(name="reconcile-names")
def reconcile_names(
    ids: list[int] | None = None,
    id_file: str | None = None,
    settings: Settings | None = None,
) -> RunReport:
    """
    Reconcile iNaturalist and GenBank names for the given observations.

    Pass either ``ids`` or ``id_file``. Mismatches are streamed to stdout as
    they are found and also returned in the report.

    No Prefect retries: a failed batch fetch aborts the run and per-specimen
    failures are skipped inside it.
    """
    if ids is None:
        if id_file is None:
            raise ValueError("Pass either ids or id_file")
        ids = load_ids(id_file)

    orchestrator = build_orchestrator(settings or get_settings())
    table = MismatchTable()
    report = orchestrator.run(ids, on_mismatch=table.write)

    stats = report.statistics
    print(
        f"Processed {stats.total_specimens_processed} observations with "
        f"{stats.total_external_calls} API calls; {stats.mismatches} mismatch(es)",
        file=sys.stderr,
    )
    return report


if __name__ == "__main__":
    if len(sys.argv) != 2:
        sys.exit("Usage: python -m inat_genbank_names.flows.reconcile <id file>")
    reconcile_names(id_file=sys.argv[1])
