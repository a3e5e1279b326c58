"""iNat GenBank Names - flag iNaturalist observations whose GenBank name disagrees.

Architecture::

    datasources/   External sources (iNaturalist observations, GenBank accessions)
    services/      Shared utilities (HTTP session, process-wide rate limiter)
    names.py       Name normalization for comparison and display
    exception_list.py  Curated (observation, consensus name) suppressions
    analysis/      Cross-datasource logic (name reconciliation)
    pipeline.py    Batch orchestration: chunking, fetching, reconciling, stats
    renderers/     Mismatch table output
    flows/         Prefect entry point around the pipeline

Data flow: ids → pipeline → datasources (rate-limited) → analysis → renderers
"""

__version__ = "2.0.0"
__author__ = "Alan Rockefeller"

from inat_genbank_names.config import Settings
from inat_genbank_names.schemas import MismatchRecord, RunReport, RunStatistics, SpecimenRecord

__all__ = [
    "MismatchRecord",
    "RunReport",
    "RunStatistics",
    "Settings",
    "SpecimenRecord",
    "__version__",
]
