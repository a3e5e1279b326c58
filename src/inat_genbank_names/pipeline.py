"""
Batch orchestration.

Turns a list of observation ids into the minimum set of external calls:
one iNaturalist batch request per chunk of up to 200 ids, then one field
request per id, then one GenBank request per id that has a usable accession.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence

from inat_genbank_names.analysis.reconcile import reconcile
from inat_genbank_names.config import MAX_BATCH_SIZE, Settings
from inat_genbank_names.datasources.genbank import GenBankClient, resolve_accession
from inat_genbank_names.datasources.inaturalist import (
    INatClient,
    fetch_consensus_names,
    fetch_observation_fields,
)
from inat_genbank_names.exception_list import ExceptionRegistry
from inat_genbank_names.schemas import (
    FetchFailure,
    MismatchRecord,
    RunReport,
    RunStatistics,
    SpecimenRecord,
)
from inat_genbank_names.services.ratelimit import RateLimiter

logger = logging.getLogger(__name__)

MismatchCallback = Callable[[MismatchRecord], None]


def chunked(ids: Sequence[int], size: int) -> Iterator[Sequence[int]]:
    """Contiguous slices of ``ids``, each at most ``size`` long."""
    if size < 1:
        raise ValueError(f"Chunk size must be positive, got {size}")
    for start in range(0, len(ids), size):
        yield ids[start : start + size]


class BatchOrchestrator:
    """Fetches, resolves and reconciles observations in input order."""

    def __init__(
        self,
        inat: INatClient,
        genbank: GenBankClient,
        limiter: RateLimiter,
        exceptions: ExceptionRegistry,
        *,
        batch_size: int = MAX_BATCH_SIZE,
    ) -> None:
        if not 1 <= batch_size <= MAX_BATCH_SIZE:
            raise ValueError(f"batch_size must be between 1 and {MAX_BATCH_SIZE}, got {batch_size}")
        self.inat = inat
        self.genbank = genbank
        self.limiter = limiter
        self.exceptions = exceptions
        self.batch_size = batch_size

    def run(
        self,
        ids: Sequence[int],
        on_mismatch: MismatchCallback | None = None,
    ) -> RunReport:
        """
        Reconcile every id and collect mismatches.

        Args:
            ids: Observation ids; duplicates are processed independently.
            on_mismatch: Called with each mismatch as soon as it is found.

        Returns:
            Mismatches in input order plus run statistics.

        Raises:
            BatchFetchError: If a batch of consensus names cannot be fetched.
        """
        self.limiter.reset()
        report = RunReport()
        stats = report.statistics

        for chunk in chunked(ids, self.batch_size):
            consensus = fetch_consensus_names(chunk, self.inat)
            for obs_id in chunk:
                record = self._build_record(obs_id, consensus[obs_id], stats)
                if record is None:
                    continue
                mismatch = reconcile(record, self.exceptions)
                if mismatch is not None:
                    stats.mismatches += 1
                    report.mismatches.append(mismatch)
                    if on_mismatch is not None:
                        on_mismatch(mismatch)
                elif not record.has_valid_accession or record.accession_name is None:
                    stats.skipped += 1
                elif self.exceptions.is_excepted(obs_id, record.consensus_name):
                    stats.suppressed += 1

        stats.total_specimens_processed = len(ids)
        stats.total_external_calls = self.limiter.call_count
        return report

    def _build_record(
        self, obs_id: int, consensus_name: str, stats: RunStatistics
    ) -> SpecimenRecord | None:
        """Fill in one specimen from the field and accession sources.

        Returns None (after logging) when the field fetch fails.
        """
        fields = fetch_observation_fields(obs_id, self.inat)
        if isinstance(fields, FetchFailure):
            logger.warning("Observation %d skipped: %s", obs_id, fields)
            stats.skipped += 1
            return None

        record = SpecimenRecord(
            id=obs_id,
            consensus_name=consensus_name,
            provisional_name=fields.provisional_name,
            accession_id=fields.accession_id,
        )
        if not record.has_valid_accession:
            return record

        resolved = resolve_accession(record.accession_id, self.genbank)
        if isinstance(resolved, FetchFailure):
            record.accession_error = resolved
        else:
            record.accession_name = resolved
        return record


def build_orchestrator(settings: Settings) -> BatchOrchestrator:
    """Wire clients, the shared limiter and the exception list from settings."""
    limiter = RateLimiter(settings.min_request_interval)
    inat = INatClient(
        limiter,
        api_base=settings.inat_api_base,
        web_base=settings.inat_web_base,
        batch_timeout=settings.batch_timeout,
        field_timeout=settings.field_timeout,
    )
    genbank = GenBankClient(
        limiter,
        email=settings.entrez_email,
        api_key=settings.entrez_api_key,
    )
    exceptions = ExceptionRegistry.load(settings.exceptions_file)
    return BatchOrchestrator(
        inat, genbank, limiter, exceptions, batch_size=settings.batch_size
    )
