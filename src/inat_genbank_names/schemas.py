"""
Domain models for name reconciliation.

Pydantic models for the records that flow between fetchers, the
reconciliation engine and the output table.
"""

from __future__ import annotations

import re
from enum import StrEnum

from pydantic import BaseModel, Field

#: Accession ids must be plain word characters; anything else counts as missing.
ACCESSION_PATTERN = re.compile(r"^[A-Za-z0-9_]+$")

UNKNOWN_TAXON = "Unknown"


# =============================================================================
# Fetch outcomes
# =============================================================================


class FailureReason(StrEnum):
    """Why a per-specimen fetch did not produce data."""

    CONNECTIVITY = "connectivity"
    NOT_FOUND = "not_found"
    MALFORMED = "malformed"
    MISSING_DATA = "missing_data"
    OTHER = "other"


class FetchFailure(BaseModel):
    """Non-fatal fetch error, returned instead of raised."""

    reason: FailureReason
    detail: str = ""

    def __str__(self) -> str:
        return f"{self.reason}: {self.detail}" if self.detail else str(self.reason)


# =============================================================================
# Specimens
# =============================================================================


class SpecimenRecord(BaseModel):
    """One input observation, filled in as each source answers."""

    id: int = Field(..., gt=0, description="iNaturalist observation id")
    consensus_name: str = UNKNOWN_TAXON
    provisional_name: str = ""
    accession_id: str = ""
    accession_name: str | None = None
    accession_error: FetchFailure | None = None

    @property
    def has_valid_accession(self) -> bool:
        return bool(ACCESSION_PATTERN.match(self.accession_id))


class ExceptionEntry(BaseModel):
    """Suppress an observation while its consensus name is still ``expected_consensus_name``."""

    model_config = {"frozen": True}

    id: int
    expected_consensus_name: str


class MismatchRecord(BaseModel):
    """A reportable disagreement, using display (not normalized) names."""

    id: int
    accession_display_name: str
    comparison_display_name: str


# =============================================================================
# Run results
# =============================================================================


class RunStatistics(BaseModel):
    """Counters for a single run."""

    total_external_calls: int = 0
    total_specimens_processed: int = 0
    mismatches: int = 0
    skipped: int = 0
    suppressed: int = 0

    @property
    def average_calls_per_specimen(self) -> float:
        return self.total_external_calls / (self.total_specimens_processed or 1)


class RunReport(BaseModel):
    """Everything a run produces."""

    mismatches: list[MismatchRecord] = Field(default_factory=list)
    statistics: RunStatistics = Field(default_factory=RunStatistics)
