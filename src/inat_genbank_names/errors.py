"""
Error types.

Only failures that end a run are raised. Per-specimen failures are
returned as :class:`~inat_genbank_names.schemas.FetchFailure` values so they
never cross a batch boundary.
"""

from __future__ import annotations


class ReconcileError(Exception):
    """Base class for errors raised by this package."""


class BatchFetchError(ReconcileError):
    """The iNaturalist batch endpoint was unreachable or returned garbage.

    Consensus names are a hard dependency, so this aborts the run.
    """


class IdentifierFileError(ReconcileError):
    """An identifier file could not be read or held no observation ids."""
