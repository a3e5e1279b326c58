"""Resolve a GenBank accession to its most specific classification name."""

from __future__ import annotations

import logging
from http.client import HTTPException
from urllib.error import HTTPError, URLError

from Bio.SeqRecord import SeqRecord

from inat_genbank_names.datasources.genbank.client import GenBankClient
from inat_genbank_names.schemas import FailureReason, FetchFailure

logger = logging.getLogger(__name__)

_NOT_FOUND_STATUSES = frozenset({400, 404})


def classification_chain(record: SeqRecord) -> list[str]:
    """
    Classification of a record, most specific entry first.

    GenBank stores the lineage root-first in ``taxonomy`` and the organism
    (the species-level name, possibly with a voucher tag) separately.
    """
    organism = record.annotations.get("organism")
    lineage = list(record.annotations.get("taxonomy") or [])
    chain = [organism] if organism else []
    chain.extend(reversed(lineage))
    return chain


def resolve_accession(accession: str, client: GenBankClient) -> str | FetchFailure:
    """
    Look up an accession and return the head of its classification chain.

    Args:
        accession: Accession id, already checked against the accession format.
        client: GenBank client (one rate-limited request is made).

    Returns:
        The most specific name, e.g. ``"Amanita sp. 'sp-S19'"``, or a
        FetchFailure whose reason separates connectivity problems, unknown
        accessions and records without species data.
    """
    try:
        record = client.fetch_record(accession)
    except HTTPError as e:
        if e.code in _NOT_FOUND_STATUSES:
            return FetchFailure(
                reason=FailureReason.NOT_FOUND,
                detail=f"accession {accession} may be invalid or no longer available",
            )
        return FetchFailure(reason=FailureReason.OTHER, detail=f"accession {accession}: {e}")
    except (URLError, HTTPException, OSError) as e:
        return FetchFailure(
            reason=FailureReason.CONNECTIVITY,
            detail=f"could not connect to GenBank server: {e}",
        )
    except ValueError as e:
        return FetchFailure(
            reason=FailureReason.NOT_FOUND,
            detail=f"no sequence returned for accession {accession}: {e}",
        )

    if not record.annotations.get("organism"):
        return FetchFailure(
            reason=FailureReason.MISSING_DATA,
            detail=f"no species information for accession {accession}",
        )
    return classification_chain(record)[0]
