"""Observation field values: GenBank accession and provisional species name."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import requests

from inat_genbank_names.datasources.inaturalist.client import INatClient
from inat_genbank_names.schemas import FailureReason, FetchFailure

logger = logging.getLogger(__name__)

ACCESSION_FIELD = "Genbank Accession Number"
PROVISIONAL_FIELD = "Provisional Species Name"

# =============================================================================
# Data Model
# =============================================================================


@dataclass
class ObservationFields:
    """The two observation fields the reconciliation needs; empty when unset."""

    accession_id: str = ""
    provisional_name: str = ""


# =============================================================================
# Parsing
# =============================================================================


def _parse_fields(data: Any) -> ObservationFields | None:
    """
    Pick out the known fields. Returns None if the field list is absent.

    Entries that are not objects, or whose ``observation_field`` is not an
    object, are skipped.

    Raises:
        ValueError: If the field list is present but is not a list.
    """
    if not isinstance(data, dict) or "observation_field_values" not in data:
        return None

    values = data["observation_field_values"] or []
    if not isinstance(values, list):
        raise ValueError(f"observation_field_values is a {type(values).__name__}, not a list")

    fields = ObservationFields()
    for entry in values:
        if not isinstance(entry, dict):
            continue
        field_def = entry.get("observation_field")
        if not isinstance(field_def, dict):
            continue
        name = field_def.get("name")
        value = entry.get("value")
        value = "" if value is None else str(value)
        if name == ACCESSION_FIELD:
            fields.accession_id = value
        elif name == PROVISIONAL_FIELD:
            fields.provisional_name = value
    return fields


# =============================================================================
# API Fetching
# =============================================================================


def fetch_observation_fields(
    observation_id: int, client: INatClient
) -> ObservationFields | FetchFailure:
    """
    Fetch the accession number and provisional name for one observation.

    Never raises for source problems: connection and HTTP errors, bad JSON,
    a field list of the wrong shape, or a response without observation fields
    come back as a FetchFailure.
    """
    try:
        data = client.get_observation_json(observation_id)
    except requests.JSONDecodeError as e:
        return FetchFailure(
            reason=FailureReason.MALFORMED,
            detail=f"Failed to decode JSON response for observation fields: {e}",
        )
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else None
        return FetchFailure(
            reason=FailureReason.NOT_FOUND if status == 404 else FailureReason.OTHER,
            detail=f"API request for observation fields failed with status {status}",
        )
    except requests.RequestException as e:
        return FetchFailure(
            reason=FailureReason.CONNECTIVITY,
            detail=f"API request for observation fields failed: {e}",
        )
    except ValueError as e:
        return FetchFailure(
            reason=FailureReason.MALFORMED,
            detail=f"Failed to decode JSON response for observation fields: {e}",
        )

    try:
        fields = _parse_fields(data)
    except ValueError as e:
        return FetchFailure(
            reason=FailureReason.MALFORMED,
            detail=f"Unexpected observation fields structure: {e}",
        )
    if fields is None:
        return FetchFailure(
            reason=FailureReason.MISSING_DATA,
            detail="No observation field values found",
        )
    return fields
