"""Consensus taxon names for a batch of observations."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import requests

from inat_genbank_names.datasources.inaturalist.client import MAX_PER_PAGE, INatClient
from inat_genbank_names.errors import BatchFetchError
from inat_genbank_names.schemas import UNKNOWN_TAXON

logger = logging.getLogger(__name__)


def _parse_consensus_names(data: Any) -> dict[int, str]:
    """Map observation id → taxon name from an /observations response."""
    if not isinstance(data, dict) or not isinstance(data.get("results"), list):
        raise BatchFetchError("iNaturalist API response is missing expected data structure")

    names: dict[int, str] = {}
    for result in data["results"]:
        if not isinstance(result, dict):
            continue
        obs_id = result.get("id")
        taxon = result.get("taxon")
        if taxon is not None and not isinstance(taxon, dict):
            raise BatchFetchError(
                f"iNaturalist API returned an invalid taxon for result {obs_id!r}"
            )
        if not isinstance(obs_id, int) or isinstance(obs_id, bool):
            raise BatchFetchError(
                f"iNaturalist API returned an invalid observation id {obs_id!r}"
            )
        name = (taxon or {}).get("name")
        if isinstance(name, str) and name:
            names[obs_id] = name
    return names


def fetch_consensus_names(observation_ids: Sequence[int], client: INatClient) -> dict[int, str]:
    """
    Fetch the community consensus taxon name for each observation in one call.

    Args:
        observation_ids: Up to ``MAX_PER_PAGE`` observation ids.
        client: iNaturalist client (one rate-limited request is made).

    Returns:
        Mapping with an entry for every requested id; ids the API did not
        return (or returned without a taxon) map to ``"Unknown"``.

    Raises:
        ValueError: If more than ``MAX_PER_PAGE`` ids are passed.
        BatchFetchError: If the request fails or the response is malformed.
    """
    if len(observation_ids) > MAX_PER_PAGE:
        raise ValueError(f"At most {MAX_PER_PAGE} ids per batch, got {len(observation_ids)}")

    logger.debug("Fetching batch of %d observations", len(observation_ids))
    try:
        data = client.get_observations(observation_ids)
    except requests.JSONDecodeError as e:
        raise BatchFetchError(f"Failed to decode JSON response from iNaturalist API: {e}") from e
    except requests.RequestException as e:
        raise BatchFetchError(f"API request for batch observations failed: {e}") from e
    except ValueError as e:
        raise BatchFetchError(f"Failed to decode JSON response from iNaturalist API: {e}") from e

    found = _parse_consensus_names(data)
    return {obs_id: found.get(obs_id, UNKNOWN_TAXON) for obs_id in observation_ids}
