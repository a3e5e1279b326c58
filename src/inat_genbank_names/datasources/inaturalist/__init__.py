"""iNaturalist observation data source.

Public API:
  - client: INatClient (rate-limited batch + per-observation requests)
  - observations: fetch_consensus_names
  - fields: ObservationFields, fetch_observation_fields
"""

from inat_genbank_names.datasources.inaturalist.client import MAX_PER_PAGE, INatClient
from inat_genbank_names.datasources.inaturalist.fields import (
    ObservationFields,
    fetch_observation_fields,
)
from inat_genbank_names.datasources.inaturalist.observations import fetch_consensus_names

__all__ = [
    "MAX_PER_PAGE",
    "INatClient",
    "ObservationFields",
    "fetch_consensus_names",
    "fetch_observation_fields",
]
