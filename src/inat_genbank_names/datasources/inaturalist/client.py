"""
iNaturalist HTTP client.

Two endpoints are used:
  - API v1 ``/observations?id=...`` for consensus taxon names in bulk
  - the website's ``/observations/<id>.json`` for observation field values,
    which the v1 search response does not name reliably

API docs: https://api.inaturalist.org/v1/docs/
Rate limits: ~1 req/sec, 10k/day
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import requests

from inat_genbank_names.services.http import create_session
from inat_genbank_names.services.ratelimit import RateLimiter

API_BASE = "https://api.inaturalist.org/v1"
WEB_BASE = "https://www.inaturalist.org"
MAX_PER_PAGE = 200  # API maximum for /observations

BATCH_TIMEOUT = 60  # seconds; batch responses are large
FIELD_TIMEOUT = 30


class INatClient:
    """Rate-limited access to the two iNaturalist endpoints."""

    def __init__(
        self,
        limiter: RateLimiter,
        *,
        session: requests.Session | None = None,
        api_base: str = API_BASE,
        web_base: str = WEB_BASE,
        batch_timeout: float = BATCH_TIMEOUT,
        field_timeout: float = FIELD_TIMEOUT,
    ) -> None:
        self.limiter = limiter
        self.session = session or create_session()
        self.api_base = api_base.rstrip("/")
        self.web_base = web_base.rstrip("/")
        self.batch_timeout = batch_timeout
        self.field_timeout = field_timeout

    def _get(self, url: str, params: dict[str, Any] | None, timeout: float) -> Any:
        """Rate-limited GET returning decoded JSON.

        Raises:
            requests.RequestException: On transport or HTTP status errors.
            ValueError: If the body is not JSON.
        """
        self.limiter.acquire()
        resp = self.session.get(url, params=params, timeout=timeout)
        resp.raise_for_status()
        return resp.json()

    def get_observations(self, observation_ids: Sequence[int]) -> Any:
        """GET /observations for up to ``MAX_PER_PAGE`` ids in one request."""
        params = {
            "id": ",".join(str(i) for i in observation_ids),
            "per_page": MAX_PER_PAGE,
        }
        return self._get(f"{self.api_base}/observations", params, self.batch_timeout)

    def get_observation_json(self, observation_id: int) -> Any:
        """GET /observations/<id>.json from the website."""
        return self._get(
            f"{self.web_base}/observations/{observation_id}.json", None, self.field_timeout
        )
