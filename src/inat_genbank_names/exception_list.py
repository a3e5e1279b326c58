"""Curated exceptions: known, accepted iNaturalist/GenBank disagreements.

Each entry stores the observation id *and* the consensus name it was written
against. If the consensus name later changes, the entry stops matching and
the observation is reported again.
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Iterable, Mapping
from pathlib import Path  # noqa: TC003
from types import MappingProxyType

from inat_genbank_names.schemas import ExceptionEntry

logger = logging.getLogger(__name__)

DEFAULT_EXCEPTIONS: tuple[ExceptionEntry, ...] = (
    # Cortinarius sect. Sanguinei on iNaturalist, plain Cortinarius on GenBank
    ExceptionEntry(id=4750485, expected_consensus_name="Dermocybe"),
    # Gymnopilus on iNaturalist, Gymnopilus sp. 'Albogymnopilus nanus' on GenBank
    ExceptionEntry(id=84403644, expected_consensus_name="Gymnopilus"),
)


class ExceptionRegistry:
    """Read-only lookup of observation id → expected consensus name."""

    def __init__(self, entries: Iterable[ExceptionEntry] = ()) -> None:
        self._entries: Mapping[int, str] = MappingProxyType(
            {entry.id: entry.expected_consensus_name for entry in entries}
        )

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, observation_id: object) -> bool:
        return observation_id in self._entries

    @property
    def entries(self) -> Mapping[int, str]:
        return self._entries

    def is_excepted(self, observation_id: int, consensus_name: str) -> bool:
        """True only if the id is listed and its consensus name is unchanged (exact match)."""
        expected = self._entries.get(observation_id)
        return expected is not None and expected == consensus_name

    @classmethod
    def default(cls) -> ExceptionRegistry:
        return cls(DEFAULT_EXCEPTIONS)

    @classmethod
    def load(cls, path: Path | None = None) -> ExceptionRegistry:
        """
        Build the registry from the built-in table plus an optional TOML file.

        The file holds an ``[exceptions]`` table mapping observation ids
        (as quoted keys) to consensus names::

            [exceptions]
            "4750485" = "Dermocybe"

        File entries replace built-in entries with the same id.

        Raises:
            OSError: If the file cannot be read.
            tomllib.TOMLDecodeError: If the file is not valid TOML.
            ValueError: If a key is not an integer id or a value is not a string.
        """
        entries = {entry.id: entry for entry in DEFAULT_EXCEPTIONS}
        if path is not None:
            with path.open("rb") as f:
                table = tomllib.load(f).get("exceptions", {})
            for key, name in table.items():
                if not isinstance(name, str):
                    raise ValueError(
                        f"Exception for observation {key} must be a string, got {name!r}"
                    )
                entry = ExceptionEntry(id=int(key), expected_consensus_name=name)
                entries[entry.id] = entry
            logger.debug("Loaded %d exception(s) from %s", len(table), path)
        return cls(entries.values())
