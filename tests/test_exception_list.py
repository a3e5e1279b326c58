"""
Tests for the curated exception list.
"""

from __future__ import annotations

import tomllib
from typing import TYPE_CHECKING

import pytest

from inat_genbank_names.exception_list import DEFAULT_EXCEPTIONS, ExceptionRegistry
from inat_genbank_names.schemas import ExceptionEntry

if TYPE_CHECKING:
    from pathlib import Path


class TestIsExcepted:
    """Exceptions only hold while the consensus name is unchanged."""

    def test_matching_name(self) -> None:
        registry = ExceptionRegistry([ExceptionEntry(id=7, expected_consensus_name="Genus A")])
        assert registry.is_excepted(7, "Genus A")

    def test_changed_name_no_longer_excepted(self) -> None:
        registry = ExceptionRegistry([ExceptionEntry(id=7, expected_consensus_name="Genus A")])
        assert not registry.is_excepted(7, "Genus B")

    def test_case_sensitive(self) -> None:
        registry = ExceptionRegistry([ExceptionEntry(id=7, expected_consensus_name="Genus A")])
        assert not registry.is_excepted(7, "genus a")

    def test_not_normalized(self) -> None:
        registry = ExceptionRegistry([ExceptionEntry(id=7, expected_consensus_name="Genus A")])
        assert not registry.is_excepted(7, "Genus  A")

    def test_unlisted_id(self) -> None:
        registry = ExceptionRegistry([ExceptionEntry(id=7, expected_consensus_name="Genus A")])
        assert not registry.is_excepted(8, "Genus A")

    def test_empty_registry(self) -> None:
        assert not ExceptionRegistry().is_excepted(7, "Genus A")


class TestRegistry:
    def test_default_entries(self) -> None:
        registry = ExceptionRegistry.default()
        assert len(registry) == len(DEFAULT_EXCEPTIONS)
        assert registry.is_excepted(4750485, "Dermocybe")
        assert registry.is_excepted(84403644, "Gymnopilus")

    def test_contains(self) -> None:
        assert 4750485 in ExceptionRegistry.default()

    def test_entries_read_only(self) -> None:
        registry = ExceptionRegistry.default()
        with pytest.raises(TypeError):
            registry.entries[1] = "Amanita"  # type: ignore[index]


class TestLoad:
    """Loading extra entries from TOML."""

    def test_no_file_gives_defaults(self) -> None:
        assert ExceptionRegistry.load(None).entries == ExceptionRegistry.default().entries

    def test_file_adds_and_overrides(self, tmp_path: Path) -> None:
        path = tmp_path / "exceptions.toml"
        path.write_text('[exceptions]\n"4750485" = "Cortinarius"\n"123" = "Russula"\n')

        registry = ExceptionRegistry.load(path)

        assert registry.is_excepted(123, "Russula")
        assert registry.is_excepted(4750485, "Cortinarius")
        assert not registry.is_excepted(4750485, "Dermocybe")
        assert registry.is_excepted(84403644, "Gymnopilus")

    def test_file_without_table(self, tmp_path: Path) -> None:
        path = tmp_path / "exceptions.toml"
        path.write_text("")
        assert len(ExceptionRegistry.load(path)) == len(DEFAULT_EXCEPTIONS)

    def test_non_integer_key(self, tmp_path: Path) -> None:
        path = tmp_path / "exceptions.toml"
        path.write_text('[exceptions]\nabc = "Russula"\n')
        with pytest.raises(ValueError):
            ExceptionRegistry.load(path)

    def test_non_string_value(self, tmp_path: Path) -> None:
        path = tmp_path / "exceptions.toml"
        path.write_text('[exceptions]\n"123" = 5\n')
        with pytest.raises(ValueError, match="must be a string"):
            ExceptionRegistry.load(path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "exceptions.toml"
        path.write_text("[exceptions\n")
        with pytest.raises(tomllib.TOMLDecodeError):
            ExceptionRegistry.load(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            ExceptionRegistry.load(tmp_path / "nope.toml")
