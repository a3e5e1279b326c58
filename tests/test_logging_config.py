"""
Tests for logging setup.
"""

from __future__ import annotations

import logging

from inat_genbank_names.logging_config import resolve_level, setup_logging


class TestResolveLevel:
    def test_default(self) -> None:
        assert resolve_level() == logging.INFO

    def test_verbose(self) -> None:
        assert resolve_level(verbose=True) == logging.DEBUG

    def test_quiet(self) -> None:
        assert resolve_level(quiet=True) == logging.ERROR

    def test_verbose_wins_over_quiet(self) -> None:
        assert resolve_level(verbose=True, quiet=True) == logging.DEBUG

    def test_configured_default(self) -> None:
        assert resolve_level(default="warning") == logging.WARNING

    def test_unknown_default_falls_back_to_info(self) -> None:
        assert resolve_level(default="chatty") == logging.INFO


class TestSetupLogging:
    def test_single_handler(self) -> None:
        package_logger = logging.getLogger("inat_genbank_names")
        saved_handlers, saved_level = package_logger.handlers[:], package_logger.level
        try:
            setup_logging(quiet=True)
            setup_logging(quiet=True)
            assert len(package_logger.handlers) == 1
            assert package_logger.level == logging.ERROR
        finally:
            package_logger.handlers[:] = saved_handlers
            package_logger.setLevel(saved_level)
