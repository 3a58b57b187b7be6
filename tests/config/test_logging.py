"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from mdbullets.config.logging import configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("mdbullets").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("mdbullets").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("mdbullets.test")
        log.warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "mdbullets.test"
        assert "timestamp" in parsed

    def test_style_scope_debug_is_structured(self, capfd: pytest.CaptureFixture[str]) -> None:
        from mdbullets.styles.bullets import automatic, with_bullet_style

        configure_logging(verbose=True, log_json=True)
        with_bullet_style(None, automatic(), lambda ctx: None)

        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Bullet style scope: AutomaticBulletStyle"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "mdbullets.styles.bullets"

    def test_third_party_debug_is_suppressed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("markdown_it").debug("parser noise")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1
