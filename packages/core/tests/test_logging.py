"""Tests for core logging helpers."""

import logging

import pytest

from notion2anki_core.utils.logging import (
    PACKAGE_LOGGER,
    get_logger,
    log_exceptions,
    set_log_level,
)


@pytest.fixture(autouse=True)
def restore_level():
    package = logging.getLogger(PACKAGE_LOGGER)
    level = package.level
    yield
    package.setLevel(level)


class TestGetLogger:
    """Tests for logger lookup."""

    def test_module_logger_under_package(self) -> None:
        logger = get_logger("notion2anki_core.emit")
        assert logger.name == "notion2anki_core.emit"
        assert logger.parent is logging.getLogger(PACKAGE_LOGGER)

    def test_foreign_name_nested_under_package(self) -> None:
        assert get_logger("scratch").name == f"{PACKAGE_LOGGER}.scratch"

    def test_single_handler(self) -> None:
        get_logger("notion2anki_core.a")
        get_logger("notion2anki_core.b")
        assert len(logging.getLogger(PACKAGE_LOGGER).handlers) == 1


class TestSetLogLevel:
    """Tests for changing verbosity at runtime."""

    def test_existing_loggers_follow_level(self) -> None:
        """Test that loggers created before the change pick up the new level."""
        logger = get_logger("notion2anki_core.sources.notion")

        set_log_level("debug")
        assert logger.isEnabledFor(logging.DEBUG)

        set_log_level(logging.WARNING)
        assert not logger.isEnabledFor(logging.INFO)

    def test_unknown_level_rejected(self) -> None:
        with pytest.raises(ValueError):
            set_log_level("chatty")


class TestLogExceptions:
    """Tests for the exception logging decorator."""

    @pytest.mark.asyncio
    async def test_logs_and_reraises(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = get_logger("notion2anki_core.tests")

        @log_exceptions(logger)
        async def run() -> None:
            raise RuntimeError("listing failed")

        with caplog.at_level(logging.ERROR, logger=PACKAGE_LOGGER):
            with pytest.raises(RuntimeError):
                await run()

        assert "run aborted: listing failed" in caplog.text

    def test_rejects_plain_function(self) -> None:
        with pytest.raises(TypeError):
            log_exceptions(get_logger("notion2anki_core.tests"))(lambda: None)
