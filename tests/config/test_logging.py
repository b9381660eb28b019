"""Tests for structlog configuration."""

import logging

import pytest
import structlog

from padctl.config.logging import configure_logging


class TestConfigureLogging:
    def test_default_level_is_warning(self) -> None:
        configure_logging()
        assert logging.getLogger("padctl").level == logging.WARNING

    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("padctl").level == logging.DEBUG

    def test_single_stderr_handler(self) -> None:
        configure_logging()
        configure_logging()
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_json_mode_renders_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("padctl.test").debug("hello")
        err = capsys.readouterr().err
        assert '"event": "hello"' in err
