"""Tests for structlog configuration."""

import logging
from collections.abc import Iterator

import pytest
import structlog

from equation_validator.logging import configure_logging, get_logger


@pytest.fixture
def reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


class TestConfigureLogging:
    def test_console_renderer_by_default(self, reset_structlog: None) -> None:
        configure_logging()
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_json_renderer(self, reset_structlog: None) -> None:
        configure_logging(json_output=True, level=logging.DEBUG)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_level_filtering(self, reset_structlog: None) -> None:
        configure_logging(level=logging.WARNING)
        wrapper = structlog.get_config()["wrapper_class"]
        assert wrapper is structlog.make_filtering_bound_logger(logging.WARNING)


class TestGetLogger:
    def test_returns_bindable_logger(self) -> None:
        logger = get_logger(__name__)
        assert hasattr(logger, "info")
        assert hasattr(logger, "bind")
