"""Unit tests for logging configuration."""

import io
import json
import logging
import sys

import pytest

from larajinja import Container, LoggingServiceProvider
from larajinja.logging import JSONFormatter, LoggerConfig, getLogger


@pytest.fixture
def logger_name():
    name = "larajinja.test_logging"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


class TestGetLogger:
    """Logger naming."""

    def test_package_logger(self) -> None:
        assert getLogger().name == "larajinja"
        assert getLogger("larajinja").name == "larajinja"

    def test_bare_names_are_namespaced(self) -> None:
        assert getLogger("renderer").name == "larajinja.renderer"

    def test_module_names_are_kept(self) -> None:
        assert getLogger("larajinja.jinja.renderer").name == "larajinja.jinja.renderer"


class TestLoggerConfig:
    """Handler and formatter setup."""

    def test_json_output(self, logger_name) -> None:
        stream = io.StringIO()
        logger = LoggerConfig.setup_logger(logger_name, level="debug", format_type="json", stream=stream)

        logger.info("Rendered %s", "app/index", extra={"template": "app/index"})

        record = json.loads(stream.getvalue())
        assert record["level"] == "INFO"
        assert record["logger"] == logger_name
        assert record["message"] == "Rendered app/index"
        assert record["template"] == "app/index"

    def test_text_output(self, logger_name) -> None:
        stream = io.StringIO()
        logger = LoggerConfig.setup_logger(logger_name, level=logging.INFO, stream=stream)

        logger.info("hello")

        assert " - INFO - hello" in stream.getvalue()

    def test_level_from_environment(self, logger_name) -> None:
        logger = LoggerConfig.setup_logger(logger_name, environment="testing", stream=io.StringIO())

        assert logger.level == logging.ERROR
        assert LoggerConfig.get_level_by_environment("development") == logging.DEBUG
        assert LoggerConfig.get_level_by_environment("unknown") == logging.INFO

    def test_file_handler(self, logger_name, tmp_path) -> None:
        log_file = tmp_path / "logs" / "views.log"
        logger = LoggerConfig.setup_logger(logger_name, level="warning", file_path=log_file, stream=io.StringIO())

        logger.warning("written")
        for handler in logger.handlers:
            handler.flush()

        assert "written" in log_file.read_text(encoding="utf-8")
        assert len(logger.handlers) == 2

    def test_setup_replaces_handlers(self, logger_name) -> None:
        LoggerConfig.setup_logger(logger_name, stream=io.StringIO())
        logger = LoggerConfig.setup_logger(logger_name, stream=io.StringIO())

        assert len(logger.handlers) == 1

    def test_json_formatter_includes_exception(self) -> None:
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())

        output = json.loads(JSONFormatter().format(record))

        assert "ValueError: boom" in output["exception"]


class TestLoggingServiceProvider:
    """Provider driven setup."""

    def test_skipped_without_config(self) -> None:
        app = Container()
        app.register_provider(LoggingServiceProvider)

        assert not app.has("logger")
        assert app.providers == []

    def test_configures_named_logger(self, logger_name, tmp_path) -> None:
        app = Container({
            "logging": {
                "name": logger_name,
                "level": "info",
                "format": "json",
                "file": str(tmp_path / "views.log"),
            }
        })
        app.register_provider(LoggingServiceProvider)

        logger = app.make("logger")
        assert logger.name == logger_name
        assert logger.level == logging.INFO
        assert logger.propagate is False
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)
