"""Configuration from the environment and logging setup."""

import logging
import sys

import pytest

from schema_compiler.config import CompilerConfig
from schema_compiler.utils.logging_utils import configure_split_stream_logging, level_from_name


def test_defaults(monkeypatch):
    for name in ("LOG_LEVEL", "PRINT_LEVEL", "CACHE_ENABLED", "CHECK_SCHEMA"):
        monkeypatch.delenv(f"SCHEMA_COMPILER_{name}", raising=False)
    config = CompilerConfig.from_env()
    assert config == CompilerConfig()
    assert config.cache_enabled is True
    assert config.check_schema is False


def test_from_env(monkeypatch):
    monkeypatch.setenv("SCHEMA_COMPILER_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("SCHEMA_COMPILER_PRINT_LEVEL", "error")
    monkeypatch.setenv("SCHEMA_COMPILER_CACHE_ENABLED", "off")
    monkeypatch.setenv("SCHEMA_COMPILER_CHECK_SCHEMA", " Yes ")
    config = CompilerConfig.from_env()
    assert config.log_level == "DEBUG"
    assert config.print_level == "error"
    assert config.cache_enabled is False
    assert config.check_schema is True


@pytest.mark.parametrize("name,expected", [
    ("debug", logging.DEBUG),
    ("WARNING", logging.WARNING),
    ("verbose", logging.INFO),
])
def test_level_from_name(name, expected):
    assert level_from_name(name) == expected


def test_set_logging_configures_package_logger():
    logger = CompilerConfig(log_level="debug", print_level="error").set_logging()
    assert logger.name == "schema_compiler"
    assert logger.level == logging.DEBUG
    stdout_handler, stderr_handler = logger.handlers
    assert stdout_handler.stream is sys.stdout
    assert stderr_handler.stream is sys.stderr
    assert stderr_handler.level == logging.ERROR


def test_split_streams(capsys):
    logger = configure_split_stream_logging(logger_name="schema_compiler.test_split", stderr_level=logging.WARNING)
    logger.propagate = False
    try:
        logger.info("to stdout")
        logger.warning("to stderr")
    finally:
        logger.handlers.clear()
        logger.propagate = True

    captured = capsys.readouterr()
    assert "to stdout" in captured.out
    assert "to stderr" not in captured.out
    assert "schema_compiler.test_split - WARNING - to stderr" in captured.err


def test_set_logging_is_repeatable():
    config = CompilerConfig()
    config.set_logging()
    assert len(config.set_logging().handlers) == 2
