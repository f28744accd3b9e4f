"""Shared fixtures and helpers for the test suite.

Fixtures defined here are available to every test module in this directory;
plain helpers are imported with ``from conftest import ...``.
"""

import io
import logging

import pytest

from schema_compiler import convert_json_schema, loader


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def accepts(schema, value):
    """Compile ``schema`` and report whether it accepts ``value``."""
    return convert_json_schema(schema).is_valid(value)


def messages(validator, value):
    return [issue.message for issue in validator.validate(value).issues]


class Upload:
    """Minimal stand-in for a web framework's uploaded file object."""

    def __init__(self, data, content_type):
        self._buffer = io.BytesIO(data)
        self.content_type = content_type

    def read(self, *args):
        return self._buffer.read(*args)

    def tell(self):
        return self._buffer.tell()

    def seek(self, *args):
        return self._buffer.seek(*args)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _isolated_state():
    """Keep the schema cache and CLI logging setup from leaking between tests."""
    loader.clear_cache()
    package_logger = logging.getLogger("schema_compiler")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    loader.clear_cache()
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)


@pytest.fixture
def write_file(tmp_path):
    """Write ``content`` to ``tmp_path / name`` and return the path."""
    def _write(name, content):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write
