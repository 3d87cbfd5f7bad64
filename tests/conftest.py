"""Test configuration for pytest."""

import io
import logging

import pytest

from termprogress.terminal import fixed_width, no_width


class BrokenStream(io.StringIO):
    """A stream whose writes fail like a closed pipe."""

    def write(self, s):
        raise BrokenPipeError(32, "Broken pipe")


@pytest.fixture
def stream():
    """In-memory output sink."""
    return io.StringIO()


@pytest.fixture
def err_stream():
    """In-memory error sink."""
    return io.StringIO()


@pytest.fixture
def broken_stream():
    """Output sink that fails on every write."""
    return BrokenStream()


@pytest.fixture
def unknown_width():
    """Width oracle for output that is not a terminal."""
    return no_width


@pytest.fixture
def narrow():
    """Width oracle for a 30 column terminal."""
    return fixed_width(30)


@pytest.fixture(autouse=True)
def setup_test_environment(tmp_path, monkeypatch):
    """Isolate tests from the user's config files and environment."""
    import os

    monkeypatch.setenv("HOME", str(tmp_path))
    for key in list(os.environ):
        if key.startswith("TERMPROGRESS_"):
            monkeypatch.delenv(key)

    yield

    package_logger = logging.getLogger("termprogress")
    for handler in package_logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
