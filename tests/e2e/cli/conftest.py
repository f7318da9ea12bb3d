"""Fixtures for end-to-end CLI tests."""

import logging

import pytest
from click.testing import CliRunner

# pylint: disable=redefined-outer-name


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated filesystem so log files stay local."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture(autouse=True)
def reset_logger_levels():
    """Undo per-logger levels set through -L so they do not leak between tests."""
    yield
    for name in ("strseq", "strseq.domain.coercion", "sqlalchemy"):
        logging.getLogger(name).setLevel(logging.NOTSET)
