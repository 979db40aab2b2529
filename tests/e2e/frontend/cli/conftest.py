"""Fixtures for end-to-end tests of the ``studybook`` command.

Every test runs inside an isolated filesystem with its own data file, so
nothing touches the per-user data or log directories.
"""

import logging

import pytest
from click.testing import CliRunner, Result

from studybook.entrypoints.cli.main import studybook

# pylint: disable=redefined-outer-name

DATA_FILE = "studybook.json"


@pytest.fixture(autouse=True)
def restore_logger_levels():
    """Undo per-logger levels that -L set during the test."""
    manager = logging.Logger.manager
    levels = {
        name: logger.level
        for name, logger in manager.loggerDict.items()
        if isinstance(logger, logging.Logger)
    }
    yield
    for name, logger in list(manager.loggerDict.items()):
        if isinstance(logger, logging.Logger):
            logger.setLevel(levels.get(name, logging.NOTSET))


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Provide an isolated filesystem context for tests using CliRunner."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def invoke(runner, fs):
    """Invoke ``studybook`` against the test data file.

    The flight recorder is off unless the test passes its own logging
    options; extra keyword arguments go to `CliRunner.invoke`.
    """

    def _invoke(*args: str, recorder: bool = False, **kwargs) -> Result:
        options = ["--data-path", DATA_FILE]
        if not recorder:
            options.append("--no-flight-recorder")
        return runner.invoke(studybook, [*options, *args], **kwargs)

    return _invoke


@pytest.fixture
def seeded(invoke):
    """Store two modules and three tasks, then return `invoke`."""
    for line in (
        "add-module m/CS2103T n/Software Engineering c/4",
        "add-module m/CS2101 n/Effective Communication c/4",
        "add-task m/CS2103T d/Finish UG",
        "add-task m/CS2103T d/Write tests pr/HIGH",
        "add-task m/CS2101 d/Draft report dl/31-10-2024",
    ):
        result = invoke("run", *line.split())
        assert result.exit_code == 0, result.output
    return invoke
