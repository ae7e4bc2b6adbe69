"""Tests for output formatters and logging setup."""

import json
import logging
from pathlib import Path

import pytest
from rich.table import Table

from hookman.core.formatters import ConsoleFormatter, FormatterFactory, JSONFormatter
from hookman.core.log import LOGGER_NAME, configure_logging
from hookman.core.models import HookExecution, HookStatus


def test_factory_formats():
    """Test the factory returns the requested formatter."""
    assert isinstance(FormatterFactory.create("console"), ConsoleFormatter)
    assert isinstance(FormatterFactory.create("JSON"), JSONFormatter)

    with pytest.raises(ValueError):
        FormatterFactory.create("sarif")


def test_json_statuses():
    """Test installed hooks serialized as JSON."""
    statuses = [HookStatus(name="pre-commit", path=Path(".git/hooks/pre-commit"), executable=True)]

    data = json.loads(JSONFormatter(pretty=False).format_statuses(statuses))

    assert data == {
        "hooks": [{"name": "pre-commit", "path": str(Path(".git/hooks/pre-commit")), "executable": True}]
    }


def test_json_executions():
    """Test execution results serialized as JSON."""
    executions = [HookExecution(hook_name="pre-push", exit_code=3, output=["boom"])]

    data = json.loads(JSONFormatter().format_executions(executions))

    assert data["executions"][0]["result"] == "ERROR"
    assert data["executions"][0]["output"] == ["boom"]


def test_console_empty_statuses():
    """Test an empty listing renders a plain message."""
    assert ConsoleFormatter().format_statuses([]) == "Nenhum hook instalado em .git/hooks"


def test_console_executions_table():
    """Test executions render as a rich table."""
    executions = [
        HookExecution(hook_name="pre-commit", exit_code=0),
        HookExecution(hook_name="pre-push", exit_code=1),
    ]

    table = ConsoleFormatter().format_executions(executions)

    assert isinstance(table, Table)
    assert table.row_count == 2


def test_configure_logging_is_idempotent():
    """Test repeated configuration keeps a single handler."""
    configure_logging()
    logger = configure_logging(verbose=True)

    assert logger.name == LOGGER_NAME
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
