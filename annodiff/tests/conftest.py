#!/usr/bin/env python3
import sys

import pytest
from loguru import logger


# https://loguru.readthedocs.io/en/latest/resources/migration.html#replacing-caplog-fixture-from-pytest-library
# Show loguru logs only if CICD pytest fails.
@pytest.fixture
def reportlog(pytestconfig):
    logging_plugin = pytestconfig.pluginmanager.getplugin("logging-plugin")
    handler_id = logger.add(logging_plugin.report_handler, format="{message}")
    yield
    logger.remove(handler_id)


@pytest.fixture
def restore_logger():
    """The CLI replaces the loguru sinks, put a plain stderr sink back afterwards."""
    yield
    logger.remove()
    logger.add(sys.stderr)
