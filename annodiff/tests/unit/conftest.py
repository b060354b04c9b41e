"""
Conftest for unit tests, none of these need a terminal or a git repository
unless they create one themselves.
"""
import shutil

import pytest


@pytest.fixture
def git_available():
    if not shutil.which('git'):
        pytest.skip("git executable not found")
