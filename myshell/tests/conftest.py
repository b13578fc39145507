"""
Pytest configuration for myshell tests.
"""
from pathlib import Path
import sys

import pytest


# Ensure the project root is on the Python path for all tests
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """
    Run the test inside a temporary directory, restoring the real one afterwards.
    """
    monkeypatch.chdir(tmp_path)
    return tmp_path
