"""
Test configuration for Nova tests
"""

import pytest
from pathlib import Path

project_root = Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def run_from_project_root(monkeypatch):
    # example programs are opened relative to the project root
    monkeypatch.chdir(project_root)
