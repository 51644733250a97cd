"""
conftest.py – shared pytest bootstrap for the study assistant tests.

Pytest imports this module before collecting any test file, so it is the place to:
1) Put the project root on `sys.path` so imports like `from core ...` and `from api ...` resolve
   without an editable install.
2) Set environment defaults read by `config/__init__.py` at import time: no cosmetic reply delay,
   the rule-based backend, and no log file written during test runs.
"""

import os
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("REPLY_DELAY_MS", "0")
os.environ.setdefault("ASSISTANT_BACKEND", "rule_based")
os.environ.setdefault("LOG_FILE_PATH", "")


@pytest.fixture(autouse=True)
def fresh_pipelines():
    """Start every test without cached pipelines, so patched clients never leak between tests."""
    from pipelines import reset_pipelines

    reset_pipelines()
    yield
    reset_pipelines()
