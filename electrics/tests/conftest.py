import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from electrics.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Each test starts from default settings, unaffected by the caller's environment."""
    monkeypatch.delenv("ELECTRICS_INPUT_POLICY", raising=False)
    monkeypatch.delenv("ELECTRICS_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
