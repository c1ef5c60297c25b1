import os
import sys

import pytest

# Ensure project root and libs are importable in tests
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
LIBS = os.path.join(ROOT, "libs")
for p in (ROOT, LIBS):
    if p not in sys.path:
        sys.path.insert(0, p)

from tetcore.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop memoized settings so each test sees its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
