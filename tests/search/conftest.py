"""Shared fixtures for search algorithm tests."""
from __future__ import annotations

import pytest

from patternmatch.search.dispatch import ALGORITHMS


@pytest.fixture(params=sorted(ALGORITHMS))
def search(request):
    """Each registered search algorithm in turn."""
    return ALGORITHMS[request.param]
