"""Pytest configuration and shared fixtures for comat tests."""

from collections.abc import Generator

import pytest

from comat.lib.transform import clear_cache


@pytest.fixture(autouse=True)
def fresh_template_cache() -> Generator[None]:
    """Start every test with an empty compiled-template cache.

    Yields:
        None

    Cleanup:
        Clears the cache again so cached results never leak between tests
    """
    clear_cache()
    yield
    clear_cache()

