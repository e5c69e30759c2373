"""Root conftest — shared test configuration."""

import os

import pytest

from requirement.config import get_settings

# Settings tests must not inherit configuration from the developer's shell
for _key in [k for k in os.environ if k.startswith("REQUIREMENT_")]:
    del os.environ[_key]


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
