import pytest

from levenshtein_dql import config


@pytest.fixture(autouse=True)
def reset_configurations():
    """Drop named configurations registered by a previous test."""
    config._configurations.clear()
    yield
    config._configurations.clear()
