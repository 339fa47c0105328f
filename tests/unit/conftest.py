"""Mark every test under tests/unit/ as a unit test."""

import pytest


def pytest_collection_modifyitems(config, items):
    for item in items:
        if "tests/unit" in str(item.path):
            item.add_marker(pytest.mark.unit)
