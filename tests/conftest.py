import random

import pytest

## Fixtures for use in tests


@pytest.fixture
def rng(request):
    """A random number generator seeded by the test's name, for reproducibility."""
    return random.Random(request.node.nodeid)


## Command-line options


def pytest_addoption(parser):
    # option to skip very slow tests
    parser.addoption("--fast", action="store_true", help="skip very slow tests")


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: mark test as very slow")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--fast"):
        mark = pytest.mark.skip(reason="slow test skipped by --fast")
        for item in items:
            if "slow" in item.keywords:
                item.add_marker(mark)
