"""Configures pytest further: opt-outs for slow and opt-ins for extreme bulk key generation tests."""
import pytest


def pytest_addoption(parser):
    parser.addoption("--skip-slow", action="store_true", default=False, help="skip slower bulk round-trip tests")
    parser.addoption("--run-extreme", action="store_true", default=False, help="run extremely slow bulk keygen tests")


def pytest_collection_modifyitems(config, items):
    skipdict = {}
    if config.getoption("--skip-slow"):
        skipdict["slow"] = pytest.mark.skip(reason="Slow test: needs no --skip-slow option")
    if not config.getoption("--run-extreme"):
        skipdict["extreme"] = pytest.mark.skip(reason="Extreme test: needs --run-extreme option")
    if not skipdict:
        return
    for item in items:
        for marker, skip in skipdict.items():
            if marker in item.keywords:
                item.add_marker(skip)
