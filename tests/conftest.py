"""Pytest configuration for tests.

No sys.path hacks - tests should import from the installed secretgrab package.
"""

import pytest


def pytest_addoption(parser):
    """Add gated perf and browser test options."""
    parser.addoption(
        "--run-perf",
        action="store_true",
        default=False,
        help="Run performance sentinel benchmarks (gated)."
    )
    parser.addoption(
        "--run-browser",
        action="store_true",
        default=False,
        help="Run tests that drive a real Chromium (gated; needs `playwright install chromium`)."
    )


def pytest_collection_modifyitems(config, items):
    """Skip perf- and browser-marked tests unless their option is set."""
    gates = []
    if not config.getoption("--run-perf"):
        gates.append(("perf", pytest.mark.skip(reason="perf tests gated; pass --run-perf")))
    if not config.getoption("--run-browser"):
        gates.append(("browser", pytest.mark.skip(reason="browser tests gated; pass --run-browser")))
    for item in items:
        for keyword, skip in gates:
            if keyword in item.keywords:
                item.add_marker(skip)
