# Browser tests run against a pre-rendered site: pytest tests/integration --base-url http://localhost:8080/
#
# The default `pytest` run does not recurse here (see norecursedirs in
# pyproject.toml). The sync Playwright session keeps an event loop running
# in the main thread, which would break asyncio.run() in the unit tests.

from pathlib import Path

import pytest

HERE = Path(__file__).parent


def pytest_collection_modifyitems(config, items):
    # Skip before any session fixture can launch a browser
    if config.getoption("base_url", None):
        return
    skip = pytest.mark.skip(reason="pass --base-url pointing at the rendered test documents")
    for item in items:
        if HERE in Path(str(item.fspath)).parents:
            item.add_marker(skip)
