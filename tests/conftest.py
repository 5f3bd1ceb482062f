"""
Shared pytest fixtures for all tests.
"""

from pathlib import Path

import pytest

from semantic_slicer.config.slicing.models import SlicerConfig
from semantic_slicer.services.slicing.slicer import Slicer
from tests.helpers import word_count

# ---------------------------------------------------------------------------
# Automatic test markers based on path
# ---------------------------------------------------------------------------
# Tests in ``tests/unit`` get the ``unit`` marker and tests in
# ``tests/integration`` get ``integration``, so ``pytest -m unit`` works
# without decorating every test.


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]):
    """Add the unit/integration marker from the directory a test lives in."""
    root_path = Path(config.rootdir)

    for item in items:
        rel_path = Path(item.fspath).resolve().relative_to(root_path).as_posix()

        if rel_path.startswith("tests/unit/"):
            item.add_marker("unit")
        elif rel_path.startswith("tests/integration/"):
            item.add_marker("integration")


@pytest.fixture
def make_slicer():
    """Build a Slicer that counts whitespace-separated words instead of tiktoken tokens."""

    def _make(separators=None, **config_kwargs) -> Slicer:
        config = SlicerConfig(**config_kwargs)
        return Slicer(config, separators=separators, token_counter=word_count)

    return _make
