"""Global pytest configuration.

Registers the shared graph fixtures in `tests.algorithms.sample_graphs` as a
plugin (so pytest applies assertion rewriting to it) and restores the global
traversal configuration after every test.
"""

from __future__ import annotations

from dataclasses import fields
from importlib.util import find_spec

import pytest

from graphwalk.config import TRAVERSAL_CONFIG

pytest_plugins: list[str] = []
if find_spec("tests.algorithms.sample_graphs") is not None:
    pytest_plugins = ["tests.algorithms.sample_graphs"]


@pytest.fixture(autouse=True)
def _restore_traversal_config():
    saved = {f.name: getattr(TRAVERSAL_CONFIG, f.name) for f in fields(TRAVERSAL_CONFIG)}
    yield
    for name, value in saved.items():
        setattr(TRAVERSAL_CONFIG, name, value)
