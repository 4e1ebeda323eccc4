import sys
from pathlib import Path

import pytest

# Ensure the project root is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from catalog_editor.controller import CatalogController  # noqa: E402
from catalog_editor.repository import CatalogStore  # noqa: E402


@pytest.fixture
def store():
    return CatalogStore([("A", 5.0), ("B", 7.0), ("C", 9.0)])


@pytest.fixture
def changes(store):
    seen = []
    store.subscribe(seen.append)
    return seen


@pytest.fixture
def controller(store):
    return CatalogController(store)
