from __future__ import annotations

import pytest

from entity_hints.catalog import EntityCatalog


@pytest.fixture(scope="session")
def catalog() -> EntityCatalog:
    return EntityCatalog.load()
