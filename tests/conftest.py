"""Shared test fixtures and configuration."""

from __future__ import annotations

import pytest

from domain.services.local_index import LocalIndex
from domain.value_objects.catalog_entry import CatalogEntry
from domain.value_objects.compound_record import CompoundRecord
from tests.mocks import ManualScheduler, MockCompoundCatalog, make_catalog_entries


@pytest.fixture
def catalog_entries() -> list[CatalogEntry]:
    """Return a small catalog in a fixed order."""
    return make_catalog_entries()


@pytest.fixture
def local_index(catalog_entries: list[CatalogEntry]) -> LocalIndex:
    """Create a LocalIndex over the sample catalog."""
    return LocalIndex(entries=MockCompoundCatalog(catalog_entries).entries())


@pytest.fixture
def manual_scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def sample_compound_record() -> CompoundRecord:
    """Create a sample remote CompoundRecord."""
    return CompoundRecord(
        identifier=2519,
        display_name="caffeine",
        molecular_formula="C8H10N4O2",
        molecular_weight=194.19,
        iupac_name="1,3,7-trimethylpurine-2,6-dione",
        canonical_smiles="CN1C=NC2=C1C(=O)N(C(=O)N2C)C",
    )
