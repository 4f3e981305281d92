"""Domain layer exports."""

from domain.exceptions import DomainError, InfrastructureError
from domain.services.local_index import LocalIndex
from domain.value_objects import (
    CatalogEntry,
    CompoundRecord,
    Provenance,
    SearchSource,
    ShortQueryTable,
)

__all__ = [
    "CatalogEntry",
    "CompoundRecord",
    "DomainError",
    "InfrastructureError",
    "LocalIndex",
    "Provenance",
    "SearchSource",
    "ShortQueryTable",
]
