from collections.abc import Sequence
from typing import Protocol

from domain.value_objects.catalog_entry import CatalogEntry


class CompoundCatalog(Protocol):
    """Port for the static catalog of well-known compounds.

    The catalog is loaded once and never changes for the lifetime of the
    process. Implementations must return entries in a stable order.
    """

    def entries(self) -> Sequence[CatalogEntry]:
        """Return every catalog entry in catalog order."""
        ...
