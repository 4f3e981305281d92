"""Domain service for instant substring search over the local compound catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from domain.value_objects.catalog_entry import CatalogEntry
    from domain.value_objects.compound_record import CompoundRecord

DEFAULT_LOCAL_LIMIT = 10


class LocalIndex:
    """In-memory index over a fixed catalog of well-known compounds.

    Results come back in catalog order, not ranked by relevance. The index
    performs no I/O and never raises for any query string.
    """

    def __init__(self, entries: Iterable[CatalogEntry], limit: int = DEFAULT_LOCAL_LIMIT) -> None:
        self._entries: tuple[CatalogEntry, ...] = tuple(entries)
        self._limit = limit

    def __len__(self) -> int:
        return len(self._entries)

    def search(self, query: str, limit: int | None = None) -> list[CompoundRecord]:
        """Match the query case-insensitively against entry names and formulas.

        Args:
            query: Partial name or formula typed by the user
            limit: Maximum number of matches, defaults to the index limit

        Returns:
            Matching records in catalog order. Empty for an empty query.

        """
        if not query:
            return []
        cap = self._limit if limit is None else limit
        lowered = query.lower()

        matches: list[CompoundRecord] = []
        for entry in self._entries:
            if len(matches) >= cap:
                break
            if entry.matches(lowered):
                matches.append(entry.to_record())
        return matches
